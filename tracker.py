#!/usr/bin/env python3
"""
CLI for vehicle fleet tracking.

Commands:
  status   - Show service reminders coming due by date or distance
  cars     - List vehicles with mileage and average consumption
  history  - View service and fuel history for one vehicle
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from fleet import (
    Car,
    FuelRecord,
    Garage,
    MaintenanceRecord,
    Reminder,
    load_garage,
    parse_date,
)

logger = logging.getLogger("fleet")

# =============================================================================
# Formatting helpers
# =============================================================================


def format_km(km: Optional[float]) -> str:
    """Format a distance for display."""
    return f"{km:,.0f}" if km is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"{cost:,.0f} ₸" if cost is not None else "-"


def format_consumption(avg: Optional[str]) -> str:
    """Format average consumption for display."""
    return f"{avg} L/100" if avg is not None else "-"


def setup_logging(verbose: bool = False) -> None:
    """Send fleet log messages to stderr. Safe to call again to change the level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)


# =============================================================================
# Status command
# =============================================================================


def make_reminder_table(reminders: List[Reminder], garage: Garage) -> List[List[str]]:
    """Convert reminders to table rows, most urgent first."""
    rows = []
    for reminder in sorted(reminders, key=lambda r: r.severity.value):
        car = garage.get_car(reminder.car_id)
        rows.append(
            [
                reminder.severity.label.upper(),
                car.license_plate if car else "-",
                reminder.text,
            ]
        )
    return rows


def cmd_status(args):
    """Show service reminders coming due."""
    garage = load_garage(args.fleet_file)
    today = parse_date(args.today) if args.today else None

    reminders = garage.reminders(
        today=today, date_window_days=args.days, mileage_window=args.km
    )

    print(f"Vehicles: {len(garage.cars)}")
    print(f"Service records: {len(garage.maintenance)}")
    if today:
        print(f"As of: {today.isoformat()}")
    print()

    if not reminders:
        print("Nothing due soon.")
        return 0

    critical = sum(1 for r in reminders if r.is_critical)
    print(f"ATTENTION NEEDED ({len(reminders)} reminders, {critical} critical):")
    headers = ["Severity", "Plate", "Reminder"]
    print(
        tabulate(
            make_reminder_table(reminders, garage), headers=headers, tablefmt="simple"
        )
    )

    return 0


# =============================================================================
# Cars command
# =============================================================================


def make_car_table(cars: List[Car], garage: Garage) -> List[List[str]]:
    """Convert cars to table rows."""
    rows = []
    for car in cars:
        rows.append(
            [
                str(car.id),
                car.name,
                car.license_plate,
                str(car.year),
                format_km(car.mileage),
                format_consumption(garage.average_consumption(car.id)),
            ]
        )
    return rows


def cmd_cars(args):
    """List vehicles."""
    garage = load_garage(args.fleet_file)

    if not garage.cars:
        print("No cars yet.")
        return 0

    headers = ["ID", "Vehicle", "Plate", "Year", "Mileage (km)", "Avg"]
    print(
        tabulate(
            make_car_table(garage.cars, garage), headers=headers, tablefmt="simple"
        )
    )
    return 0


# =============================================================================
# History command
# =============================================================================


def make_service_table(records: List[MaintenanceRecord]) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    rows = []
    for record in records:
        rows.append(
            [
                record.date,
                record.type,
                format_km(record.mileage),
                format_cost(record.cost),
                format_km(record.next_mileage),
                record.next_date or "-",
            ]
        )
    return rows


def make_fuel_table(records: List[FuelRecord]) -> List[List[str]]:
    """Convert fuel records to table rows."""
    rows = []
    for record in records:
        rows.append(
            [
                record.date,
                f"{record.liters:g} L",
                format_cost(record.cost),
                format_km(record.mileage),
                format_cost(record.price_per_liter),
            ]
        )
    return rows


def cmd_history(args):
    """View service and fuel history for one vehicle."""
    garage = load_garage(args.fleet_file)

    car = garage.get_car(args.car_id)
    if car is None:
        print(f"Error: Unknown car id {args.car_id}")
        print("\nAvailable cars:")
        for c in garage.cars:
            print(f"  {c.id}: {c.name} ({c.license_plate})")
        return 1

    services = garage.get_maintenance_for_car(car.id, reverse=not args.asc)
    fills = garage.get_fuel_for_car(car.id, reverse=not args.asc)

    # Header
    print(f"Vehicle: {car.name}")
    print(f"Plate: {car.license_plate} ({car.year})")
    print(f"Current mileage: {format_km(car.mileage)} km")
    print(f"Avg consumption: {format_consumption(garage.average_consumption(car.id))}")
    total_cost = garage.total_cost(car.id)
    if total_cost > 0:
        print(f"Total cost: {format_cost(total_cost)}")
    print()

    print("SERVICE HISTORY:")
    if services:
        headers = ["Date", "Type", "Mileage", "Cost", "Next (km)", "Next (date)"]
        print(tabulate(make_service_table(services), headers=headers, tablefmt="simple"))
    else:
        print("  No maintenance records")
    print()

    print("FUEL HISTORY:")
    if fills:
        headers = ["Date", "Liters", "Cost", "Mileage", "Price/L"]
        print(tabulate(make_fuel_table(fills), headers=headers, tablefmt="simple"))
    else:
        print("  No fuel records")

    trend = garage.price_trend(car.id)
    if len(trend) > 1:
        print()
        print("FUEL PRICE TREND:")
        print(
            tabulate(
                [[d, format_cost(p)] for d, p in trend],
                headers=["Date", "Price/L"],
                tablefmt="simple",
            )
        )

    return 0


# =============================================================================
# Main
# =============================================================================


def main():
    parser = argparse.ArgumentParser(
        description="Vehicle fleet tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/demo.yaml status
  %(prog)s fleets/demo.yaml status --today 2025-07-01 --days 14
  %(prog)s fleets/demo.yaml cars
  %(prog)s fleets/demo.yaml history 1
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="Show service reminders coming due"
    )
    status_parser.add_argument(
        "--today",
        type=str,
        help="Reference date in YYYY-MM-DD format (default: today)",
    )
    status_parser.add_argument(
        "--days",
        type=int,
        default=30,
        help="Remind this many days before a due date (default: 30)",
    )
    status_parser.add_argument(
        "--km",
        type=int,
        default=1000,
        help="Remind this many km before a due mileage (default: 1000)",
    )

    # Cars subcommand
    subparsers.add_parser("cars", help="List vehicles")

    # History subcommand
    history_parser = subparsers.add_parser(
        "history", help="View service and fuel history for a vehicle"
    )
    history_parser.add_argument(
        "car_id",
        type=int,
        help="Car id (see the cars command)",
    )
    history_parser.add_argument(
        "--asc",
        action="store_true",
        help="Oldest first instead of newest first",
    )

    args = parser.parse_args()
    setup_logging(args.verbose)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    # Dispatch to command handler
    if args.command == "status":
        return cmd_status(args)
    elif args.command == "cars":
        return cmd_cars(args)
    elif args.command == "history":
        return cmd_history(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
