"""
Derived-data engine.

Pure functions over the car, maintenance and fuel collections. Nothing here
keeps state; every call recomputes from the collections passed in.
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from .car import Car
from .fuel_record import FuelRecord
from .maintenance_record import MaintenanceRecord
from .reminder import Reminder
from .calculations import check_severity, format_tenths, parse_date, round_half_up

logger = logging.getLogger(__name__)


def average_fuel_consumption(
    car_id: int, fuel_records: Iterable[FuelRecord]
) -> Optional[str]:
    """
    Average consumption in liters per 100 km, as a one-decimal string.

    Fills are ordered by odometer. Each fill's liters are counted against the
    distance since the previous fill, so the lowest reading only sets the
    baseline and its liters are not counted.

    Returns None with fewer than two fills or zero total distance.
    """
    fills = sorted(
        (f for f in fuel_records if f.car_id == car_id), key=lambda f: f.mileage
    )
    if len(fills) < 2:
        return None

    total_km = 0
    total_liters = 0.0
    for prev, fill in zip(fills, fills[1:]):
        total_km += fill.mileage - prev.mileage
        total_liters += fill.liters

    if total_km == 0:
        return None
    return format_tenths(total_liters / total_km * 100)


def derive_reminders(
    cars: Iterable[Car],
    maintenance_records: Iterable[MaintenanceRecord],
    today: Optional[date] = None,
    date_window_days: int = 30,
    date_critical_days: int = 7,
    mileage_window: int = 1000,
    mileage_critical: int = 200,
) -> List[Reminder]:
    """
    Reminders for every next-service threshold that is close.

    Date and mileage thresholds are checked independently, so one record can
    produce two reminders. Records whose car is missing are skipped.

    Args:
        today: Reference date (default: date.today())
        date_window_days: Days ahead a due date starts producing reminders
        date_critical_days: Fewer days left than this is critical
        mileage_window: Distance ahead a due mileage starts producing reminders
        mileage_critical: Less distance left than this is critical
    """
    if today is None:
        today = date.today()
    cars_by_id: Dict[int, Car] = {car.id: car for car in cars}
    reminders: List[Reminder] = []

    for record in maintenance_records:
        car = cars_by_id.get(record.car_id)
        if car is None:
            logger.debug(
                "Skipping maintenance record %s: no car with id %s",
                record.id,
                record.car_id,
            )
            continue

        if record.next_date:
            days_left = (parse_date(record.next_date) - today).days
            severity = check_severity(days_left, date_window_days, date_critical_days)
            if severity is not None:
                reminders.append(
                    Reminder(
                        id=f"date-{record.id}",
                        car_id=car.id,
                        text=f"{car.name}: Service due in {days_left} days",
                        severity=severity,
                    )
                )

        if record.next_mileage:
            km_left = record.next_mileage - car.mileage
            severity = check_severity(km_left, mileage_window, mileage_critical)
            if severity is not None:
                reminders.append(
                    Reminder(
                        id=f"km-{record.id}",
                        car_id=car.id,
                        text=f"{car.name}: Service due in {km_left} km",
                        severity=severity,
                    )
                )

    return reminders


def fuel_price_trend(
    car_id: int, fuel_records: Iterable[FuelRecord], limit: int = 5
) -> List[Tuple[str, int]]:
    """Price per liter of the car's last few fills, oldest first."""
    fills = sorted(
        (f for f in fuel_records if f.car_id == car_id and f.liters),
        key=lambda f: parse_date(f.date),
    )
    if limit <= 0:
        return []
    return [(f.date, round_half_up(f.price_per_liter)) for f in fills[-limit:]]
