"""
Vehicle fleet tracking models.

This package provides data models and derived views for a small fleet:
- Car: Vehicle identification and current mileage
- MaintenanceRecord / FuelRecord: Logged service and fuel events
- Reminder / Severity: Upcoming service notifications
- Garage: In-memory aggregate owning the three collections
- engine: Average consumption, reminders and fuel price trend
"""

from .severity import Severity
from .car import Car
from .maintenance_record import MaintenanceRecord
from .fuel_record import FuelRecord
from .reminder import Reminder
from .calculations import (
    calc_next_date,
    calc_next_mileage,
    check_severity,
    parse_date,
    ratchet_mileage,
)
from .engine import average_fuel_consumption, derive_reminders, fuel_price_trend
from .garage import Garage, assign_ids
from .loader import load_garage

__all__ = [
    "Severity",
    "Car",
    "MaintenanceRecord",
    "FuelRecord",
    "Reminder",
    "Garage",
    "assign_ids",
    "calc_next_date",
    "calc_next_mileage",
    "check_severity",
    "parse_date",
    "ratchet_mileage",
    "average_fuel_consumption",
    "derive_reminders",
    "fuel_price_trend",
    "load_garage",
]
