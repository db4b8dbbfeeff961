"""Garage class - in-memory owner of the fleet collections."""

import logging
from datetime import date
from typing import List, Optional, Tuple

from .car import Car
from .fuel_record import FuelRecord
from .maintenance_record import MaintenanceRecord
from .reminder import Reminder
from .calculations import calc_next_date, calc_next_mileage, parse_date, ratchet_mileage
from .engine import average_fuel_consumption, derive_reminders, fuel_price_trend

logger = logging.getLogger(__name__)


def _next_id(items) -> int:
    return max((item.id for item in items if item.id is not None), default=0) + 1


def _check_unique(items, new_id: int, kind: str) -> None:
    if any(item.id == new_id for item in items):
        raise ValueError(f"Duplicate {kind} id {new_id}")


def assign_ids(ids: List[Optional[int]]) -> List[int]:
    """
    Fill in missing ids without colliding with explicit ones.

    Missing ids continue from the highest explicit id, in list order.
    """
    next_id = max((i for i in ids if i is not None), default=0) + 1
    resolved = []
    for i in ids:
        if i is None:
            i = next_id
            next_id += 1
        resolved.append(i)
    return resolved


class Garage:
    """Cars with their maintenance and fuel history."""

    def __init__(self):
        self.cars: List[Car] = []
        self.maintenance: List[MaintenanceRecord] = []
        self.fuel: List[FuelRecord] = []

    def get_car(self, car_id: int) -> Optional[Car]:
        """Find a car by id."""
        for car in self.cars:
            if car.id == car_id:
                return car
        return None

    # -------------------------------------------------------------------------
    # Record insertion
    # -------------------------------------------------------------------------

    def insert_car(self, car: Car) -> Car:
        """
        Add a car, assigning max existing id + 1 when it has none.

        Raises ValueError if the car's id is already taken.
        """
        if car.id is None:
            car.id = _next_id(self.cars)
        else:
            _check_unique(self.cars, car.id, "car")
        self.cars.append(car)
        return car

    def insert_maintenance(self, record: MaintenanceRecord) -> MaintenanceRecord:
        """Add a maintenance record and ratchet the car's mileage."""
        if record.id is None:
            record.id = _next_id(self.maintenance)
        else:
            _check_unique(self.maintenance, record.id, "maintenance")
        self.maintenance.append(record)
        self._reconcile_mileage(record.car_id, record.mileage)
        return record

    def insert_fuel(self, record: FuelRecord) -> FuelRecord:
        """Add a fuel record and ratchet the car's mileage."""
        if record.id is None:
            record.id = _next_id(self.fuel)
        else:
            _check_unique(self.fuel, record.id, "fuel")
        self.fuel.append(record)
        self._reconcile_mileage(record.car_id, record.mileage)
        return record

    def _reconcile_mileage(self, car_id: int, mileage: Optional[int]) -> None:
        car = self.get_car(car_id)
        if car is None:
            # Stored anyway; derivation skips it.
            logger.warning("Record added for unknown car id %s", car_id)
            return
        old_miles = car.mileage
        if ratchet_mileage(car, mileage):
            logger.debug(
                "Car %s mileage raised from %s to %s", car.id, old_miles, car.mileage
            )

    def add_car(
        self,
        brand: str,
        model: str,
        year: int,
        license_plate: str,
        mileage: int = 0,
    ) -> Car:
        """Register a new car."""
        return self.insert_car(Car(None, brand, model, year, license_plate, mileage or 0))

    def add_maintenance(
        self,
        car_id: int,
        date: str,
        type: str,
        mileage: int,
        cost: float = 0,
        next_mileage: Optional[int] = None,
        next_date: Optional[str] = None,
        interval_km: Optional[int] = None,
        interval_months: Optional[float] = None,
    ) -> MaintenanceRecord:
        """
        Log a service performed on a car.

        interval_km / interval_months fill in next_mileage / next_date when
        those are not given explicitly.
        """
        if next_mileage is None:
            next_mileage = calc_next_mileage(mileage, interval_km)
        if next_date is None:
            due = calc_next_date(date, interval_months)
            next_date = due.isoformat() if due else None

        return self.insert_maintenance(
            MaintenanceRecord(
                None, car_id, date, type, mileage, cost, next_mileage, next_date
            )
        )

    def add_fuel(
        self, car_id: int, date: str, liters: float, cost: float, mileage: int
    ) -> FuelRecord:
        """Log a fill-up."""
        return self.insert_fuel(FuelRecord(None, car_id, date, liters, cost, mileage))

    # -------------------------------------------------------------------------
    # Per-car views
    # -------------------------------------------------------------------------

    def get_maintenance_for_car(
        self, car_id: int, reverse: bool = True
    ) -> List[MaintenanceRecord]:
        """Maintenance records for a car, newest first by default."""
        records = [m for m in self.maintenance if m.car_id == car_id]
        return sorted(records, key=lambda m: parse_date(m.date), reverse=reverse)

    def get_fuel_for_car(self, car_id: int, reverse: bool = True) -> List[FuelRecord]:
        """Fuel records for a car, newest first by default."""
        records = [f for f in self.fuel if f.car_id == car_id]
        return sorted(records, key=lambda f: parse_date(f.date), reverse=reverse)

    def total_cost(self, car_id: int) -> float:
        """Total spent on a car: maintenance plus fuel."""
        service = sum(m.cost or 0 for m in self.maintenance if m.car_id == car_id)
        fuel = sum(f.cost or 0 for f in self.fuel if f.car_id == car_id)
        return service + fuel

    def average_consumption(self, car_id: int) -> Optional[str]:
        return average_fuel_consumption(car_id, self.fuel)

    def price_trend(self, car_id: int, limit: int = 5) -> List[Tuple[str, int]]:
        return fuel_price_trend(car_id, self.fuel, limit)

    def reminders(self, today: Optional[date] = None, **thresholds) -> List[Reminder]:
        """Reminders across the fleet. See derive_reminders for thresholds."""
        return derive_reminders(self.cars, self.maintenance, today, **thresholds)
