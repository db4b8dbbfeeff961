#!/usr/bin/env python3
"""Tests for MaintenanceRecord and FuelRecord classes."""

from fleet import FuelRecord, MaintenanceRecord


class TestMaintenanceRecord:
    """Tests for MaintenanceRecord class."""

    def test_required_attributes(self):
        record = MaintenanceRecord(1, 2, "2025-01-15", "Oil Change", 45000)
        assert record.id == 1
        assert record.car_id == 2
        assert record.date == "2025-01-15"
        assert record.type == "Oil Change"
        assert record.mileage == 45000

    def test_optional_attributes_default(self):
        """Cost defaults to 0, next-service thresholds to None."""
        record = MaintenanceRecord(1, 2, "2025-01-15", "Repair", 45000)
        assert record.cost == 0
        assert record.next_mileage is None
        assert record.next_date is None

    def test_next_service_attributes(self):
        record = MaintenanceRecord(
            id=1,
            car_id=2,
            date="2025-01-15",
            type="Oil Change",
            mileage=45000,
            cost=25000,
            next_mileage=55000,
            next_date="2025-07-15",
        )
        assert record.cost == 25000
        assert record.next_mileage == 55000
        assert record.next_date == "2025-07-15"


class TestFuelRecord:
    """Tests for FuelRecord class."""

    def test_attributes(self):
        record = FuelRecord(3, 1, "2025-02-01", 41.2, 9300, 45520)
        assert record.id == 3
        assert record.car_id == 1
        assert record.date == "2025-02-01"
        assert record.liters == 41.2
        assert record.cost == 9300
        assert record.mileage == 45520

    def test_price_per_liter(self):
        record = FuelRecord(1, 1, "2025-02-01", 40, 9000, 45520)
        assert record.price_per_liter == 225

    def test_price_per_liter_zero_liters(self):
        """No division by zero for an empty fill."""
        record = FuelRecord(1, 1, "2025-02-01", 0, 9000, 45520)
        assert record.price_per_liter is None
