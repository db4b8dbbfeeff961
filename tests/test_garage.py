#!/usr/bin/env python3
"""Tests for Garage class and the record-insertion flow."""

from datetime import date

import pytest
from fleet import Car, FuelRecord, Garage, MaintenanceRecord, Severity, assign_ids


@pytest.fixture
def garage():
    g = Garage()
    g.add_car("Toyota", "Camry", 2021, "123ABC01", 45000)
    return g


class TestAddCar:
    """Tests for car registration."""

    def test_ids_assigned_in_sequence(self, garage):
        second = garage.add_car("Kia", "Rio", 2019, "777KZ02", 60000)
        assert garage.cars[0].id == 1
        assert second.id == 2

    def test_mileage_defaults_to_zero(self, garage):
        car = garage.add_car("Lada", "Niva", 2024, "001AAA01")
        assert car.mileage == 0

    def test_insert_keeps_explicit_id(self, garage):
        garage.insert_car(Car(7, "Kia", "Rio", 2019, "777KZ02", 60000))
        car = garage.add_car("Lada", "Niva", 2024, "001AAA01")
        assert car.id == 8

    def test_insert_duplicate_id_raises(self, garage):
        with pytest.raises(ValueError, match="Duplicate car id 1"):
            garage.insert_car(Car(1, "Kia", "Rio", 2019, "777KZ02", 60000))
        assert len(garage.cars) == 1

    def test_get_car(self, garage):
        assert garage.get_car(1).name == "Toyota Camry"
        assert garage.get_car(99) is None


class TestMileageReconciliation:
    """The car's mileage only ratchets upward as records are added."""

    def test_fuel_with_higher_mileage_raises(self, garage):
        garage.add_fuel(1, "2025-02-01", 40, 9000, 45520)
        assert garage.get_car(1).mileage == 45520

    def test_fuel_with_lower_mileage_unchanged(self, garage):
        garage.add_fuel(1, "2024-12-01", 40, 9000, 44000)
        assert garage.get_car(1).mileage == 45000

    def test_maintenance_with_higher_mileage_raises(self, garage):
        garage.add_maintenance(1, "2025-02-01", "Repair", 46100, 30000)
        assert garage.get_car(1).mileage == 46100

    def test_maintenance_with_lower_mileage_unchanged(self, garage):
        garage.add_maintenance(1, "2024-10-01", "Repair", 40000, 30000)
        assert garage.get_car(1).mileage == 45000

    def test_only_owning_car_changes(self, garage):
        garage.add_car("Kia", "Rio", 2019, "777KZ02", 10000)
        garage.add_fuel(2, "2025-02-01", 40, 9000, 12000)
        assert garage.get_car(1).mileage == 45000
        assert garage.get_car(2).mileage == 12000

    def test_unknown_car_record_stored(self, garage):
        """A record for a missing car is kept but changes nothing."""
        record = garage.add_maintenance(
            99, "2025-02-01", "Repair", 50000, next_mileage=50100
        )
        assert record in garage.maintenance
        assert garage.get_car(1).mileage == 45000
        assert garage.reminders(today=date(2025, 2, 1)) == []


class TestAddMaintenance:
    """Tests for logging maintenance."""

    def test_record_ids_assigned(self, garage):
        first = garage.add_maintenance(1, "2025-01-15", "Oil Change", 45000)
        second = garage.add_maintenance(1, "2025-02-15", "Inspection", 45500)
        assert (first.id, second.id) == (1, 2)

    def test_interval_km_fills_next_mileage(self, garage):
        record = garage.add_maintenance(
            1, "2025-01-15", "Oil Change", 45200, 25000, interval_km=10000
        )
        assert record.next_mileage == 55200

    def test_interval_months_fills_next_date(self, garage):
        record = garage.add_maintenance(
            1, "2025-01-15", "Oil Change", 45200, 25000, interval_months=6
        )
        assert record.next_date == "2025-07-15"

    def test_explicit_thresholds_win(self, garage):
        record = garage.add_maintenance(
            1,
            "2025-01-15",
            "Oil Change",
            45200,
            next_mileage=50000,
            next_date="2025-03-01",
            interval_km=10000,
            interval_months=6,
        )
        assert record.next_mileage == 50000
        assert record.next_date == "2025-03-01"

    def test_no_thresholds(self, garage):
        record = garage.add_maintenance(1, "2025-01-15", "Repair", 45200)
        assert record.next_mileage is None
        assert record.next_date is None


class TestPerCarViews:
    """Tests for sorted history and derived views."""

    @pytest.fixture
    def loaded(self, garage):
        garage.add_car("Kia", "Rio", 2019, "777KZ02", 60000)
        garage.add_fuel(1, "2025-01-10", 45.5, 10000, 45000)
        garage.add_fuel(1, "2025-02-24", 43.8, 9900, 46050)
        garage.add_fuel(1, "2025-02-01", 41.2, 9300, 45520)
        garage.add_fuel(2, "2025-02-01", 30, 7000, 60400)
        garage.add_maintenance(1, "2025-01-15", "Oil Change", 45200, 25000)
        garage.add_maintenance(1, "2025-03-02", "Tire Rotation", 47100, 8000)
        garage.add_maintenance(2, "2025-02-10", "Repair", 60500, 50000)
        return garage

    def test_fuel_newest_first(self, loaded):
        dates = [f.date for f in loaded.get_fuel_for_car(1)]
        assert dates == ["2025-02-24", "2025-02-01", "2025-01-10"]

    def test_fuel_oldest_first(self, loaded):
        dates = [f.date for f in loaded.get_fuel_for_car(1, reverse=False)]
        assert dates == ["2025-01-10", "2025-02-01", "2025-02-24"]

    def test_maintenance_newest_first(self, loaded):
        types = [m.type for m in loaded.get_maintenance_for_car(1)]
        assert types == ["Tire Rotation", "Oil Change"]

    def test_total_cost(self, loaded):
        assert loaded.total_cost(1) == 10000 + 9900 + 9300 + 25000 + 8000
        assert loaded.total_cost(2) == 57000

    def test_average_consumption(self, loaded):
        # (41.2 + 43.8) L over 1050 km
        assert loaded.average_consumption(1) == "8.1"
        assert loaded.average_consumption(2) is None

    def test_price_trend(self, loaded):
        assert loaded.price_trend(1) == [
            ("2025-01-10", 220),
            ("2025-02-01", 226),
            ("2025-02-24", 226),
        ]

    def test_final_mileage(self, loaded):
        assert loaded.get_car(1).mileage == 47100
        assert loaded.get_car(2).mileage == 60500


class TestGarageReminders:
    """Tests for Garage.reminders."""

    def test_reminders_use_ratcheted_mileage(self, garage):
        garage.add_maintenance(1, "2025-01-15", "Oil Change", 45000, next_mileage=55000)
        assert garage.reminders(today=date(2025, 2, 1)) == []

        garage.add_fuel(1, "2025-05-01", 40, 9000, 54850)
        reminders = garage.reminders(today=date(2025, 5, 1))
        assert len(reminders) == 1
        assert reminders[0].severity == Severity.CRITICAL
        assert reminders[0].text == "Toyota Camry: Service due in 150 km"

    def test_threshold_overrides_passed_through(self, garage):
        garage.add_maintenance(
            1, "2025-01-15", "Inspection", 45000, next_date="2025-03-01"
        )
        today = date(2025, 2, 1)
        assert len(garage.reminders(today=today)) == 1
        assert garage.reminders(today=today, date_window_days=14) == []

    def test_inserted_records_kept(self, garage):
        record = MaintenanceRecord(None, 1, "2025-01-15", "Oil Change", 45000)
        fuel = FuelRecord(None, 1, "2025-01-15", 40, 9000, 45100)
        garage.insert_maintenance(record)
        garage.insert_fuel(fuel)
        assert record.id == 1
        assert fuel.id == 1
        assert garage.get_car(1).mileage == 45100

    def test_insert_duplicate_record_ids_raise(self, garage):
        garage.insert_maintenance(MaintenanceRecord(3, 1, "2025-01-15", "Repair", 45000))
        garage.insert_fuel(FuelRecord(3, 1, "2025-01-15", 40, 9000, 45100))
        with pytest.raises(ValueError, match="Duplicate maintenance id 3"):
            garage.insert_maintenance(
                MaintenanceRecord(3, 1, "2025-01-16", "Repair", 45000)
            )
        with pytest.raises(ValueError, match="Duplicate fuel id 3"):
            garage.insert_fuel(FuelRecord(3, 1, "2025-01-16", 40, 9000, 45200))
        assert garage.get_car(1).mileage == 45100


class TestAssignIds:
    """Tests for assign_ids."""

    def test_all_missing(self):
        assert assign_ids([None, None]) == [1, 2]

    def test_continues_after_highest_explicit(self):
        assert assign_ids([None, 1, None, 5]) == [6, 1, 7, 5]

    def test_empty(self):
        assert assign_ids([]) == []
