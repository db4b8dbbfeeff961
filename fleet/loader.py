"""YAML loading for fleet snapshot files."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .car import Car
from .maintenance_record import MaintenanceRecord
from .fuel_record import FuelRecord
from .garage import Garage, assign_ids


def _parse_object(
    dct: Dict[str, Any]
) -> Union[Car, MaintenanceRecord, FuelRecord, Garage, dict]:
    """Parse dictionary into appropriate object type."""
    # Car object
    if "licensePlate" in dct:
        return Car(
            dct.get("id"),
            dct["brand"],
            dct["model"],
            dct["year"],
            dct["licensePlate"],
            dct.get("mileage") or 0,
        )
    # Fuel record
    elif "carId" in dct and "liters" in dct:
        return FuelRecord(
            dct.get("id"),
            dct["carId"],
            dct["date"],
            dct["liters"],
            dct["cost"],
            dct["mileage"],
        )
    # Maintenance record
    elif "carId" in dct and "type" in dct:
        return MaintenanceRecord(
            dct.get("id"),
            dct["carId"],
            dct["date"],
            dct["type"],
            dct["mileage"],
            dct.get("cost") or 0,
            dct.get("nextMileage"),
            dct.get("nextDate"),
        )
    # Top-level fleet object
    elif "cars" in dct:
        return _build_garage(dct)
    else:
        return dct


def _build_garage(dct: Dict[str, Any]) -> Garage:
    """Insert parsed records in file order so car mileage ratchets as it would live."""
    cars = dct.get("cars") or []
    maintenance = dct.get("maintenance") or []
    fuel = dct.get("fuel") or []

    # Missing ids are resolved against every explicit id in the file first
    for items in (cars, maintenance, fuel):
        for item, item_id in zip(items, assign_ids([i.id for i in items])):
            item.id = item_id

    garage = Garage()
    for car in cars:
        garage.insert_car(car)
    for record in maintenance:
        garage.insert_maintenance(record)
    for record in fuel:
        garage.insert_fuel(record)
    return garage


def load_garage(filename: Union[str, Path]) -> Garage:
    """
    Load a fleet snapshot from a YAML file.

    Raises ValueError if the file has no top-level cars list or repeats an id.
    """
    with open(filename, "rb") as fp:
        # default=str turns unquoted YAML dates back into ISO strings
        json_data = json.dumps(
            yaml.load(fp, Loader=yaml.SafeLoader), indent=4, default=str
        )
        garage = json.loads(json_data, object_hook=_parse_object)
    if not isinstance(garage, Garage):
        raise ValueError(f"{filename}: not a fleet file (missing top-level 'cars')")
    return garage
