#!/usr/bin/env python3
"""
Validate fleet YAML files.

Two passes per file:
- Schema: structure and field types, from schema.yaml
- References: ids unique per collection, every carId names a declared car
"""
import sys
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jsonschema import validate, ValidationError

from fleet import assign_ids

FLEETS_DIR = Path(__file__).parent / "fleets"
RECORD_SECTIONS = ("maintenance", "fuel")


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def check_references(data: Dict[str, Any]) -> List[str]:
    """
    Check id uniqueness and carId references in a schema-valid fleet.

    Ids are resolved the way the loader resolves them, so a car without an
    explicit id can still be referenced by the id it will be given.
    """
    errors = []
    car_ids = set()
    for section in ("cars",) + RECORD_SECTIONS:
        entries = data.get(section) or []
        seen = set()
        for i, entry_id in enumerate(assign_ids([e.get("id") for e in entries])):
            if entry_id in seen:
                errors.append(f"Duplicate id {entry_id} in {section}")
                errors.append(f"  at path: {section}.{i}.id")
            seen.add(entry_id)
        if section == "cars":
            car_ids = seen

    for section in RECORD_SECTIONS:
        for i, entry in enumerate(data.get(section) or []):
            if entry["carId"] not in car_ids:
                errors.append(
                    f"Reference error: carId {entry['carId']} does not match any car"
                )
                errors.append(f"  at path: {section}.{i}.carId")
    return errors


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    else:
        errors.extend(check_references(data))
    return errors


def main():
    """Validate all fleet YAML files in the fleets/ directory."""
    schema = load_schema()

    if not FLEETS_DIR.exists():
        print(f"Error: fleets directory not found: {FLEETS_DIR}")
        return 1

    yaml_files = list(FLEETS_DIR.glob("*.yaml")) + list(FLEETS_DIR.glob("*.yml"))

    if not yaml_files:
        print(f"Warning: No YAML files found in {FLEETS_DIR}")
        return 0

    all_valid = True
    for filepath in sorted(yaml_files):
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
