"""Car class for fleet vehicles."""
from typing import Optional


class Car:
    """A registered vehicle and its current odometer reading."""

    def __init__(
        self,
        id: Optional[int],
        brand: str,
        model: str,
        year: int,
        license_plate: str,
        mileage: int = 0,
    ):
        self.id = id
        self.brand = brand
        self.model = model
        self.year = year
        self.license_plate = license_plate
        self.mileage = mileage

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.brand} {self.model}"
