"""FuelRecord class for refueling events."""
from typing import Optional


class FuelRecord:
    """A fill-up. Liters are the fuel used since the previous fill."""

    def __init__(
            self,
            id: Optional[int],
            car_id: int,
            date: str,
            liters: float,
            cost: float,
            mileage: int,
    ):
        self.id = id
        self.car_id = car_id
        self.date = date
        self.liters = liters
        self.cost = cost
        self.mileage = mileage

    @property
    def price_per_liter(self) -> Optional[float]:
        if not self.liters:
            return None
        return self.cost / self.liters
