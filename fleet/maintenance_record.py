"""MaintenanceRecord class for service events."""
from typing import Optional


class MaintenanceRecord:
    """A service performed on a car, with optional next-service thresholds."""

    def __init__(
            self,
            id: Optional[int],
            car_id: int,
            date: str,
            type: str,
            mileage: int,
            cost: float = 0,
            next_mileage: Optional[int] = None,
            next_date: Optional[str] = None,
    ):
        self.id = id
        self.car_id = car_id
        self.date = date
        self.type = type
        self.mileage = mileage
        self.cost = cost
        self.next_mileage = next_mileage
        self.next_date = next_date
