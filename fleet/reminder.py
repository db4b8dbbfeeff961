"""Reminder dataclass for derived service notifications."""

from dataclasses import dataclass

from .severity import Severity


@dataclass(frozen=True)
class Reminder:
    """A service coming due for a car, by date or by distance."""

    id: str
    car_id: int
    text: str
    severity: Severity

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL
