"""Severity enum for reminder urgency levels."""

from enum import Enum


class Severity(Enum):
    """Reminder severity. Lower value = more urgent."""

    CRITICAL = 1
    WARNING = 2

    @property
    def label(self) -> str:
        return self.name.lower()
