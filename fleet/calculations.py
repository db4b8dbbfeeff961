"""Helper functions for consumption and reminder calculations."""

import math
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from .car import Car
from .severity import Severity


def parse_date(value: Union[str, date]) -> date:
    """Parse an ISO date or timestamp string into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return isoparse(value).date()


def calc_next_mileage(
    mileage: Optional[int], interval_km: Optional[int]
) -> Optional[int]:
    """Suggested next-service mileage: mileage + interval."""
    if interval_km is None or mileage is None:
        return None
    return mileage + interval_km


def calc_next_date(
    last_date: Optional[Union[str, date]], interval_months: Optional[float]
) -> Optional[date]:
    """Suggested next-service date: last + interval months."""
    if interval_months is None or not last_date:
        return None
    months = int(interval_months)
    days = int((interval_months - months) * 30)
    return parse_date(last_date) + relativedelta(months=months, days=days)


def check_severity(
    remaining: float, window: float, critical_below: float
) -> Optional[Severity]:
    """
    Classify how close a threshold is.

    None when already passed (remaining < 0) or further away than the window.
    """
    if remaining < 0 or remaining > window:
        return None
    if remaining < critical_below:
        return Severity.CRITICAL
    return Severity.WARNING


def ratchet_mileage(car: Car, mileage: Optional[int]) -> bool:
    """Raise the car's mileage to the given reading if it is higher."""
    if mileage is None or mileage <= car.mileage:
        return False
    car.mileage = mileage
    return True


def format_tenths(value: float) -> str:
    """Round to one decimal place, half away from zero."""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding up."""
    return math.floor(value + 0.5)
