# app/logic/date_range.py

from datetime import date, timedelta
from typing import Tuple

from app.core.exceptions import InvalidRangeError


def count_trip_days(start: date, end: date) -> int:
    """Number of calendar days spanned, inclusive of both endpoints."""
    if end < start:
        raise InvalidRangeError(start, end)
    return (end - start).days + 1


def expand_date_range(start: date, end: date) -> Tuple[date, ...]:
    """
    Expand an inclusive start/end pair into consecutive calendar dates.
    Raises InvalidRangeError when end < start. No upper bound is applied here.
    """
    return tuple(start + timedelta(days=offset) for offset in range(count_trip_days(start, end)))
