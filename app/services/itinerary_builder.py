# app/services/itinerary_builder.py
import logging
from typing import List, Optional, Sequence

from app.core.exceptions import TripTooLongError
from app.logic.activity_policy import DEFAULT_ROTATION_WINDOW
from app.logic.date_range import expand_date_range
from app.logic.planner import build_day_plans
from app.models.itinerary import Activity, Day, Trip

logger = logging.getLogger(__name__)


def generate_trip_days(trip: Trip, pool: Sequence[Activity], max_days: Optional[int] = None,
                       window: int = DEFAULT_ROTATION_WINDOW) -> List[Day]:
    """
    Replace the trip's days with freshly generated plans, one per calendar day.
    Raises InvalidRangeError for an inverted range and TripTooLongError when the
    trip spans more than max_days.
    """
    dates = expand_date_range(trip.start_date, trip.end_date)
    if max_days is not None and len(dates) > max_days:
        raise TripTooLongError(len(dates), max_days)

    days = build_day_plans(dates, trip.vacation_style, trip.destination, pool, window=window)
    trip.days = days
    trip.touch()

    logger.info("Generated %d days for trip %s (%s)", len(days), trip.id, trip.destination)
    return days
