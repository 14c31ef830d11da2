# app/logic/planner.py

from datetime import date
from typing import List, Mapping, Sequence, Union

from app.logic.activity_policy import DEFAULT_ROTATION_WINDOW, rotate_activities, target_activity_count
from app.models.itinerary import Activity, Day, VacationStyle


def _day_notes(day_number: int, total_days: int, destination: str) -> str:
    if day_number == 1:
        when = "your first day"
    elif day_number == total_days:
        when = "your last day"
    else:
        when = "your day"
    return f"Day {day_number}: Enjoy {when} in {destination}!"


def build_day_plan(day_date: date, day_index: int, total_days: int, destination: str,
                   pool: Sequence[Activity], activity_count: int,
                   window: int = DEFAULT_ROTATION_WINDOW) -> Day:
    activities = rotate_activities(pool, day_index, activity_count, window=window)
    return Day(
        date=day_date,
        day_number=day_index + 1,
        # copies, so days never share Activity instances
        activities=[a.model_copy() for a in activities],
        meals={},
        notes=_day_notes(day_index + 1, total_days, destination),
    )


def build_day_plans(dates: Sequence[date], style: Union[VacationStyle, Mapping, None],
                    destination: str, pool: Sequence[Activity],
                    window: int = DEFAULT_ROTATION_WINDOW) -> List[Day]:
    """
    Build one Day per date, numbered from 1 in date order.
    Every day gets the same activity density, taken from the style, and a
    rotated slice of the pool. Pure: attaching the days to a Trip is up to
    the caller.
    """
    activity_count = target_activity_count(style)
    total_days = len(dates)
    return [
        build_day_plan(day_date, idx, total_days, destination, pool, activity_count, window=window)
        for idx, day_date in enumerate(dates)
    ]
