# app/logic/activity_policy.py

import logging
from typing import List, Mapping, Optional, Sequence, TypeVar, Union

from app.models.itinerary import VacationStyle

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ROTATION_WINDOW = 3

# Activities per day for each vacation-style flag
BUSY_ACTIVITY_COUNT = 6
ADVENTUROUS_ACTIVITY_COUNT = 4
CHILLAXED_ACTIVITY_COUNT = 2
DEFAULT_ACTIVITY_COUNT = 3

# Checked in order, first flag set wins. The ordering is a product policy
# (busy implies the most content) and is pending confirmation.
STYLE_PRIORITY = [
    ("busy", BUSY_ACTIVITY_COUNT),
    ("adventurous", ADVENTUROUS_ACTIVITY_COUNT),
    ("chillaxed", CHILLAXED_ACTIVITY_COUNT),
]


def _style_flag(style, flag: str) -> bool:
    if style is None:
        return False
    if isinstance(style, Mapping):
        return bool(style.get(flag, False))
    return bool(getattr(style, flag, False))


def target_activity_count(style: Union[VacationStyle, Mapping, None]) -> int:
    """
    Map a vacation style to the number of activities planned per day.
    chillaxed -> 2, adventurous -> 4, busy -> 6, nothing set -> 3.
    """
    for flag, count in STYLE_PRIORITY:
        if _style_flag(style, flag):
            return count
    return DEFAULT_ACTIVITY_COUNT


def rotate_activities(pool: Sequence[T], day_index: int, count: int,
                      window: int = DEFAULT_ROTATION_WINDOW) -> List[T]:
    """
    Pick `count` consecutive items from the pool, starting at day_index % window
    and wrapping around the end of the pool. Adjacent days overlap instead of
    repeating the same subset. A pool smaller than `count` repeats items.
    """
    if count <= 0:
        return []
    if not pool:
        logger.warning("Activity pool is empty; day %d gets no activities.", day_index + 1)
        return []

    offset = day_index % max(1, window)
    size = len(pool)
    return [pool[(offset + k) % size] for k in range(count)]
