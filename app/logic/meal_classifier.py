# app/logic/meal_classifier.py

import math
import re
from datetime import datetime, time as dt_time
from typing import Optional, Union

from app.models.itinerary import MealType

# Ordered: the first keyword found in the notes wins
CUISINE_KEYWORDS = [
    ("italian", "Italian"),
    ("chinese", "Chinese"),
    ("japanese", "Japanese"),
    ("mexican", "Mexican"),
    ("french", "French"),
    ("indian", "Indian"),
    ("thai", "Thai"),
    ("mediterranean", "Mediterranean"),
    ("american", "American"),
    ("seafood", "Seafood"),
    ("steakhouse", "Steakhouse"),
    ("pizza", "Pizza"),
    ("sushi", "Sushi"),
    ("bbq", "BBQ"),
    ("vegan", "Vegan"),
    ("vegetarian", "Vegetarian"),
    ("fast food", "Fast Food"),
    ("cafe", "Cafe"),
    ("bistro", "Bistro"),
]

# (upper bound, bucket); anything at or above the last bound is "$$$$"
PRICE_THRESHOLDS = [
    (15, "$"),
    (35, "$$"),
    (60, "$$$"),
]
TOP_PRICE_BUCKET = "$$$$"

_TIME_RE = re.compile(r"^\s*(\d{1,2})(?::\d{1,2})?(?::\d{1,2})?\s*([AaPp]\.?[Mm]\.?)?")


def _parse_hour(value) -> Optional[int]:
    if isinstance(value, (dt_time, datetime)):
        return value.hour
    if not isinstance(value, str):
        return None
    match = _TIME_RE.match(value)
    if not match:
        return None
    hour = int(match.group(1))
    meridiem = match.group(2)
    if meridiem:
        if hour > 12:
            return None
        is_pm = meridiem[0].lower() == "p"
        hour = hour % 12 + (12 if is_pm else 0)
    return hour


def classify_meal_type(time_value: Union[str, dt_time, None]) -> str:
    """
    05:00-10:59 is breakfast, 11:00-15:59 lunch, everything else dinner.
    Missing or unreadable times default to dinner.
    """
    hour = _parse_hour(time_value)
    if hour is None:
        return MealType.DINNER.value
    if 5 <= hour < 11:
        return MealType.BREAKFAST.value
    if 11 <= hour < 16:
        return MealType.LUNCH.value
    return MealType.DINNER.value


def extract_cuisine(notes: Optional[str]) -> Optional[str]:
    if not notes:
        return None
    notes_lower = notes.lower()
    for keyword, cuisine in CUISINE_KEYWORDS:
        if keyword in notes_lower:
            return cuisine
    return None


def cost_to_price_bucket(cost: Union[float, int, str, None]) -> Optional[str]:
    """
    Bucket a numeric cost into "$".."$$$$". Empty, missing or non-numeric
    costs give None.
    """
    if cost is None or isinstance(cost, bool):
        return None
    if isinstance(cost, str):
        cost = cost.strip().lstrip("$").replace(",", "")
        if not cost:
            return None
    try:
        amount = float(cost)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None

    for upper, bucket in PRICE_THRESHOLDS:
        if amount < upper:
            return bucket
    return TOP_PRICE_BUCKET
