# app/services/meal_tracking.py
"""
Turns restaurant bookings into itinerary meals, places them on the right
day, and summarises the meals of a trip.
"""

import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, Union

from app.logic.meal_classifier import classify_meal_type, cost_to_price_bucket, extract_cuisine
from app.models.itinerary import MEAL_SLOTS, Booking, CuisineCount, Day, Meal, MealStatistics, Trip

logger = logging.getLogger(__name__)

RESTAURANT_BOOKING = "restaurant"

# Representative cost of each price bucket, used only for averages
PRICE_BUCKET_VALUES = {"$": 10, "$$": 25, "$$$": 45, "$$$$": 80}
TOP_CUISINE_LIMIT = 3


def convert_booking_to_meal(booking: Booking) -> Optional[Meal]:
    """
    Build a Meal from a restaurant booking. Any other booking type gives None.
    """
    if booking.type != RESTAURANT_BOOKING:
        return None

    return Meal(
        meal_type=classify_meal_type(booking.time),
        restaurant=booking.title,
        cuisine=extract_cuisine(booking.notes),
        location=booking.location,
        price_range=cost_to_price_bucket(booking.cost),
        time=booking.time,
        date=booking.date,
        provider=booking.provider,
        notes=booking.notes,
        reservation_confirmation=booking.confirmation_number,
        booking_id=booking.id,
    )


def _to_date(value: Union[date, datetime, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        # "2025-06-02T19:00:00Z" and similar; the calendar day is all we need
        return date.fromisoformat(text[:10])


def find_best_day_for_meal(days: Sequence[Day], target: Union[date, datetime, str]) -> Optional[Day]:
    """
    Return the day on the target's calendar date, or else the day closest to it.
    Ties between equally distant days go to the one listed first.
    """
    if not days:
        return None

    target_date = _to_date(target)
    for day in days:
        if _to_date(day.date) == target_date:
            return day

    # min() keeps the first of equal keys, i.e. the earliest position
    return min(days, key=lambda d: abs((_to_date(d.date) - target_date).days))


def attach_meal_to_day(day: Day, meal: Meal) -> bool:
    """
    Put the meal into its slot on the day. Returns False when the same meal is
    already on the day (same booking, or same restaurant, type and date).
    A different meal already in the slot is replaced. Meal types outside the
    breakfast/lunch/dinner slots are not stored.
    """
    if meal.meal_type not in MEAL_SLOTS:
        logger.warning("Meal type '%s' has no slot on day %d; '%s' not attached.",
                       meal.meal_type, day.day_number, meal.restaurant)
        return False

    for existing in day.meals.values():
        same_booking = meal.booking_id is not None and existing.booking_id == meal.booking_id
        same_meal = (
            existing.restaurant == meal.restaurant
            and existing.meal_type == meal.meal_type
            and existing.date == meal.date
        )
        if same_booking or same_meal:
            return False

    replaced = day.meals.get(meal.meal_type)
    if replaced is not None:
        logger.info("Replacing %s '%s' on day %d with '%s'",
                    meal.meal_type, replaced.restaurant, day.day_number, meal.restaurant)
    day.meals[meal.meal_type] = meal
    return True


def add_booking_to_trip(trip: Trip, booking: Booking) -> Optional[Day]:
    """
    Convert a booking and attach the meal to the best matching day of the trip.
    Returns the day the meal was attached to, or None when nothing was attached.
    """
    meal = convert_booking_to_meal(booking)
    if meal is None:
        logger.debug("Booking %s is of type '%s'; no meal created.", booking.id, booking.type)
        return None

    day = find_best_day_for_meal(trip.days, meal.date or trip.start_date)
    if day is None:
        logger.warning("Trip %s has no days; booking %s not attached.", trip.id, booking.id)
        return None

    if meal.date is None:
        meal.date = day.date
    if not attach_meal_to_day(day, meal):
        return None

    trip.touch()
    return day


def remove_meals_for_booking(trips: Iterable[Trip], booking_id: str) -> List[Trip]:
    """
    Remove every meal created from the booking. Returns the trips that changed.
    """
    changed: List[Trip] = []
    for trip in trips:
        removed = False
        for day in trip.days:
            stale = [slot for slot, meal in day.meals.items() if meal.booking_id == booking_id]
            for slot in stale:
                del day.meals[slot]
                removed = True
        if removed:
            trip.touch()
            changed.append(trip)
    return changed


def get_meal_statistics(trip: Trip) -> MealStatistics:
    total_meals = 0
    total_cost = 0
    meal_type_counts: Dict[str, int] = {slot: 0 for slot in MEAL_SLOTS}
    cuisines: Dict[str, int] = {}  # insertion order = first seen

    for day in trip.days:
        for meal in day.meals.values():
            total_meals += 1
            if meal.meal_type in meal_type_counts:
                meal_type_counts[meal.meal_type] += 1
            if meal.cuisine:
                cuisines[meal.cuisine] = cuisines.get(meal.cuisine, 0) + 1
            total_cost += PRICE_BUCKET_VALUES.get(meal.price_range, 0)

    # sorted() is stable, so equal counts stay in first-seen order
    ranked = sorted(cuisines.items(), key=lambda item: item[1], reverse=True)
    top_cuisines = [CuisineCount(cuisine=c, count=n) for c, n in ranked[:TOP_CUISINE_LIMIT]]

    return MealStatistics(
        total_meals=total_meals,
        meal_type_counts=meal_type_counts,
        average_cost=round(total_cost / total_meals, 2) if total_meals else 0,
        top_cuisines=top_cuisines,
    )
