import uuid
import datetime as dt
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


MEAL_SLOTS = [m.value for m in MealType]


class VacationStyle(BaseModel):
    # Flags are not mutually exclusive here; see activity_policy for precedence
    chillaxed: bool = False
    adventurous: bool = False
    busy: bool = False


class Activity(BaseModel):
    name: str
    description: Optional[str] = None
    time: Optional[str] = None  # display string, e.g. "10:00 AM"
    location: Optional[str] = None


class Meal(BaseModel):
    meal_type: str  # usually a MealType value; manual entries may carry others
    restaurant: str
    cuisine: Optional[str] = None
    location: Optional[str] = None
    price_range: Optional[str] = None  # "$" .. "$$$$"
    time: Optional[str] = None
    date: Optional[dt.date] = None
    provider: Optional[str] = None
    notes: Optional[str] = None
    reservation_confirmation: Optional[str] = None
    booking_id: Optional[str] = None


class Day(BaseModel):
    date: dt.date
    day_number: int
    activities: List[Activity] = []
    meals: Dict[str, Meal] = {}  # slot -> meal
    notes: str = ""


class Trip(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    destination: str
    start_date: dt.date
    end_date: dt.date
    vacation_style: VacationStyle = VacationStyle()
    days: List[Day] = []
    created_at: dt.datetime = Field(default_factory=_utcnow)
    updated_at: dt.datetime = Field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()


class Booking(BaseModel):
    """
    An externally sourced reservation. Only 'restaurant' bookings become meals.
    """
    id: str
    type: str
    title: str = ""
    time: Optional[str] = None
    date: Optional[dt.date] = None
    cost: Union[float, str, None] = None
    notes: Optional[str] = None
    location: Optional[str] = None
    provider: Optional[str] = None
    confirmation_number: Optional[str] = None


class CuisineCount(BaseModel):
    cuisine: str
    count: int


class MealStatistics(BaseModel):
    total_meals: int = 0
    meal_type_counts: Dict[str, int] = Field(default_factory=lambda: {slot: 0 for slot in MEAL_SLOTS})
    average_cost: float = 0
    top_cuisines: List[CuisineCount] = []
