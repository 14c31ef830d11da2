import datetime as dt
from typing import Optional

from pydantic import BaseModel

from app.models.itinerary import Meal, VacationStyle


class TripCreateRequest(BaseModel):
    destination: str
    start_date: dt.date
    end_date: dt.date
    vacation_style: VacationStyle = VacationStyle()
    generate_days: bool = True  # build day plans straight away


class BookingAttachResponse(BaseModel):
    attached: bool
    day_number: Optional[int] = None
    meal: Optional[Meal] = None


class BookingRemovalResponse(BaseModel):
    booking_id: str
    trips_updated: int
