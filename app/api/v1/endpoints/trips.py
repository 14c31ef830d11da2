# File: app/api/v1/endpoints/trips.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_trip_service
from app.core.exceptions import InvalidRangeError, TripNotFoundError, TripTooLongError
from app.models.itinerary import Booking, MealStatistics, Trip
from app.models.schemas import BookingAttachResponse, TripCreateRequest
from app.services.plan_service import TripService

router = APIRouter()


@router.post("", response_model=Trip, status_code=status.HTTP_201_CREATED)
def create_trip(request: TripCreateRequest, service: TripService = Depends(get_trip_service)):
    """
    Creates a trip and, unless generate_days is false, its day plans.
    """
    try:
        return service.create_trip(
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            vacation_style=request.vacation_style,
            generate_days=request.generate_days,
        )
    except (InvalidRangeError, TripTooLongError) as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("", response_model=List[Trip])
def list_trips(service: TripService = Depends(get_trip_service)):
    return service.list_trips()

@router.get("/{trip_id}", response_model=Trip)
def get_trip(trip_id: str, service: TripService = Depends(get_trip_service)):
    try:
        return service.get_trip(trip_id)
    except TripNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(trip_id: str, service: TripService = Depends(get_trip_service)):
    try:
        service.delete_trip(trip_id)
    except TripNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("/{trip_id}/generate-days", response_model=Trip)
def generate_days(trip_id: str, service: TripService = Depends(get_trip_service)):
    """
    Regenerates every day of the trip from its dates and vacation style.
    Meals already on the trip are dropped with the old days.
    """
    try:
        return service.generate_days(trip_id)
    except TripNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidRangeError, TripTooLongError) as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/{trip_id}/bookings", response_model=BookingAttachResponse)
def add_booking(trip_id: str, booking: Booking, service: TripService = Depends(get_trip_service)):
    try:
        day = service.add_booking(trip_id, booking)
    except TripNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if day is None:
        return BookingAttachResponse(attached=False)
    meal = next((m for m in day.meals.values() if m.booking_id == booking.id), None)
    return BookingAttachResponse(attached=True, day_number=day.day_number, meal=meal)

@router.get("/{trip_id}/meal-statistics", response_model=MealStatistics)
def meal_statistics(trip_id: str, service: TripService = Depends(get_trip_service)):
    try:
        return service.meal_statistics(trip_id)
    except TripNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
