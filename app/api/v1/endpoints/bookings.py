from fastapi import APIRouter, Depends

from app.api.deps import get_trip_service
from app.models.schemas import BookingRemovalResponse
from app.services.plan_service import TripService

router = APIRouter()


@router.delete("/{booking_id}", response_model=BookingRemovalResponse)
def delete_booking(booking_id: str, service: TripService = Depends(get_trip_service)):
    """
    Called when a booking is deleted upstream: removes the meals it created.
    """
    return BookingRemovalResponse(booking_id=booking_id, trips_updated=service.remove_booking(booking_id))
