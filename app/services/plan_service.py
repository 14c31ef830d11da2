# File: app/services/plan_service.py

import logging
import threading
from contextlib import contextmanager
from typing import Dict, List, Optional, Sequence

from app.core.exceptions import TripNotFoundError
from app.db.repository import TripRepository
from app.logic.activity_policy import DEFAULT_ROTATION_WINDOW
from app.logic.date_range import count_trip_days
from app.models.itinerary import Activity, Booking, Day, MealStatistics, Trip, VacationStyle
from app.services import meal_tracking
from app.services.itinerary_builder import generate_trip_days

logger = logging.getLogger(__name__)


class TripService:
    """
    Ties the trip store and the activity pool to the planning and meal
    operations. One instance is shared by the API.
    """

    def __init__(self, repository: TripRepository, pool: Sequence[Activity],
                 max_days: Optional[int] = None, window: int = DEFAULT_ROTATION_WINDOW):
        self.repository = repository
        self.pool = list(pool)
        self.max_days = max_days
        self.window = window
        # one lock per trip id, held across get -> mutate -> save
        self._trip_locks: Dict[str, threading.Lock] = {}
        self._trip_locks_guard = threading.Lock()

    @contextmanager
    def _locked(self, trip_id: str):
        with self._trip_locks_guard:
            lock = self._trip_locks.setdefault(trip_id, threading.Lock())
        with lock:
            yield

    def create_trip(self, destination: str, start_date, end_date,
                    vacation_style: Optional[VacationStyle] = None,
                    generate_days: bool = False) -> Trip:
        # validates the range before anything is stored
        count_trip_days(start_date, end_date)

        trip = Trip(
            destination=destination,
            start_date=start_date,
            end_date=end_date,
            vacation_style=vacation_style or VacationStyle(),
        )
        if generate_days:
            generate_trip_days(trip, self.pool, max_days=self.max_days, window=self.window)

        self.repository.add(trip)
        logger.info("Created trip %s to %s", trip.id, destination)
        return trip

    def get_trip(self, trip_id: str) -> Trip:
        return self.repository.get_or_raise(trip_id)

    def list_trips(self) -> List[Trip]:
        return self.repository.list()

    def delete_trip(self, trip_id: str) -> None:
        with self._locked(trip_id):
            if not self.repository.delete(trip_id):
                raise TripNotFoundError(trip_id)
        with self._trip_locks_guard:
            self._trip_locks.pop(trip_id, None)
        logger.info("Deleted trip %s", trip_id)

    def generate_days(self, trip_id: str) -> Trip:
        with self._locked(trip_id):
            trip = self.repository.get_or_raise(trip_id)
            generate_trip_days(trip, self.pool, max_days=self.max_days, window=self.window)
            return self.repository.save(trip)

    def add_booking(self, trip_id: str, booking: Booking) -> Optional[Day]:
        """Attach a restaurant booking as a meal; None when nothing was attached."""
        with self._locked(trip_id):
            trip = self.repository.get_or_raise(trip_id)
            day = meal_tracking.add_booking_to_trip(trip, booking)
            if day is not None:
                self.repository.save(trip)
        if day is not None:
            logger.info("Booking %s attached to day %d of trip %s", booking.id, day.day_number, trip_id)
        return day

    def remove_booking(self, booking_id: str) -> int:
        """
        Drop meals created from a deleted booking. Returns how many trips changed.
        Each trip is re-read under its lock; trips deleted in the meantime are skipped.
        """
        updated = 0
        for trip_id in [t.id for t in self.repository.list()]:
            with self._locked(trip_id):
                trip = self.repository.get(trip_id)
                if trip is None:
                    continue
                if not meal_tracking.remove_meals_for_booking([trip], booking_id):
                    continue
                try:
                    self.repository.save(trip)
                except TripNotFoundError:
                    logger.info("Trip %s was deleted while removing booking %s", trip_id, booking_id)
                    continue
            updated += 1
        if updated:
            logger.info("Removed meals for booking %s from %d trip(s)", booking_id, updated)
        return updated

    def meal_statistics(self, trip_id: str) -> MealStatistics:
        return meal_tracking.get_meal_statistics(self.repository.get_or_raise(trip_id))
