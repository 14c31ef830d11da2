# app/db/repository.py

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from app.core.exceptions import TripNotFoundError
from app.models.itinerary import Trip

logger = logging.getLogger(__name__)


class TripRepository(ABC):
    """
    Storage for whole Trip aggregates. Days and meals are saved with their trip,
    so deleting a trip deletes its days.
    """

    @abstractmethod
    def add(self, trip: Trip) -> Trip: ...

    @abstractmethod
    def get(self, trip_id: str) -> Optional[Trip]: ...

    @abstractmethod
    def list(self) -> List[Trip]: ...

    @abstractmethod
    def save(self, trip: Trip) -> Trip: ...

    @abstractmethod
    def delete(self, trip_id: str) -> bool: ...

    def get_or_raise(self, trip_id: str) -> Trip:
        trip = self.get(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip


class InMemoryTripRepository(TripRepository):
    def __init__(self):
        self._trips: Dict[str, Trip] = {}
        self._lock = threading.Lock()

    def add(self, trip: Trip) -> Trip:
        with self._lock:
            self._trips[trip.id] = trip.model_copy(deep=True)
        return trip

    def get(self, trip_id: str) -> Optional[Trip]:
        with self._lock:
            trip = self._trips.get(trip_id)
            # callers get their own copy to mutate and save back
            return trip.model_copy(deep=True) if trip else None

    def list(self) -> List[Trip]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._trips.values()]

    def save(self, trip: Trip) -> Trip:
        with self._lock:
            if trip.id not in self._trips:
                raise TripNotFoundError(trip.id)
            self._trips[trip.id] = trip.model_copy(deep=True)
        return trip

    def delete(self, trip_id: str) -> bool:
        with self._lock:
            return self._trips.pop(trip_id, None) is not None


class SupabaseTripRepository(TripRepository):
    """
    Keeps each trip as one row: {"id": ..., "payload": <trip json>}.
    """

    def __init__(self, client, table: str = "trips"):
        self._client = client
        self._table = table

    def _row(self, trip: Trip) -> dict:
        return {"id": trip.id, "payload": trip.model_dump(mode="json")}

    def add(self, trip: Trip) -> Trip:
        response = self._client.table(self._table).insert(self._row(trip)).execute()
        if not response.data:
            raise RuntimeError(f"Failed to insert trip {trip.id} into '{self._table}'.")
        return trip

    def get(self, trip_id: str) -> Optional[Trip]:
        response = self._client.table(self._table).select("*").eq("id", trip_id).execute()
        if not response.data:
            return None
        return Trip.model_validate(response.data[0]["payload"])

    def list(self) -> List[Trip]:
        response = self._client.table(self._table).select("*").execute()
        return [Trip.model_validate(row["payload"]) for row in response.data or []]

    def save(self, trip: Trip) -> Trip:
        response = self._client.table(self._table).update(self._row(trip)).eq("id", trip.id).execute()
        if not response.data:
            raise TripNotFoundError(trip.id)
        return trip

    def delete(self, trip_id: str) -> bool:
        response = self._client.table(self._table).delete().eq("id", trip_id).execute()
        return bool(response.data)


def create_trip_repository(store: str, table: str = "trips") -> TripRepository:
    if store == "supabase":
        from app.db.supabase_client import get_supabase_client
        logger.info("Using Supabase trip store (table '%s')", table)
        return SupabaseTripRepository(get_supabase_client(), table=table)
    if store != "memory":
        raise ValueError(f"Unknown TRIP_STORE '{store}'. Use 'memory' or 'supabase'.")
    return InMemoryTripRepository()
