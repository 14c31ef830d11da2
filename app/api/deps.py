from functools import lru_cache

from app.core.config import settings
from app.db.repository import create_trip_repository
from app.services.data_loader import load_activity_pool
from app.services.plan_service import TripService


@lru_cache
def get_trip_service() -> TripService:
    """
    Builds the shared TripService on first use from the settings.
    Tests swap it out through app.dependency_overrides.
    """
    return TripService(
        repository=create_trip_repository(settings.TRIP_STORE, table=settings.SUPABASE_TRIPS_TABLE),
        pool=load_activity_pool(),
        max_days=settings.MAX_TRIP_DAYS,
        window=settings.ROTATION_WINDOW,
    )
