from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_trip_service
from app.db.repository import InMemoryTripRepository
from app.main import app
from app.models.itinerary import Activity, Day, Meal, Trip
from app.services.plan_service import TripService


@pytest.fixture
def pool():
    return [
        Activity(name=f"Activity {i}", description=f"Description {i}", time="10:00 AM", location=f"Spot {i}")
        for i in range(6)
    ]


@pytest.fixture
def three_day_trip():
    return Trip(
        destination="Lisbon",
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 3),
        days=[Day(date=date(2025, 6, d), day_number=d) for d in (1, 2, 3)],
    )


def make_meal(meal_type="dinner", restaurant="Chez Test", cuisine=None, price_range=None,
              booking_id=None, meal_date=date(2025, 6, 1)):
    return Meal(meal_type=meal_type, restaurant=restaurant, cuisine=cuisine,
                price_range=price_range, booking_id=booking_id, date=meal_date)


@pytest.fixture
def service(pool):
    return TripService(InMemoryTripRepository(), pool, max_days=30)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_trip_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
