import threading
from datetime import date

from app.core.exceptions import TripNotFoundError
from app.db.repository import InMemoryTripRepository
from app.models.itinerary import Booking
from app.services.plan_service import TripService


class SlowReadRepository(InMemoryTripRepository):
    """Holds each read until a second reader arrives, or gives up after a short wait."""

    def __init__(self):
        super().__init__()
        self.barrier = threading.Barrier(2, timeout=0.5)

    def get(self, trip_id):
        trip = super().get(trip_id)
        try:
            self.barrier.wait()
        except threading.BrokenBarrierError:
            pass
        return trip


def booking(booking_id, time):
    return Booking(id=booking_id, type="restaurant", title=f"Place {booking_id}",
                   time=time, date=date(2025, 6, 1), cost=20)


def test_concurrent_bookings_on_same_trip_are_both_kept(pool):
    service = TripService(SlowReadRepository(), pool)
    trip = service.create_trip("Lisbon", date(2025, 6, 1), date(2025, 6, 1), generate_days=True)

    threads = [
        threading.Thread(target=service.add_booking, args=(trip.id, booking("a", "08:00"))),
        threading.Thread(target=service.add_booking, args=(trip.id, booking("b", "19:00"))),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    meals = service.get_trip(trip.id).days[0].meals
    assert {m.booking_id for m in meals.values()} == {"a", "b"}


def test_remove_booking_skips_trip_deleted_after_listing(service):
    gone = service.create_trip("Lisbon", date(2025, 6, 1), date(2025, 6, 1), generate_days=True)
    kept = service.create_trip("Porto", date(2025, 6, 1), date(2025, 6, 1), generate_days=True)
    service.add_booking(gone.id, booking("a", "19:00"))
    service.add_booking(kept.id, booking("a", "19:00"))

    snapshot = service.repository.list()
    service.delete_trip(gone.id)
    service.repository.list = lambda: snapshot

    assert service.remove_booking("a") == 1
    assert service.get_trip(kept.id).days[0].meals == {}


def test_remove_booking_skips_trip_that_fails_to_save(service):
    trip = service.create_trip("Lisbon", date(2025, 6, 1), date(2025, 6, 1), generate_days=True)
    service.add_booking(trip.id, booking("a", "19:00"))

    def save(t):
        raise TripNotFoundError(t.id)

    service.repository.save = save
    assert service.remove_booking("a") == 0
