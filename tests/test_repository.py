from datetime import date
from unittest.mock import MagicMock

import pytest

from app.core.exceptions import TripNotFoundError
from app.db.repository import InMemoryTripRepository, SupabaseTripRepository, create_trip_repository
from app.models.itinerary import Trip


def make_trip():
    return Trip(destination="Kyoto", start_date=date(2025, 4, 1), end_date=date(2025, 4, 2))


def test_in_memory_round_trip():
    repo = InMemoryTripRepository()
    trip = repo.add(make_trip())

    loaded = repo.get(trip.id)
    assert loaded.model_dump() == trip.model_dump()
    assert loaded is not trip

    loaded.destination = "Osaka"
    assert repo.get(trip.id).destination == "Kyoto"
    repo.save(loaded)
    assert repo.get(trip.id).destination == "Osaka"
    assert [t.id for t in repo.list()] == [trip.id]


def test_in_memory_delete_and_missing():
    repo = InMemoryTripRepository()
    trip = repo.add(make_trip())
    assert repo.delete(trip.id) is True
    assert repo.delete(trip.id) is False
    assert repo.get(trip.id) is None
    with pytest.raises(TripNotFoundError):
        repo.get_or_raise(trip.id)
    with pytest.raises(TripNotFoundError):
        repo.save(trip)


def test_supabase_add_and_get():
    client = MagicMock()
    trip = make_trip()
    table = client.table.return_value
    table.insert.return_value.execute.return_value.data = [{"id": trip.id}]
    table.select.return_value.eq.return_value.execute.return_value.data = [
        {"id": trip.id, "payload": trip.model_dump(mode="json")}
    ]

    repo = SupabaseTripRepository(client, table="trips")
    repo.add(trip)
    loaded = repo.get(trip.id)

    client.table.assert_called_with("trips")
    inserted = table.insert.call_args.args[0]
    assert inserted["id"] == trip.id
    assert inserted["payload"]["start_date"] == "2025-04-01"
    assert loaded.model_dump() == trip.model_dump()


def test_supabase_missing_rows():
    client = MagicMock()
    table = client.table.return_value
    table.select.return_value.eq.return_value.execute.return_value.data = []
    table.update.return_value.eq.return_value.execute.return_value.data = []
    table.delete.return_value.eq.return_value.execute.return_value.data = []

    repo = SupabaseTripRepository(client)
    assert repo.get("nope") is None
    assert repo.delete("nope") is False
    with pytest.raises(TripNotFoundError):
        repo.save(make_trip())


def test_supabase_failed_insert():
    client = MagicMock()
    client.table.return_value.insert.return_value.execute.return_value.data = []
    with pytest.raises(RuntimeError):
        SupabaseTripRepository(client).add(make_trip())


def test_repository_factory():
    assert isinstance(create_trip_repository("memory"), InMemoryTripRepository)
    with pytest.raises(ValueError):
        create_trip_repository("sqlite")
