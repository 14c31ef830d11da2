import pytest

from app.services.data_loader import load_activity_pool


def test_bundled_pool_keeps_file_order():
    pool = load_activity_pool()
    assert [a.name for a in pool][:3] == ["Visit Local Museum", "Lunch at Local Restaurant", "Walking Tour"]
    assert len(pool) == 6
    assert pool[0].time == "10:00 AM"
    assert pool[0].location == "Downtown"


def test_custom_pool_with_missing_columns(tmp_path):
    csv_file = tmp_path / "pool.csv"
    csv_file.write_text("name,location\nCanal Cruise,Harbour\n,Nowhere\nTea House,\n")

    pool = load_activity_pool(csv_file)

    assert [a.name for a in pool] == ["Canal Cruise", "Tea House"]
    assert pool[0].description is None
    assert pool[1].location is None


def test_pool_without_name_column(tmp_path):
    csv_file = tmp_path / "pool.csv"
    csv_file.write_text("title\nCanal Cruise\n")
    with pytest.raises(ValueError):
        load_activity_pool(csv_file)
