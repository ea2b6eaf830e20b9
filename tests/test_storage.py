from datetime import timedelta

import pytest

from conftest import START
from pricewatch.errors import StoreError
from pricewatch.models import PriceEntry, RateLimitBucket, Tier
from pricewatch.storage import Store


class TestItems:
    def test_round_trip(self, store, make_item):
        item = make_item(price=42.5, site_name="Lamps", image_url="https://img/1.jpg")
        stored = store.get_item(item.id)
        assert stored == item
        assert stored.tier_at_creation is Tier.MANUAL
        assert stored.added_at == START

    def test_list_keeps_insertion_order_after_replace(self, store, make_item):
        first, second = make_item(), make_item()
        first.title = "Renamed"
        store.save_item(first)
        assert [i.id for i in store.list_items()] == [first.id, second.id]
        assert store.list_items()[0].title == "Renamed"

    def test_find_and_count(self, store, make_item):
        item = make_item()
        assert store.find_item_by_url(item.url).id == item.id
        assert store.find_item_by_url("https://nope.example/") is None
        assert store.count_items() == 1

    def test_partial_update(self, store, make_item):
        item = make_item()
        store.update_item(item.id, is_active=False, title="Off")
        stored = store.get_item(item.id)
        assert stored.is_active is False
        assert stored.title == "Off"
        assert stored.current_price == item.current_price

    def test_update_rejects_unknown_fields(self, store, make_item):
        item = make_item()
        with pytest.raises(ValueError):
            store.update_item(item.id, price_history=[])

    def test_update_missing_item(self, store):
        with pytest.raises(StoreError):
            store.update_item("missing", title="x")

    def test_remove(self, store, make_item):
        item = make_item()
        assert store.remove_item(item.id) is True
        assert store.get_item(item.id) is None
        assert store.remove_item(item.id) is False


class TestObservations:
    def test_append_trim_and_stamp(self, store, make_item):
        item = make_item(price=10.0)
        for n in range(1, 5):
            store.record_observation(
                item.id, PriceEntry(10.0 + n, START + timedelta(hours=n)), max_entries=3
            )
        stored = store.get_item(item.id)
        assert [e.price for e in stored.price_history] == [12.0, 13.0, 14.0]
        assert stored.last_checked_at == START + timedelta(hours=4)
        assert stored.current_price == 10.0

    def test_current_price_written_when_given(self, store, make_item):
        item = make_item(price=10.0)
        store.record_observation(item.id, PriceEntry(8.0, START), max_entries=50, current_price=8.0)
        assert store.get_item(item.id).current_price == 8.0

    def test_missing_item_leaves_history_untouched(self, store):
        with pytest.raises(StoreError):
            store.record_observation("missing", PriceEntry(1.0, START), max_entries=50)
        with store.get_connection() as conn:
            assert conn.execute("SELECT COUNT(*) FROM price_history").fetchone()[0] == 0


class TestBucketsAndSettings:
    def test_bucket_replace_or_create(self, store):
        bucket = RateLimitBucket("a.example", 1, 0, START, "HTTP 503", "s:1")
        store.put_bucket(bucket)
        store.put_bucket(RateLimitBucket("a.example", 2, 1, START + timedelta(minutes=5)))
        stored = store.get_bucket("a.example")
        assert stored.failure_count == 2
        assert stored.next_retry_at == START + timedelta(minutes=5)
        assert stored.last_outcome_id is None
        assert len(store.list_buckets()) == 1

    def test_settings_json(self, store):
        store.set_setting("config", {"max_tracked_items": 10})
        assert store.get_setting("config") == {"max_tracked_items": 10}
        assert store.get_setting("missing") is None

    def test_corrupt_setting(self, store):
        with store.get_connection() as conn:
            conn.execute("INSERT INTO settings (key, value) VALUES ('config', '{broken')")
        with pytest.raises(StoreError):
            store.get_setting("config")

    def test_last_sweep_at(self, store):
        assert store.get_last_sweep_at() is None
        store.set_last_sweep_at(START)
        assert store.get_last_sweep_at() == START


def test_unopenable_database(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    with pytest.raises(StoreError):
        Store(blocker / "sub" / "db.sqlite").init_db()


def test_db_path_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DB_PATH", str(tmp_path / "x.db"))
    assert Store().db_path == tmp_path / "x.db"
