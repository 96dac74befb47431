#!/usr/bin/env python3
"""
State Store Tests

Tests that ratings and the saved list survive a round trip through a store.

Run:
----
    pytest tests/test_stores.py -v
"""

import json

from artist_recommender import InMemoryStateStore, JsonStateStore, RecommendationEngine

from conftest import SequenceRandom


def _engine_with_history(catalog):
    engine = RecommendationEngine(catalog, rng=SequenceRandom(), clock=lambda: 1234)
    engine.rate("a00", 5)
    engine.rate("a07", 2)
    engine.save("a09")
    return engine


class TestJsonStateStore:
    """Test suite for JsonStateStore."""

    def test_round_trip(self, tmp_path, catalog):
        store = JsonStateStore(tmp_path / "data" / "session.json")
        engine = _engine_with_history(catalog)
        store.save(engine.export_state())

        restored = RecommendationEngine(catalog, rng=SequenceRandom())
        restored.load_state(store.load())

        assert restored.export_state() == engine.export_state()
        assert restored.session.ratings["a00"].timestamp == 1234

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonStateStore(tmp_path / "nope.json").load() == {"ratings": {}, "saved": []}

    def test_corrupt_file_is_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        assert JsonStateStore(path).load() == {"ratings": {}, "saved": []}

    def test_non_object_file_is_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps([1, 2, 3]))

        assert JsonStateStore(path).load() == {"ratings": {}, "saved": []}

    def test_clear_removes_file(self, tmp_path, catalog):
        path = tmp_path / "session.json"
        store = JsonStateStore(path)
        store.save(_engine_with_history(catalog).export_state())
        store.clear()

        assert not path.exists()
        store.clear()


class TestInMemoryStateStore:
    """Test suite for InMemoryStateStore."""

    def test_round_trip_is_a_copy(self, catalog):
        store = InMemoryStateStore()
        state = _engine_with_history(catalog).export_state()
        store.save(state)
        state["ratings"].clear()

        loaded = store.load()
        assert set(loaded["ratings"]) == {"a00", "a07"}
        assert [s["id"] for s in loaded["saved"]] == ["a09"]

    def test_clear(self):
        store = InMemoryStateStore({"ratings": {"a": {"rating": 3, "timestamp": 1}}, "saved": []})
        store.clear()
        assert store.load() == {"ratings": {}, "saved": []}
