#!/usr/bin/env python3
"""
Session State Tests

Tests the recency window and the session's mutation methods.

Run:
----
    pytest tests/test_session.py -v
"""

import pytest
from pydantic import ValidationError

from artist_recommender.models import (
    RecencyWindow,
    RecommendationConfig,
    SavedArtist,
    ScoredArtist,
    SessionState,
)

from conftest import make_artist


class TestRecencyWindow:
    """Test suite for RecencyWindow."""

    def test_evicts_oldest_first(self):
        window = RecencyWindow(cap=3)
        window.push(["a", "b"])
        window.push(["c", "d"])

        assert window.ids == ["b", "c", "d"]

    def test_skips_ids_already_present(self):
        window = RecencyWindow(cap=5, ids=["a", "b"])
        window.push(["b", "c", "c"])

        assert window.ids == ["a", "b", "c"]

    def test_oversized_push_keeps_newest(self):
        window = RecencyWindow(cap=2)
        window.push(["a", "b", "c", "d"])

        assert window.ids == ["c", "d"]
        assert "a" not in window

    def test_clear(self):
        window = RecencyWindow(cap=2, ids=["a"])
        window.clear()
        assert len(window) == 0

    def test_cap_must_be_positive(self):
        with pytest.raises(ValidationError):
            RecencyWindow(cap=0)


class TestSessionState:
    """Test suite for SessionState."""

    def test_default_caps(self):
        session = SessionState()
        assert session.recent.cap == 24
        assert session.cold_start_recent.cap == 18

    def test_caps_from_config(self):
        cfg = RecommendationConfig(recent_window_size=10, cold_start_window_size=4)
        session = SessionState.for_config(cfg)

        assert session.recent.cap == 10
        assert session.cold_start_recent.cap == 4

    def test_rerating_overwrites(self):
        session = SessionState()
        session.rate("a", 2, timestamp=100)
        session.rate("a", 5, timestamp=200)

        assert len(session.ratings) == 1
        assert session.ratings["a"].score == 5
        assert session.ratings["a"].timestamp == 200

    @pytest.mark.parametrize("score", [0, 6])
    def test_rating_out_of_range_rejected(self, score):
        with pytest.raises(ValidationError):
            SessionState().rate("a", score, timestamp=1)

    def test_save_is_idempotent(self):
        session = SessionState()
        artist = make_artist("a", genres=["rock"])

        assert session.save(artist, timestamp=1) is True
        assert session.save(artist, timestamp=2) is False
        assert len(session.saved) == 1
        assert session.saved[0].timestamp == 1

    def test_saved_snapshot_independent_of_catalog(self):
        session = SessionState()
        artist = make_artist("a", genres=["rock"])
        session.save(artist, timestamp=1)
        artist.genres.append("pop")

        assert session.saved[0].genres == ["rock"]

    def test_unsave_unknown_is_noop(self):
        session = SessionState()
        session.save(make_artist("a"), timestamp=1)

        assert session.unsave("zzz") is False
        assert session.unsave("a") is True
        assert session.saved == []

    def test_excluded_ids(self):
        session = SessionState()
        session.rate("r", 3, timestamp=1)
        session.save(make_artist("s"), timestamp=1)

        assert session.excluded_ids == {"r", "s"}

    def test_remove_recommendation(self):
        session = SessionState()
        session.set_recommendations([ScoredArtist(artist=make_artist("a")), ScoredArtist(artist=make_artist("b"))])

        assert session.remove_recommendation("a") is True
        assert session.remove_recommendation("a") is False
        assert session.displayed_ids == ["b"]

    def test_reset(self):
        session = SessionState()
        session.rate("a", 3, timestamp=1)
        session.save(make_artist("b"), timestamp=1)
        session.recent.push(["x"])
        session.cold_start_recent.push(["y"])
        session.reset()

        assert session.is_cold_start
        assert session.saved == []
        assert len(session.recent) == 0
        assert len(session.cold_start_recent) == 0

    def test_persisted_round_trip(self):
        session = SessionState()
        session.rate("a", 4, timestamp=111)
        session.save(make_artist("b", genres=["jazz"]), timestamp=222)
        exported = session.export_persisted()

        restored = SessionState()
        restored.load_persisted(exported)

        assert restored.ratings == session.ratings
        assert restored.saved == session.saved
        assert exported["ratings"]["a"] == {"rating": 4, "timestamp": 111}

    def test_load_accepts_score_key_and_none(self):
        session = SessionState()
        session.load_persisted({"ratings": {"a": {"score": 2, "timestamp": 5}}})
        assert session.ratings["a"].score == 2

        session.load_persisted(None)
        assert session.ratings == {}
        assert session.saved == []

    def test_saved_artist_from_dict(self):
        session = SessionState()
        session.load_persisted({"saved": [{"id": "x", "name": "X", "genres": ["pop"], "timestamp": 9}]})
        assert session.saved == [SavedArtist(id="x", name="X", genres=["pop"], timestamp=9)]
