#!/usr/bin/env python3
"""
Configuration Tests

Run:
----
    pytest tests/test_config.py -v
"""

import pytest

from artist_recommender.models import DEFAULT_CONFIG, RecommendationConfig, resolve_config


class TestRecommendationConfig:
    """Test suite for RecommendationConfig."""

    def test_defaults(self):
        cfg = RecommendationConfig()

        assert (cfg.weight_genre, cfg.weight_theme, cfg.weight_style, cfg.weight_era) == (3, 2, 2, 1)
        assert cfg.jitter_max == 10
        assert cfg.recommendation_count == 6
        assert cfg.top_fraction == 0.7
        assert cfg.replacement_top_k == 10
        assert cfg.recent_window_size == 24
        assert cfg.cold_start_window_size == 18
        assert cfg.cold_start_pool_size == 20
        assert cfg.cold_start_artist_ids is None
        assert cfg.cold_start_max_attempts == 2

    def test_resolve_config(self):
        custom = RecommendationConfig(recommendation_count=3)
        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom

    def test_from_dict_sections(self):
        cfg = RecommendationConfig.from_dict({
            "scoring": {"weights": {"genre": 4, "era": 0.5}, "jitter_max": 2},
            "selection": {"recommendation_count": 8, "top_fraction": 0.5},
            "recency": {"window_size": 30, "cold_start_window_size": 12},
            "cold_start": {"artist_ids": ["a", "b"], "pool_size": 15, "max_attempts": 3},
        })

        assert cfg.weight_genre == 4
        assert cfg.weight_theme == 2
        assert cfg.weight_era == 0.5
        assert cfg.jitter_max == 2
        assert cfg.recommendation_count == 8
        assert cfg.top_fraction == 0.5
        assert cfg.recent_window_size == 30
        assert cfg.cold_start_window_size == 12
        assert cfg.cold_start_artist_ids == ["a", "b"]
        assert cfg.cold_start_pool_size == 15
        assert cfg.cold_start_max_attempts == 3

    def test_from_dict_flat_keys_and_unknowns(self):
        cfg = RecommendationConfig.from_dict({"replacement_top_k": 4, "nonsense": True})

        assert cfg.replacement_top_k == 4
        assert not hasattr(cfg, "nonsense")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"top_fraction": 0},
            {"top_fraction": 1.5},
            {"weight_genre": -1},
            {"jitter_max": -0.1},
            {"recent_window_size": 0},
            {"cold_start_window_size": 0},
            {"replacement_top_k": 0},
            {"cold_start_max_attempts": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValueError):
            RecommendationConfig(**overrides)
