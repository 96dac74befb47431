"""
Engine configuration — scoring weights, selection split, recency windows, cold start.

RecommendationConfig defaults are defined here. Callers may pass a dict
(e.g. loaded from a JSON settings file); from_dict() merges it with these defaults.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, model_validator


class RecommendationConfig(BaseModel):
    """Configuration for the recommendation engine."""

    # -------------------------------------------------------------------------
    # Scoring weights
    # score = w_genre * Σgenre + w_theme * Σtheme + w_style * Σstyle + w_era * era + U(0, jitter_max)
    # -------------------------------------------------------------------------

    # Genre overlap matters most.
    weight_genre: float = 3.0
    weight_theme: float = 2.0
    weight_style: float = 2.0
    # Era is a weak signal: one value per artist.
    weight_era: float = 1.0

    # Upper bound of the uniform random term added to every score.
    # Breaks ties and keeps repeated cycles from showing the same list.
    jitter_max: float = 10.0

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    # Number of recommendations shown per cycle.
    recommendation_count: int = 6

    # Share of the list taken straight from the top of the ranking (rounded up).
    # The rest is drawn at random from the remaining candidates.
    top_fraction: float = 0.7

    # Replacement for a dismissed card is drawn uniformly from this many best candidates.
    replacement_top_k: int = 10

    # -------------------------------------------------------------------------
    # Recency windows (ids recently shown; oldest evicted first)
    # -------------------------------------------------------------------------

    recent_window_size: int = 24
    cold_start_window_size: int = 18

    # -------------------------------------------------------------------------
    # Cold start (no ratings yet)
    # -------------------------------------------------------------------------

    # Explicit curated pool. When None, the first cold_start_pool_size
    # non-custom catalog artists are used.
    cold_start_artist_ids: Optional[List[str]] = None
    cold_start_pool_size: int = 20

    # Draw attempts before giving up on a full list. The window is cleared
    # between attempts, so the second attempt sees the whole pool.
    cold_start_max_attempts: int = 2

    @model_validator(mode="after")
    def check_bounds(self):
        if not 0.0 < self.top_fraction <= 1.0:
            raise ValueError(f"top_fraction must be in (0, 1], got {self.top_fraction}")
        weights = (self.weight_genre, self.weight_theme, self.weight_style, self.weight_era)
        if min(weights) < 0 or self.jitter_max < 0:
            raise ValueError("Scoring weights and jitter_max must be non-negative")
        if self.recent_window_size < 1 or self.cold_start_window_size < 1:
            raise ValueError("Recency window sizes must be at least 1")
        if self.replacement_top_k < 1:
            raise ValueError(f"replacement_top_k must be at least 1, got {self.replacement_top_k}")
        if self.cold_start_max_attempts < 1:
            raise ValueError("cold_start_max_attempts must be at least 1")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "scoring" in config_dict:
            sc = config_dict["scoring"]
            weights = sc.get("weights", {})
            for tag_kind in ("genre", "theme", "style", "era"):
                if tag_kind in weights:
                    flat[f"weight_{tag_kind}"] = weights[tag_kind]
            if "jitter_max" in sc:
                flat["jitter_max"] = sc["jitter_max"]
        if "selection" in config_dict:
            flat.update(config_dict["selection"])
        if "recency" in config_dict:
            rc = config_dict["recency"]
            if "window_size" in rc:
                flat["recent_window_size"] = rc["window_size"]
            if "cold_start_window_size" in rc:
                flat["cold_start_window_size"] = rc["cold_start_window_size"]
        if "cold_start" in config_dict:
            cs = config_dict["cold_start"]
            if "artist_ids" in cs:
                flat["cold_start_artist_ids"] = cs["artist_ids"]
            if "pool_size" in cs:
                flat["cold_start_pool_size"] = cs["pool_size"]
            if "max_attempts" in cs:
                flat["cold_start_max_attempts"] = cs["max_attempts"]
        allowed = set(cls.model_fields)
        flat.update({k: v for k, v in config_dict.items() if k in allowed})
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
