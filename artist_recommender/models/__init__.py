"""Data models for the recommendation engine."""

from .artist import Artist, build_custom_artist, ensure_artists
from .config import DEFAULT_CONFIG, RecommendationConfig, resolve_config
from .profile import PreferenceProfile
from .rating import Rating, SavedArtist, ensure_ratings, ensure_saved, now_ms
from .scoring import ScoredArtist
from .session import RecencyWindow, SessionState

__all__ = [
    "DEFAULT_CONFIG",
    "Artist",
    "PreferenceProfile",
    "Rating",
    "RecencyWindow",
    "RecommendationConfig",
    "SavedArtist",
    "ScoredArtist",
    "SessionState",
    "build_custom_artist",
    "ensure_artists",
    "ensure_ratings",
    "ensure_saved",
    "now_ms",
    "resolve_config",
]
