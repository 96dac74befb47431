"""
Artist recommendation engine.

Single entry point for the package:
- models/: Artist, Rating, SavedArtist, PreferenceProfile, ScoredArtist, SessionState, RecommendationConfig
- stages/: candidate_pool, preferences, ranking (scoring, selection, cold start, replacement), orchestrator
- engine: RecommendationEngine, the action-level facade a UI drives
- stores: StateStore protocol with in-memory and JSON file implementations
"""

from .engine import RecommendationEngine
from .models import (
    DEFAULT_CONFIG,
    Artist,
    PreferenceProfile,
    Rating,
    RecencyWindow,
    RecommendationConfig,
    SavedArtist,
    ScoredArtist,
    SessionState,
)
from .stages import (
    ListeningStats,
    aggregate_preferences,
    create_recommendations,
    draw_cold_start,
    draw_replacement,
    get_candidate_pool,
    rank_candidates,
    select_recommendations,
    summarize_listening,
)
from .stores import InMemoryStateStore, JsonStateStore, StateStore
from .utils import NumpyRandomSource, RandomSource

__all__ = [
    "DEFAULT_CONFIG",
    "Artist",
    "InMemoryStateStore",
    "JsonStateStore",
    "ListeningStats",
    "NumpyRandomSource",
    "PreferenceProfile",
    "RandomSource",
    "Rating",
    "RecencyWindow",
    "RecommendationConfig",
    "RecommendationEngine",
    "SavedArtist",
    "ScoredArtist",
    "SessionState",
    "StateStore",
    "aggregate_preferences",
    "create_recommendations",
    "draw_cold_start",
    "draw_replacement",
    "get_candidate_pool",
    "rank_candidates",
    "select_recommendations",
    "summarize_listening",
]
