"""
Pipeline orchestrator — candidate pool, preference aggregation, ranking and
selection for one recommendation cycle.

The main entry point is create_recommendations: a function from
(catalog, ratings, saved ids, recency windows) to the recommendation list.
Its only side effect is recording the picks in the recency window it used.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..models.artist import Artist, ensure_artists
from ..models.config import RecommendationConfig, resolve_config
from ..models.profile import PreferenceProfile
from ..models.rating import Rating, ensure_ratings
from ..models.scoring import ScoredArtist
from ..models.session import RecencyWindow
from ..utils.random_source import RandomSource
from .candidate_pool import excluded_ids_for, get_candidate_pool, get_cold_start_pool
from .preferences import aggregate_preferences
from .ranking import draw_cold_start, rank_candidates, select_recommendations

logger = logging.getLogger(__name__)


def _cold_start_recommendations(
    artists: List[Artist],
    ratings: Dict[str, Rating],
    saved_ids: Iterable[str],
    count: int,
    window: RecencyWindow,
    rng: RandomSource,
    config: RecommendationConfig,
) -> List[ScoredArtist]:
    """Cold start: shuffled draw from the curated pool."""
    pool = get_cold_start_pool(artists, config)
    excluded = excluded_ids_for(ratings, saved_ids)
    return draw_cold_start(pool, excluded, count, window, rng, config)


def _scored_recommendations(
    artists: List[Artist],
    ratings: Dict[str, Rating],
    saved_ids: Iterable[str],
    profile: PreferenceProfile,
    count: int,
    window: RecencyWindow,
    rng: RandomSource,
    config: RecommendationConfig,
) -> List[ScoredArtist]:
    """Rank eligible candidates against the profile, then select."""
    candidates = get_candidate_pool(artists, ratings, saved_ids)
    scored = rank_candidates(profile, candidates, rng, config)
    return select_recommendations(scored, count, window, rng, config)


def create_recommendations(
    artists: List[Union[Dict[str, Any], Artist]],
    ratings: Dict[str, Union[Dict[str, Any], Rating]],
    saved_ids: Iterable[str],
    recent_window: RecencyWindow,
    cold_start_window: RecencyWindow,
    rng: RandomSource,
    config: Optional[RecommendationConfig] = None,
    count: Optional[int] = None,
) -> Tuple[List[ScoredArtist], PreferenceProfile, bool]:
    """
    Run one recommendation cycle.

    Returns:
        recommendations: Up to count ScoredArtists in display order
        profile: The preference profile the cycle was scored against
        cold_start: True if there were no ratings
    """
    # Resolve config (use defaults when None)
    config = resolve_config(config)
    count = config.recommendation_count if count is None else count

    # Normalize inputs to models (callers may pass stored dicts)
    artists_typed = ensure_artists(artists)
    ratings_typed = ensure_ratings(ratings)
    saved_ids = set(saved_ids)

    profile = aggregate_preferences(ratings_typed, artists_typed)
    cold_start = not ratings_typed

    if count <= 0 or not artists_typed:
        if not artists_typed:
            logger.info("[orchestrator] empty catalog, no recommendations")
        return [], profile, cold_start

    if cold_start:
        recommendations = _cold_start_recommendations(
            artists_typed, ratings_typed, saved_ids, count, cold_start_window, rng, config
        )
    else:
        recommendations = _scored_recommendations(
            artists_typed, ratings_typed, saved_ids, profile, count, recent_window, rng, config
        )

    logger.debug(
        "[orchestrator] cold_start=%s returned=%s", cold_start, len(recommendations),
    )
    return recommendations, profile, cold_start
