"""
Replacement-on-removal: a single new card for one that was dismissed.

Candidates exclude rated and saved artists, everything still displayed, and the
dismissed artist itself. With ratings, the candidates are scored against a
freshly aggregated profile and one of the best replacement_top_k is picked
uniformly. In cold start the pick is uniform over the eligible curated pool.
"""

import logging
from typing import List, Optional

from ...models.artist import Artist
from ...models.config import RecommendationConfig, DEFAULT_CONFIG
from ...models.scoring import ScoredArtist
from ...models.session import SessionState
from ...utils.random_source import RandomSource
from ..candidate_pool import get_candidate_pool, get_cold_start_pool
from ..preferences import aggregate_preferences

from .core import rank_candidates

logger = logging.getLogger(__name__)


def _pick_scored_replacement(
    candidates: List[Artist],
    session: SessionState,
    artists: List[Artist],
    rng: RandomSource,
    config: RecommendationConfig,
) -> ScoredArtist:
    profile = aggregate_preferences(session.ratings, artists)
    scored = rank_candidates(profile, candidates, rng, config)
    top_k = min(config.replacement_top_k, len(scored))
    return scored[rng.randrange(top_k)]


def draw_replacement(
    artists: List[Artist],
    session: SessionState,
    dismissed_id: str,
    rng: RandomSource,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> Optional[ScoredArtist]:
    """
    Pick one replacement for dismissed_id, or None when nothing is eligible.

    The pick is recorded in the session's recency window for the current mode.
    Does not modify the displayed list; the caller appends the result.
    """
    cold_start = session.is_cold_start
    shown = set(session.displayed_ids)
    shown.add(dismissed_id)

    if cold_start:
        excluded = session.excluded_ids | shown
        candidates = [a for a in get_cold_start_pool(artists, config) if a.id not in excluded]
    else:
        candidates = get_candidate_pool(artists, session.ratings, session.saved_ids, shown)

    if not candidates:
        logger.info("[replacement] no eligible candidates for %s, list shrinks", dismissed_id)
        return None

    if cold_start:
        replacement = ScoredArtist(artist=candidates[rng.randrange(len(candidates))])
    else:
        replacement = _pick_scored_replacement(candidates, session, artists, rng, config)

    session.window_for(cold_start).push([replacement.id])
    return replacement
