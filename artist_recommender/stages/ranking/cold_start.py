"""
Cold start: recommendations before the user has rated anything.

No profile exists yet, so instead of scoring, the curated pool is shuffled and
the first N eligible artists are taken. The cold-start recency window keeps
consecutive draws from repeating; once too few unseen artists remain the
window is cleared and the draw is retried.
"""

import logging
from typing import List, Set

from ...models.artist import Artist
from ...models.config import RecommendationConfig, DEFAULT_CONFIG
from ...models.scoring import ScoredArtist
from ...models.session import RecencyWindow
from ...utils.random_source import RandomSource

logger = logging.getLogger(__name__)


def _eligible_cold_start(
    pool: List[Artist],
    excluded_ids: Set[str],
    window: RecencyWindow,
) -> List[Artist]:
    return [a for a in pool if a.id not in excluded_ids and a.id not in window]


def draw_cold_start(
    pool: List[Artist],
    excluded_ids: Set[str],
    count: int,
    window: RecencyWindow,
    rng: RandomSource,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredArtist]:
    """
    Draw up to count artists uniformly from the cold-start pool.

    Excludes excluded_ids (rated, saved) and ids in window. If fewer than count
    remain, the window is cleared and the draw retried, at most
    config.cold_start_max_attempts attempts in total; the last attempt returns
    whatever is eligible. Picks are pushed into window.

    Returned ScoredArtists carry no score components (final_score 0).
    """
    if count <= 0:
        return []

    eligible: List[Artist] = []
    for attempt in range(1, config.cold_start_max_attempts + 1):
        eligible = _eligible_cold_start(pool, excluded_ids, window)
        if len(eligible) >= count or attempt == config.cold_start_max_attempts:
            break
        logger.info(
            "[cold_start] window exhausted (eligible=%s, needed=%s, window=%s), resetting",
            len(eligible), count, len(window),
        )
        window.clear()

    rng.shuffle(eligible)
    picks = eligible[:count]
    window.push([a.id for a in picks])
    return [ScoredArtist(artist=a) for a in picks]
