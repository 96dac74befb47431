"""
Selection — top/random split over the ranked list with recency-based diversity.

Most of the list comes straight from the top of the ranking; the remainder is
drawn at random from what is left so lower-ranked artists still surface.
Artists shown in recent cycles are skipped while enough fresh ones exist.
"""

import logging
import math
from typing import List

from ...models.config import RecommendationConfig, DEFAULT_CONFIG
from ...models.scoring import ScoredArtist
from ...models.session import RecencyWindow
from ...utils.random_source import RandomSource

logger = logging.getLogger(__name__)


def _prefer_not_recent(
    scored: List[ScoredArtist],
    count: int,
    window: RecencyWindow,
) -> List[ScoredArtist]:
    """
    Drop recently shown candidates when at least count others remain.

    Otherwise the full list is returned and recent artists may reappear.
    """
    fresh = [s for s in scored if s.id not in window]
    if len(fresh) >= count:
        return fresh
    logger.debug(
        "[selection] only %s fresh candidates for %s slots, allowing recent", len(fresh), count,
    )
    return scored


def select_top_and_random(
    pool: List[ScoredArtist],
    count: int,
    rng: RandomSource,
    top_fraction: float = 0.7,
) -> List[ScoredArtist]:
    """
    Take ceil(top_fraction * n) from the head of pool, then fill the rest with
    uniform random picks (without replacement) from the remainder.

    Args:
        pool: Candidates sorted by final_score (desc). Not mutated.
        count: Requested list length.
        top_fraction: Share of the list taken directly from the head.

    Returns:
        Up to count ScoredArtists: the top block in rank order, then the random picks.
    """
    n = min(count, len(pool))
    if n <= 0:
        return []
    top_count = math.ceil(n * top_fraction)
    random_count = n - top_count

    selected = list(pool[:top_count])
    remaining = list(pool[top_count:])
    for _ in range(random_count):
        if not remaining:
            break
        selected.append(remaining.pop(rng.randrange(len(remaining))))
    return selected


def select_recommendations(
    scored: List[ScoredArtist],
    count: int,
    window: RecencyWindow,
    rng: RandomSource,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredArtist]:
    """
    Final recommendation list for one cycle; records the picks in window.

    N <= 0 returns an empty list and leaves the window untouched.
    """
    if count <= 0 or not scored:
        return []
    pool = _prefer_not_recent(scored, count, window)
    selected = select_top_and_random(pool, count, rng, config.top_fraction)
    window.push([s.id for s in selected])
    return selected
