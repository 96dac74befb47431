"""
Main ranking orchestration: score every eligible candidate and sort by final score.
"""

import logging
from typing import List

from ...models.artist import Artist
from ...models.config import RecommendationConfig, DEFAULT_CONFIG
from ...models.profile import PreferenceProfile
from ...models.scoring import ScoredArtist
from ...utils.random_source import RandomSource

from .scoring import score_artist

logger = logging.getLogger(__name__)


def rank_candidates(
    profile: PreferenceProfile,
    candidates: List[Artist],
    rng: RandomSource,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[ScoredArtist]:
    """
    Score candidates against the profile, highest final_score first.

    Ties are left to the random term already folded into each score.
    """
    scored = [score_artist(artist, profile, rng, config) for artist in candidates]
    scored.sort(key=lambda x: x.final_score, reverse=True)
    if scored:
        logger.debug(
            "[ranking] scored=%s top=%s (%.2f)",
            len(scored), scored[0].id, scored[0].final_score,
        )
    return scored
