"""
Candidate pool: which catalog artists may be recommended at all.

Filters out rated artists, artists saved for later, and any extra ids the
caller wants kept out (e.g. cards already on screen). Catalog order is kept.

The public entry points are get_candidate_pool and get_cold_start_pool.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from ..models.artist import Artist
from ..models.config import RecommendationConfig, DEFAULT_CONFIG
from ..models.rating import Rating

logger = logging.getLogger(__name__)


def _not_excluded(artist: Artist, excluded_ids: Set[str]) -> bool:
    """True if the artist id is not in the exclusion set."""
    return artist.id not in excluded_ids


def _filter_eligible_candidates(
    artists: List[Artist],
    excluded_ids: Set[str],
) -> List[Artist]:
    """Return artists that pass the exclusion check, in catalog order."""
    return [a for a in artists if _not_excluded(a, excluded_ids)]


def excluded_ids_for(
    ratings: Dict[str, Rating],
    saved_ids: Iterable[str],
    extra_excluded: Optional[Iterable[str]] = None,
) -> Set[str]:
    """Union of rated ids, saved ids and any extra exclusions."""
    excluded = set(ratings) | set(saved_ids)
    if extra_excluded:
        excluded.update(extra_excluded)
    return excluded


def get_candidate_pool(
    artists: List[Artist],
    ratings: Dict[str, Rating],
    saved_ids: Iterable[str],
    extra_excluded: Optional[Iterable[str]] = None,
) -> List[Artist]:
    """
    Eligible candidates for scoring: every catalog artist that is neither
    rated, saved for later, nor in extra_excluded.
    """
    excluded = excluded_ids_for(ratings, saved_ids, extra_excluded)
    candidates = _filter_eligible_candidates(artists, excluded)
    logger.debug(
        "[candidate_pool] catalog=%s excluded=%s eligible=%s",
        len(artists), len(excluded), len(candidates),
    )
    return candidates


def get_cold_start_pool(
    artists: List[Artist],
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[Artist]:
    """
    Curated subset used before the user has rated anything.

    config.cold_start_artist_ids when set (unknown ids ignored, listed order kept);
    otherwise the first cold_start_pool_size non-custom catalog artists.
    """
    if config.cold_start_artist_ids is not None:
        by_id = {a.id: a for a in artists}
        pool = [by_id[aid] for aid in config.cold_start_artist_ids if aid in by_id]
        missing = len(config.cold_start_artist_ids) - len(pool)
        if missing:
            logger.info("[cold_start] %s curated ids not in catalog", missing)
        return pool
    return [a for a in artists if not a.is_custom][: config.cold_start_pool_size]
