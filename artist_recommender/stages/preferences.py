"""
Preference aggregation: fold rating history into tag weights.

Every rated artist adds its rating value to each genre, theme and style it
carries and to its era. Higher-rated artists therefore pull harder on the
profile. Ratings whose artist is missing from the catalog still count toward
the mean rating but contribute no tag weight.
"""

import logging
from typing import Dict, List

from ..models.artist import Artist
from ..models.profile import PreferenceProfile
from ..models.rating import Rating

logger = logging.getLogger(__name__)


def _add_weight(weights: Dict[str, float], tag: str, weight: float) -> None:
    weights[tag] = weights.get(tag, 0.0) + weight


def aggregate_preferences(
    ratings: Dict[str, Rating],
    artists: List[Artist],
) -> PreferenceProfile:
    """
    Build a PreferenceProfile from a rating map and the catalog used for tag lookup.

    Empty rating history yields an empty profile (every weight 0) with mean 0.
    """
    profile = PreferenceProfile()
    if not ratings:
        return profile

    artist_by_id = {a.id: a for a in artists}
    skipped = 0
    for artist_id, rating in ratings.items():
        artist = artist_by_id.get(artist_id)
        if artist is None:
            skipped += 1
            continue
        weight = float(rating.score)
        for genre in artist.genres:
            _add_weight(profile.genres, genre, weight)
        for theme in artist.themes:
            _add_weight(profile.themes, theme, weight)
        for style in artist.styles:
            _add_weight(profile.styles, style, weight)
        if artist.era is not None:
            _add_weight(profile.eras, artist.era, weight)

    if skipped:
        logger.debug("[preferences] skipped %s ratings for artists not in catalog", skipped)

    profile.average_rating = sum(r.score for r in ratings.values()) / len(ratings)
    return profile
