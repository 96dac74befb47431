"""
Listening stats — the numbers behind the "your taste" summary panel.
"""

from typing import Dict, List

from pydantic import BaseModel

from ..models.artist import Artist
from ..models.rating import Rating


class ListeningStats(BaseModel):
    """Counts and averages over the user's rating history."""

    rated_count: int = 0
    average_rating: float = 0.0
    genre_count: int = 0


def summarize_listening(ratings: Dict[str, Rating], artists: List[Artist]) -> ListeningStats:
    """
    rated_count counts every rating; average_rating is rounded to one decimal;
    genre_count is the number of distinct genres across rated catalog artists.
    """
    if not ratings:
        return ListeningStats()
    artist_by_id = {a.id: a for a in artists}
    genres = set()
    for artist_id in ratings:
        artist = artist_by_id.get(artist_id)
        if artist is not None:
            genres.update(artist.genres)
    average = sum(r.score for r in ratings.values()) / len(ratings)
    return ListeningStats(
        rated_count=len(ratings),
        average_rating=round(average, 1),
        genre_count=len(genres),
    )
