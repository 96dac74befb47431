"""
Rating and saved-for-later models — the two structures a persistence layer round-trips.
"""

import time
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

from .artist import Artist


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class Rating(BaseModel):
    """A user's 1–5 rating of one artist. Re-rating replaces the whole record."""

    score: int = Field(ge=1, le=5)
    timestamp: int = 0


class SavedArtist(BaseModel):
    """
    Snapshot of an artist saved for later.

    Copied at save time so the list renders the same even if the catalog changes.
    """

    id: str
    name: str = ""
    genres: List[str] = []
    themes: List[str] = []
    styles: List[str] = []
    timestamp: int = 0

    @classmethod
    def from_artist(cls, artist: Artist, timestamp: int) -> "SavedArtist":
        return cls(
            id=artist.id,
            name=artist.name,
            genres=list(artist.genres),
            themes=list(artist.themes),
            styles=list(artist.styles),
            timestamp=timestamp,
        )


def ensure_ratings(
    ratings: Dict[str, Union[Dict[str, Any], Rating]],
) -> Dict[str, Rating]:
    """
    Convert rating map values to Rating models.

    Accepts the stored shape {"rating": n, "timestamp": ms} as well as {"score": n}.
    """
    typed: Dict[str, Rating] = {}
    for artist_id, value in (ratings or {}).items():
        if isinstance(value, Rating):
            typed[artist_id] = value
            continue
        data = dict(value)
        if "score" not in data and "rating" in data:
            data["score"] = data.pop("rating")
        typed[artist_id] = Rating.model_validate(data)
    return typed


def ensure_saved(items: List[Union[Dict[str, Any], SavedArtist]]) -> List[SavedArtist]:
    """Convert list of dicts or SavedArtists to SavedArtist models."""
    return [
        SavedArtist.model_validate(s) if isinstance(s, dict) else s
        for s in (items or [])
    ]
