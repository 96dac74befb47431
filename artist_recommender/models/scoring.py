"""
Scoring model — ScoredArtist: an artist with its recommendation score components.
"""

from pydantic import BaseModel

from .artist import Artist


class ScoredArtist(BaseModel):
    """An artist with all its scoring components."""

    artist: Artist
    genre_score: float = 0.0
    theme_score: float = 0.0
    style_score: float = 0.0
    era_score: float = 0.0
    jitter: float = 0.0
    final_score: float = 0.0

    @property
    def id(self) -> str:
        return self.artist.id

    @property
    def match_score(self) -> float:
        """Weighted tag match without the random term."""
        return self.genre_score + self.theme_score + self.style_score + self.era_score
