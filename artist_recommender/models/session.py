"""
Session model — everything a user's recommendation session remembers between cycles.

Ratings and the saved-for-later list are the persisted part; recency windows
and the displayed list live only as long as the session.
"""

from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field

from .artist import Artist
from .config import RecommendationConfig, resolve_config
from .rating import Rating, SavedArtist, ensure_ratings, ensure_saved
from .scoring import ScoredArtist


class RecencyWindow(BaseModel):
    """Recently surfaced artist ids, oldest first, never longer than cap."""

    cap: int = Field(ge=1)
    ids: List[str] = Field(default_factory=list)

    def __contains__(self, artist_id: object) -> bool:
        return artist_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def push(self, artist_ids: List[str]) -> None:
        """Append ids not already present, then evict from the front down to cap."""
        for artist_id in artist_ids:
            if artist_id not in self.ids:
                self.ids.append(artist_id)
        if len(self.ids) > self.cap:
            del self.ids[: len(self.ids) - self.cap]

    def clear(self) -> None:
        self.ids.clear()


class SessionState(BaseModel):
    """Ratings, saved list, recency windows, and the currently displayed recommendations."""

    ratings: Dict[str, Rating] = Field(default_factory=dict)
    saved: List[SavedArtist] = Field(default_factory=list)
    recent: RecencyWindow = Field(default_factory=lambda: RecencyWindow(cap=24))
    cold_start_recent: RecencyWindow = Field(default_factory=lambda: RecencyWindow(cap=18))
    recommendations: List[ScoredArtist] = Field(default_factory=list)

    @classmethod
    def for_config(cls, config: Optional[RecommendationConfig] = None) -> "SessionState":
        """Empty session with window caps taken from config."""
        config = resolve_config(config)
        return cls(
            recent=RecencyWindow(cap=config.recent_window_size),
            cold_start_recent=RecencyWindow(cap=config.cold_start_window_size),
        )

    # --- ratings ---

    def rate(self, artist_id: str, score: int, timestamp: int) -> Rating:
        rating = Rating(score=score, timestamp=timestamp)
        self.ratings[artist_id] = rating
        return rating

    @property
    def is_cold_start(self) -> bool:
        return not self.ratings

    # --- saved for later ---

    @property
    def saved_ids(self) -> Set[str]:
        return {item.id for item in self.saved}

    def is_saved(self, artist_id: str) -> bool:
        return any(item.id == artist_id for item in self.saved)

    def save(self, artist: Artist, timestamp: int) -> bool:
        """Snapshot artist into the saved list. False if it was already there."""
        if self.is_saved(artist.id):
            return False
        self.saved.append(SavedArtist.from_artist(artist, timestamp))
        return True

    def unsave(self, artist_id: str) -> bool:
        before = len(self.saved)
        self.saved = [item for item in self.saved if item.id != artist_id]
        return len(self.saved) != before

    @property
    def excluded_ids(self) -> Set[str]:
        """Ids that may never be recommended: rated or saved for later."""
        return set(self.ratings) | self.saved_ids

    # --- displayed recommendations ---

    @property
    def displayed_ids(self) -> List[str]:
        return [scored.id for scored in self.recommendations]

    def set_recommendations(self, recommendations: List[ScoredArtist]) -> None:
        self.recommendations = list(recommendations)

    def remove_recommendation(self, artist_id: str) -> bool:
        before = len(self.recommendations)
        self.recommendations = [s for s in self.recommendations if s.id != artist_id]
        return len(self.recommendations) != before

    def add_recommendation(self, scored: ScoredArtist) -> None:
        self.recommendations.append(scored)

    def window_for(self, cold_start: bool) -> RecencyWindow:
        return self.cold_start_recent if cold_start else self.recent

    def reset(self) -> None:
        """Forget ratings, saved list, exposure history and the displayed list."""
        self.ratings.clear()
        self.saved.clear()
        self.recent.clear()
        self.cold_start_recent.clear()
        self.recommendations.clear()

    # --- persistence round trip ---

    def export_persisted(self) -> Dict[str, Any]:
        """Ratings and saved list as plain JSON-serializable data."""
        return {
            "ratings": {
                artist_id: {"rating": r.score, "timestamp": r.timestamp}
                for artist_id, r in self.ratings.items()
            },
            "saved": [item.model_dump() for item in self.saved],
        }

    def load_persisted(self, data: Optional[Dict[str, Any]]) -> None:
        """Replace ratings and saved list with previously exported data."""
        data = data or {}
        self.ratings = ensure_ratings(data.get("ratings") or {})
        self.saved = ensure_saved(data.get("saved") or [])
