"""
Artist model — typed representation of a catalog entry for the recommendation pipeline.

Used by candidate_pool, preferences, and ranking stages instead of raw dicts.
Built from catalog dicts via Artist.model_validate(d).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

CUSTOM_ID_PREFIX = "custom_"
CUSTOM_GENRES = ["user-added"]
CUSTOM_THEMES = ["custom"]
CUSTOM_STYLES = ["personal"]
CUSTOM_ERA = "2020s"


class Artist(BaseModel):
    """
    Artist payload used across the engine stages.

    genres, themes and styles are tag sets: duplicates are dropped on load,
    first-seen order is kept for display. era is the single value the
    preference profile tracks; year is informational.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    genres: List[str] = []
    themes: List[str] = []
    styles: List[str] = []
    year: Optional[int] = None
    era: Optional[str] = None
    is_custom: bool = False

    @field_validator("genres", "themes", "styles", mode="before")
    @classmethod
    def dedupe_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set, frozenset)):
            return list(dict.fromkeys(value))
        return value


def ensure_artists(artists: Optional[List[Union[Dict[str, Any], "Artist"]]]) -> List["Artist"]:
    """Convert list of dicts or Artists to list of Artist models for use in the pipeline."""
    if not artists:
        return []
    return [
        Artist.model_validate(a) if isinstance(a, dict) else a
        for a in artists
    ]


def build_custom_artist(name: str, timestamp_ms: int) -> Artist:
    """
    Artist entry for a name the user typed in themselves.

    Custom artists carry fixed placeholder tags so they still feed the profile.
    """
    return Artist(
        id=f"{CUSTOM_ID_PREFIX}{timestamp_ms}",
        name=name,
        genres=list(CUSTOM_GENRES),
        themes=list(CUSTOM_THEMES),
        styles=list(CUSTOM_STYLES),
        year=datetime.fromtimestamp(timestamp_ms / 1000).year,
        era=CUSTOM_ERA,
        is_custom=True,
    )
