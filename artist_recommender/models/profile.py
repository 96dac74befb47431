"""
Preference profile — tag weights folded from rating history.

Derived and ephemeral: rebuilt from scratch on every recommendation cycle.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class PreferenceProfile(BaseModel):
    """Accumulated rating weight per genre, theme, style and era, plus the mean rating."""

    genres: Dict[str, float] = Field(default_factory=dict)
    themes: Dict[str, float] = Field(default_factory=dict)
    styles: Dict[str, float] = Field(default_factory=dict)
    eras: Dict[str, float] = Field(default_factory=dict)
    average_rating: float = 0.0

    def genre_weight(self, genre: str) -> float:
        return self.genres.get(genre, 0.0)

    def theme_weight(self, theme: str) -> float:
        return self.themes.get(theme, 0.0)

    def style_weight(self, style: str) -> float:
        return self.styles.get(style, 0.0)

    def era_weight(self, era: Optional[str]) -> float:
        if era is None:
            return 0.0
        return self.eras.get(era, 0.0)

    @property
    def is_empty(self) -> bool:
        """True when no tag carries any weight."""
        return not any(
            w for weights in (self.genres, self.themes, self.styles, self.eras)
            for w in weights.values()
        )
