"""
Recommendation engine — the object a presentation layer talks to.

Owns the catalog, the session state, config and random source, and turns user
actions (rate, dismiss, save, unsave, shuffle, add custom artist, clear) into
state changes plus a new or patched recommendation list. Rendering and storage
stay with the caller: read `recommendations` / `saved_for_later` after each
action and persist `export_state()` wherever you like.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from .models.artist import Artist, build_custom_artist, ensure_artists
from .models.config import RecommendationConfig, resolve_config
from .models.profile import PreferenceProfile
from .models.rating import SavedArtist, now_ms
from .models.scoring import ScoredArtist
from .models.session import SessionState
from .stages.orchestrator import create_recommendations
from .stages.preferences import aggregate_preferences
from .stages.ranking import draw_replacement
from .stages.stats import ListeningStats, summarize_listening
from .utils.random_source import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Session-scoped recommender over an in-memory artist catalog."""

    def __init__(
        self,
        artists: Optional[List[Union[Dict[str, Any], Artist]]] = None,
        config: Optional[RecommendationConfig] = None,
        rng: Optional[RandomSource] = None,
        session: Optional[SessionState] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.config = resolve_config(config)
        self.rng: RandomSource = rng if rng is not None else NumpyRandomSource()
        self.session = session if session is not None else SessionState.for_config(self.config)
        self._clock = clock
        self.artists: List[Artist] = []
        self._by_id: Dict[str, Artist] = {}
        for artist in ensure_artists(artists):
            if artist.id in self._by_id:
                logger.warning("[catalog] duplicate artist id %s, keeping first", artist.id)
                continue
            self.artists.append(artist)
            self._by_id[artist.id] = artist

    # --- read side ---

    @property
    def recommendations(self) -> List[ScoredArtist]:
        return list(self.session.recommendations)

    @property
    def saved_for_later(self) -> List[SavedArtist]:
        """Saved snapshots, most recently saved first."""
        return sorted(self.session.saved, key=lambda s: s.timestamp, reverse=True)

    @property
    def profile(self) -> PreferenceProfile:
        return aggregate_preferences(self.session.ratings, self.artists)

    def stats(self) -> ListeningStats:
        return summarize_listening(self.session.ratings, self.artists)

    def get_artist(self, artist_id: str) -> Optional[Artist]:
        return self._by_id.get(artist_id)

    # --- cycles ---

    def refresh(self) -> List[ScoredArtist]:
        """Run a full recommendation cycle and replace the displayed list."""
        recommendations, _, cold_start = create_recommendations(
            self.artists,
            self.session.ratings,
            self.session.saved_ids,
            self.session.recent,
            self.session.cold_start_recent,
            self.rng,
            self.config,
        )
        self.session.set_recommendations(recommendations)
        logger.debug("[engine] refresh cold_start=%s shown=%s", cold_start, len(recommendations))
        return self.recommendations

    def shuffle(self) -> List[ScoredArtist]:
        return self.refresh()

    # --- user actions ---

    def rate(self, artist_id: str, score: int) -> List[ScoredArtist]:
        """Record (or overwrite) a rating, then run a full cycle."""
        self.session.rate(artist_id, score, self._clock())
        return self.refresh()

    def dismiss(self, artist_id: str) -> List[ScoredArtist]:
        """
        Remove a displayed card and append one replacement if any is eligible.

        Unknown or not-displayed ids are a no-op.
        """
        if not self.session.remove_recommendation(artist_id):
            logger.debug("[engine] dismiss of non-displayed %s ignored", artist_id)
            return self.recommendations
        replacement = draw_replacement(
            self.artists, self.session, artist_id, self.rng, self.config
        )
        if replacement is not None:
            self.session.add_recommendation(replacement)
        return self.recommendations

    def save(self, artist_id: str) -> List[ScoredArtist]:
        """Save an artist for later and dismiss its card. Already saved or unknown: no-op."""
        artist = self.get_artist(artist_id)
        if artist is None:
            logger.debug("[engine] save of unknown artist %s ignored", artist_id)
            return self.recommendations
        if not self.session.save(artist, self._clock()):
            return self.recommendations
        return self.dismiss(artist_id)

    def unsave(self, artist_id: str) -> List[SavedArtist]:
        """Drop an artist from the saved list. The displayed list is not touched."""
        if not self.session.unsave(artist_id):
            logger.debug("[engine] unsave of non-saved %s ignored", artist_id)
        return self.saved_for_later

    def add_custom(self, name: str, score: int) -> Artist:
        """
        Append a user-entered artist to the catalog, rate it, and run a full cycle.

        name and score are expected to be validated by the caller.
        """
        timestamp = self._clock()
        artist = build_custom_artist(name, timestamp)
        base_id, suffix = artist.id, 1
        # Two additions within the same millisecond would otherwise share an id.
        while artist.id in self._by_id:
            artist = artist.model_copy(update={"id": f"{base_id}-{suffix}"})
            suffix += 1
        self.artists.append(artist)
        self._by_id[artist.id] = artist
        self.session.rate(artist.id, score, timestamp)
        self.refresh()
        return artist

    def clear(self) -> List[ScoredArtist]:
        """Forget all ratings, saved artists and exposure history, then start over."""
        self.session.reset()
        return self.refresh()

    # --- persistence round trip ---

    def export_state(self) -> Dict[str, Any]:
        return self.session.export_persisted()

    def load_state(self, data: Optional[Dict[str, Any]]) -> List[ScoredArtist]:
        """
        Restore ratings and saved list, then run a fresh cycle.

        The displayed list and both recency windows belong to the previous
        session and are dropped. Custom artists referenced by ratings but
        missing from the catalog stay unknown and are skipped by aggregation.
        """
        self.session.load_persisted(data)
        self.session.recommendations.clear()
        self.session.recent.clear()
        self.session.cold_start_recent.clear()
        return self.refresh()
