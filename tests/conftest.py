"""Shared fixtures: a small artist catalog and a scripted random source."""

import itertools
from typing import List, Optional, Sequence

import pytest

from artist_recommender.models import Artist, RecommendationConfig, ScoredArtist

GENRES = ["rock", "pop", "jazz", "hip-hop"]
THEMES = ["love", "rebellion", "nostalgia"]
STYLES = ["raw", "polished"]
ERAS = ["1970s", "1980s", "1990s", "2000s"]


class SequenceRandom:
    """
    Deterministic RandomSource for tests.

    uniform() walks a cycle of fractions in [0, 1) scaled to [low, high);
    randrange() walks a cycle of integers taken modulo stop;
    shuffle() keeps order, or reverses it when reverse_shuffle is set.
    """

    def __init__(
        self,
        fractions: Optional[Sequence[float]] = None,
        indices: Optional[Sequence[int]] = None,
        reverse_shuffle: bool = False,
    ):
        self._fractions = itertools.cycle(fractions or [0.0])
        self._indices = itertools.cycle(indices or [0])
        self.reverse_shuffle = reverse_shuffle
        self.uniform_calls = 0
        self.randrange_calls = 0
        self.shuffle_calls = 0

    def uniform(self, low: float, high: float) -> float:
        self.uniform_calls += 1
        return low + next(self._fractions) * (high - low)

    def randrange(self, stop: int) -> int:
        self.randrange_calls += 1
        return next(self._indices) % stop

    def shuffle(self, items: List) -> None:
        self.shuffle_calls += 1
        if self.reverse_shuffle:
            items.reverse()


def make_artist(artist_id: str, genres=(), themes=(), styles=(), era=None, **extra) -> Artist:
    return Artist(
        id=artist_id,
        name=extra.pop("name", artist_id.upper()),
        genres=list(genres),
        themes=list(themes),
        styles=list(styles),
        era=era,
        **extra,
    )


def make_scored(artist_id: str, final_score: float) -> ScoredArtist:
    return ScoredArtist(artist=make_artist(artist_id), final_score=final_score)


@pytest.fixture
def seq_rng():
    return SequenceRandom()


@pytest.fixture
def config():
    return RecommendationConfig()


@pytest.fixture
def catalog() -> List[Artist]:
    """24 artists with rotating genres, themes, styles and eras."""
    return [
        make_artist(
            f"a{i:02d}",
            genres=[GENRES[i % 4]],
            themes=[THEMES[i % 3]],
            styles=[STYLES[i % 2]],
            era=ERAS[(i // 6) % 4],
            year=1970 + i,
        )
        for i in range(24)
    ]


@pytest.fixture
def catalog_dicts(catalog) -> List[dict]:
    return [a.model_dump() for a in catalog]
