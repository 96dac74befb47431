"""Shared utilities."""

from .random_source import NumpyRandomSource, RandomSource

__all__ = [
    "NumpyRandomSource",
    "RandomSource",
]
