"""
Ranking: score candidates, then select a diversified list.

Public API: rank_candidates, select_recommendations, draw_cold_start, draw_replacement.
- core: scoring loop and sort (rank_candidates).
- Submodules: scoring, selection, cold_start, replacement.
"""

from .cold_start import draw_cold_start
from .core import rank_candidates
from .replacement import draw_replacement
from .scoring import score_artist
from .selection import select_recommendations, select_top_and_random

__all__ = [
    "draw_cold_start",
    "draw_replacement",
    "rank_candidates",
    "score_artist",
    "select_recommendations",
    "select_top_and_random",
]
