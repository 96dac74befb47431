"""Pipeline stages: candidate pool, preference aggregation, ranking/selection, orchestration."""

from .candidate_pool import get_candidate_pool, get_cold_start_pool
from .orchestrator import create_recommendations
from .preferences import aggregate_preferences
from .ranking import draw_cold_start, draw_replacement, rank_candidates, select_recommendations
from .stats import ListeningStats, summarize_listening

__all__ = [
    "ListeningStats",
    "aggregate_preferences",
    "create_recommendations",
    "draw_cold_start",
    "draw_replacement",
    "get_candidate_pool",
    "get_cold_start_pool",
    "rank_candidates",
    "select_recommendations",
    "summarize_listening",
]
