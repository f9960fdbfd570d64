# Area: Engine
"""
Scoring and placement engine.

Pure, stateless functions shared by live scoring, match editing and
match summaries so tie handling is identical everywhere:
- Final score per participant
- Ranked placements with tie and team compression
- Winner flags and tie-breaker detection
"""

from .final_score import compute_final_score, compute_final_scores
from .placement import compute_placements, sort_final_scores
from .outcomes import (
    compute_match_results,
    requires_tie_breaker,
    scored_placements,
    winning_ids,
)

__all__ = [
    "compute_final_score",
    "compute_final_scores",
    "compute_placements",
    "sort_final_scores",
    "compute_match_results",
    "requires_tie_breaker",
    "scored_placements",
    "winning_ids",
]
