# Area: Engine
"""
board_game_scoring._engine.final_score — Final score computation
================================================================

Combines a participant's round scores into one final score according to
the scoresheet's rounds-score mode and win condition.

Insufficient input never raises: it yields ``None`` ("no determinable
score"), which placement ranks behind every determinate score.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from ..types import (
    FinalScoreResult,
    Number,
    Participant,
    Round,
    RoundsScore,
    ScoresheetConfig,
    WinCondition,
)

logger = logging.getLogger("board_game_scoring.engine")


def compute_final_score(
    rounds: Sequence[Round],
    scoresheet: ScoresheetConfig,
) -> Optional[Number]:
    """
    Compute the final score for one participant.

    Parameters
    ----------
    rounds : Sequence[Round]
        The participant's rounds in round order.
    scoresheet : ScoresheetConfig
        Scoring rules of the match.

    Returns
    -------
    Optional[Number]
        The final score, or None when no round was scored or the
        scoresheet combination cannot produce a score.
    """
    scores = [r.score for r in rounds if r.score is not None]
    if not scores:
        return None

    win_condition = scoresheet.win_condition
    if win_condition is WinCondition.TARGET_SCORE and not scoresheet.has_target:
        logger.debug("Target Score scoresheet has no target; score undetermined")
        return None

    if scoresheet.rounds_score is RoundsScore.AGGREGATE:
        return sum(scores)

    if scoresheet.rounds_score is RoundsScore.BEST_OF:
        if win_condition is WinCondition.HIGHEST_SCORE:
            return max(scores)
        if win_condition is WinCondition.LOWEST_SCORE:
            return min(scores)
        if win_condition is WinCondition.TARGET_SCORE:
            return _closest_to_target(scores, scoresheet.target_score)

    logger.debug(
        f"No round aggregation for {scoresheet.rounds_score.value} / "
        f"{win_condition.value}; score undetermined"
    )
    return None


def _closest_to_target(scores: List[Number], target: Number) -> Number:
    """Left-to-right fold: first exact match locks, otherwise strictly closer wins."""
    best = scores[0]
    for score in scores[1:]:
        if best == target:
            break
        if score == target or abs(score - target) < abs(best - target):
            best = score
    return best


def compute_final_scores(
    participants: Iterable[Participant],
    scoresheet: ScoresheetConfig,
) -> List[FinalScoreResult]:
    """Compute final scores for every participant, preserving input order."""
    return [
        FinalScoreResult(
            id=p.id,
            score=compute_final_score(p.rounds, scoresheet),
            team_id=p.team_id,
        )
        for p in participants
    ]
