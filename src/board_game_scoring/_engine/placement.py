# Area: Engine
"""
board_game_scoring._engine.placement — Ranked placement computation
===================================================================

Sorts participants by final score according to the win condition and
assigns competition-style placements:

- tied scores share a placement
- teammates share a placement
- a tie or a team consumes one slot per individual / distinct team
- participants without a score rank last, tied with each other
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, List, Set, Tuple

from ..types import (
    FinalScoreResult,
    Participant,
    PlacementResult,
    ScoresheetConfig,
    WinCondition,
)
from .final_score import compute_final_scores

logger = logging.getLogger("board_game_scoring.engine")


def _sort_key(result: FinalScoreResult, scoresheet: ScoresheetConfig) -> Tuple[Any, ...]:
    """Sort key: undetermined scores last, then by win condition."""
    if result.score is None:
        return (1, 0)

    win_condition = scoresheet.win_condition
    if win_condition is WinCondition.HIGHEST_SCORE:
        return (0, -result.score)
    if win_condition is WinCondition.LOWEST_SCORE:
        return (0, result.score)
    if win_condition is WinCondition.TARGET_SCORE and scoresheet.has_target:
        return (0, abs(result.score - scoresheet.target_score))
    # Manual / No Winner: keep input order
    return (0, 0)


def sort_final_scores(
    final_scores: Iterable[FinalScoreResult],
    scoresheet: ScoresheetConfig,
) -> List[FinalScoreResult]:
    """Stable sort of final scores, best first."""
    return sorted(final_scores, key=lambda r: _sort_key(r, scoresheet))


def compute_placements(
    participants: Iterable[Participant],
    scoresheet: ScoresheetConfig,
) -> List[PlacementResult]:
    """
    Compute ranked placements for all participants.

    Parameters
    ----------
    participants : Iterable[Participant]
        Players and team stand-ins with their round scores.
    scoresheet : ScoresheetConfig
        Scoring rules of the match.

    Returns
    -------
    List[PlacementResult]
        One entry per participant, in ranked order.
    """
    ranked = sort_final_scores(compute_final_scores(participants, scoresheet), scoresheet)
    return _assign_placements(ranked)


def _assign_placements(ranked: List[FinalScoreResult]) -> List[PlacementResult]:
    placements: List[PlacementResult] = []
    individuals_before = 0
    teams_before: Set[Hashable] = set()
    placement = 1

    for i, current in enumerate(ranked):
        if i > 0:
            previous = ranked[i - 1]
            same_team = current.team_id is not None and current.team_id == previous.team_id
            if current.score != previous.score and not same_team:
                placement = individuals_before + 1 + len(teams_before)

        placements.append(
            PlacementResult(id=current.id, score=current.score, placement=placement)
        )

        if current.team_id is None:
            individuals_before += 1
        else:
            teams_before.add(current.team_id)

    logger.debug(f"Assigned placements for {len(placements)} participants")
    return placements
