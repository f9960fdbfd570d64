# Area: Engine
"""
board_game_scoring._engine.outcomes — Match outcome derivation
==============================================================

Turns placements into what a finished match records: winner flags,
the placements that carry a determinate score, and whether distinct
competitors share a placement and need a manual tie breaker.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional, Sequence

from ..types import (
    MatchResult,
    Participant,
    PlacementResult,
    ScoresheetConfig,
    WinCondition,
)
from .placement import compute_placements

# Win conditions where the engine decides who won
RANKED_WIN_CONDITIONS = {
    WinCondition.HIGHEST_SCORE,
    WinCondition.LOWEST_SCORE,
    WinCondition.TARGET_SCORE,
}


def compute_match_results(
    participants: Sequence[Participant],
    scoresheet: ScoresheetConfig,
) -> List[MatchResult]:
    """
    Compute placements joined with team ids and winner flags.

    Winners are the participants in first place with a determinate score.
    No Winner and Manual scoresheets never flag a winner here; manual
    winners are chosen by a person.
    """
    team_by_id: Dict[Hashable, Optional[Hashable]] = {p.id: p.team_id for p in participants}
    decides_winner = scoresheet.win_condition in RANKED_WIN_CONDITIONS

    return [
        MatchResult(
            id=p.id,
            score=p.score,
            placement=p.placement,
            team_id=team_by_id.get(p.id),
            winner=decides_winner and p.placement == 1 and p.score is not None,
        )
        for p in compute_placements(participants, scoresheet)
    ]


def winning_ids(results: Iterable[MatchResult]) -> List[Hashable]:
    """Ids of all winners, in result order."""
    return [r.id for r in results if r.winner]


def scored_placements(placements: Iterable[PlacementResult]) -> List[PlacementResult]:
    """Placements with a determinate score, the ones written back on finish."""
    return [p for p in placements if p.score is not None]


def requires_tie_breaker(
    placements: Sequence[PlacementResult],
    participants: Sequence[Participant],
) -> bool:
    """
    Check whether two distinct competitors share a placement.

    A competitor is an individual participant or a whole team. A team is
    represented by the placement of its first listed member, so teammates
    sharing a placement do not count as a tie.
    """
    team_by_id = {p.id: p.team_id for p in participants}
    placement_by_id = {p.id: p.placement for p in placements}

    competitor_placements: List[int] = []
    seen_teams = set()
    for participant in participants:
        if participant.id not in placement_by_id:
            continue
        if participant.team_id is None:
            competitor_placements.append(placement_by_id[participant.id])
        elif participant.team_id not in seen_teams:
            seen_teams.add(participant.team_id)
            competitor_placements.append(placement_by_id[participant.id])

    # Placements for ids the caller did not list count as individuals
    for placement in placements:
        if placement.id not in team_by_id:
            competitor_placements.append(placement.placement)

    counts: Dict[int, int] = {}
    for placement in competitor_placements:
        counts[placement] = counts.get(placement, 0) + 1
        if counts[placement] > 1:
            return True
    return False
