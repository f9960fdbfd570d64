# Area: IO
"""Serialisation of engine results to JSON-ready dicts."""

from __future__ import annotations

import json
from typing import Any, Dict

from .._engine import (
    compute_final_scores,
    compute_match_results,
    compute_placements,
    requires_tie_breaker,
    winning_ids,
)
from .loader import MatchInput

MODE_RESULTS = "results"
MODE_FINAL_SCORES = "final-scores"
MODE_PLACEMENTS = "placements"
MODES = (MODE_RESULTS, MODE_FINAL_SCORES, MODE_PLACEMENTS)


def build_report(match: MatchInput, mode: str = MODE_RESULTS) -> Dict[str, Any]:
    """
    Run the engine for a match and shape the output for JSON.

    ``final-scores`` and ``placements`` return the raw engine output;
    ``results`` adds winner flags and tie-breaker detection.
    """
    if mode == MODE_FINAL_SCORES:
        return {
            "finalScores": [
                {"id": r.id, "score": r.score, "teamId": r.team_id}
                for r in compute_final_scores(match.participants, match.scoresheet)
            ]
        }

    if mode == MODE_PLACEMENTS:
        return {
            "placements": [
                {"id": p.id, "score": p.score, "placement": p.placement}
                for p in compute_placements(match.participants, match.scoresheet)
            ]
        }

    if mode == MODE_RESULTS:
        results = compute_match_results(match.participants, match.scoresheet)
        placements = compute_placements(match.participants, match.scoresheet)
        return {
            "scoresheet": {
                "roundsScore": match.scoresheet.rounds_score.value,
                "winCondition": match.scoresheet.win_condition.value,
                "targetScore": match.scoresheet.target_score,
            },
            "results": [
                {
                    "id": r.id,
                    "score": r.score,
                    "placement": r.placement,
                    "teamId": r.team_id,
                    "winner": r.winner,
                }
                for r in results
            ],
            "winners": winning_ids(results),
            "requiresTieBreaker": requires_tie_breaker(placements, match.participants),
        }

    raise ValueError(f"Unknown mode: {mode!r} (expected one of {MODES})")


def dumps_report(report: Dict[str, Any], indent: int = 2) -> str:
    """Serialise a report as JSON text."""
    return json.dumps(report, indent=indent or None, ensure_ascii=False)
