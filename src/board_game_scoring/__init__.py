"""
board_game_scoring — Board Game Match Scoring Engine
====================================================

Turns a scoresheet and per-round scores into final scores and ranked
placements, with tie handling and team-aware rank compression.

Quick Start:
    from board_game_scoring import (
        Participant, Round, ScoresheetConfig, RoundsScore, WinCondition,
        compute_placements,
    )
    sheet = ScoresheetConfig(RoundsScore.AGGREGATE, WinCondition.HIGHEST_SCORE)
    players = [
        Participant(id=1, rounds=(Round(10), Round(20))),
        Participant(id=2, rounds=(Round(15), Round(30))),
    ]
    compute_placements(players, sheet)
    # [PlacementResult(id=2, score=45, placement=1),
    #  PlacementResult(id=1, score=30, placement=2)]

The engine never raises on ambiguous data: missing rounds, unscored
rounds and a Target Score sheet without a target all give a None score,
ranked last.
"""

from ._engine import (
    compute_final_score,
    compute_final_scores,
    compute_placements,
    compute_match_results,
    requires_tie_breaker,
    scored_placements,
    winning_ids,
)
from ._io import MatchInput, load_match, parse_match
from .errors import (
    ScoringError,
    InvalidMatchError,
    ConfigError,
)
from .rounds import checkbox_round_score, round_score, inconsistent_teams
from .types import (
    RoundsScore,
    WinCondition,
    RoundType,
    ScoresheetConfig,
    Round,
    Participant,
    FinalScoreResult,
    PlacementResult,
    MatchResult,
)

__all__ = [
    # Engine
    "compute_final_score",
    "compute_final_scores",
    "compute_placements",
    "compute_match_results",
    "requires_tie_breaker",
    "scored_placements",
    "winning_ids",
    # Match files
    "MatchInput",
    "load_match",
    "parse_match",
    # Errors
    "ScoringError",
    "InvalidMatchError",
    "ConfigError",
    # Round values
    "checkbox_round_score",
    "round_score",
    "inconsistent_teams",
    # Types
    "RoundsScore",
    "WinCondition",
    "RoundType",
    "ScoresheetConfig",
    "Round",
    "Participant",
    "FinalScoreResult",
    "PlacementResult",
    "MatchResult",
]
__version__ = "1.0.0"
