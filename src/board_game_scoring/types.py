# Area: Engine
"""
board_game_scoring.types — Scoresheet and participant value types
=================================================================

Immutable value objects passed into and returned from the scoring engine.
All types are exported from the main package:

    from board_game_scoring import ScoresheetConfig, Participant, Round

Enum values are the display strings stored on a tracker scoresheet, so
``RoundsScore("Best Of")`` and ``WinCondition("Target Score")`` work directly
on persisted data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Optional, Tuple, Union

Number = Union[int, float]


class RoundsScore(Enum):
    """How round scores combine into a final score."""
    AGGREGATE = "Aggregate"
    BEST_OF = "Best Of"
    MANUAL = "Manual"
    NONE = "None"


class WinCondition(Enum):
    """How final scores translate into a ranking."""
    HIGHEST_SCORE = "Highest Score"
    LOWEST_SCORE = "Lowest Score"
    TARGET_SCORE = "Target Score"
    MANUAL = "Manual"
    NO_WINNER = "No Winner"


class RoundType(Enum):
    """Input widget a round is scored with."""
    NUMERIC = "Numeric"
    CHECKBOX = "Checkbox"


@dataclass(frozen=True)
class ScoresheetConfig:
    """
    Scoring rules of a match.

    Attributes:
        rounds_score: How rounds combine into a final score
        win_condition: How final scores are ranked
        target_score: Goal value, only meaningful for TARGET_SCORE
    """

    rounds_score: RoundsScore
    win_condition: WinCondition
    target_score: Optional[Number] = None

    @property
    def has_target(self) -> bool:
        return self.target_score is not None


@dataclass(frozen=True)
class Round:
    """A single round score. ``None`` means not played or not yet scored."""

    score: Optional[Number] = None


@dataclass(frozen=True)
class Participant:
    """
    A player, or a stand-in for a team's shared score line.

    Attributes:
        id: Match player identifier
        rounds: Round scores in round order
        team_id: Team identifier, None for an individual player
    """

    id: Hashable
    rounds: Tuple[Round, ...] = field(default_factory=tuple)
    team_id: Optional[Hashable] = None

    def __post_init__(self) -> None:
        # Accept any iterable of rounds but store a tuple so the value stays hashable.
        if not isinstance(self.rounds, tuple):
            object.__setattr__(self, "rounds", tuple(self.rounds))

    @property
    def is_individual(self) -> bool:
        return self.team_id is None


@dataclass(frozen=True)
class FinalScoreResult:
    """Final score of one participant. ``score`` is None when undetermined."""

    id: Hashable
    score: Optional[Number]
    team_id: Optional[Hashable] = None


@dataclass(frozen=True)
class PlacementResult:
    """Ranked placement of one participant (1-based, ties share a value)."""

    id: Hashable
    score: Optional[Number]
    placement: int


@dataclass(frozen=True)
class MatchResult:
    """
    Placement joined with team identity and the winner flag.

    This is the row a finished match writes back per match player.

    Attributes:
        id: Match player identifier
        score: Final score, or None when undetermined
        placement: Competition rank, 1 is best
        team_id: Team identifier, None for an individual player
        winner: True if the participant won the match
    """

    id: Hashable
    score: Optional[Number]
    placement: int
    team_id: Optional[Hashable]
    winner: bool
