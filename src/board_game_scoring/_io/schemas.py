# Area: IO
"""
board_game_scoring._io.schemas — Match payload schemas
======================================================

pydantic models validating match JSON before it reaches the engine.
Field names follow the tracker's stored JSON (camelCase); snake_case
names are accepted as well. A round may be written as a bare number
or null instead of ``{"score": ...}``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from ..types import Participant, Round, RoundsScore, ScoresheetConfig, WinCondition

ScoreValue = Optional[Union[StrictInt, StrictFloat]]
Identifier = Union[StrictInt, StrictStr]


class RoundPayload(BaseModel):
    """One round score; null means unscored."""

    model_config = ConfigDict(extra="ignore")

    score: ScoreValue = None

    def to_round(self) -> Round:
        return Round(score=self.score)


class ScoresheetPayload(BaseModel):
    """Scoresheet rules of the match."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    rounds_score: RoundsScore = Field(alias="roundsScore")
    win_condition: WinCondition = Field(alias="winCondition")
    target_score: ScoreValue = Field(default=None, alias="targetScore")

    def to_scoresheet(self) -> ScoresheetConfig:
        return ScoresheetConfig(
            rounds_score=self.rounds_score,
            win_condition=self.win_condition,
            target_score=self.target_score,
        )


class ParticipantPayload(BaseModel):
    """A match player (or team stand-in) with its rounds."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Identifier
    rounds: List[RoundPayload] = Field(default_factory=list)
    team_id: Optional[Identifier] = Field(default=None, alias="teamId")

    @field_validator("rounds", mode="before")
    @classmethod
    def _wrap_bare_scores(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item if isinstance(item, dict) else {"score": item} for item in value]
        return value

    def to_participant(self) -> Participant:
        return Participant(
            id=self.id,
            rounds=tuple(r.to_round() for r in self.rounds),
            team_id=self.team_id,
        )


class MatchPayload(BaseModel):
    """A scoresheet plus the participants to score."""

    model_config = ConfigDict(extra="ignore")

    scoresheet: ScoresheetPayload
    participants: List[ParticipantPayload]

    @model_validator(mode="after")
    def _unique_ids(self) -> "MatchPayload":
        seen = set()
        duplicates = []
        for participant in self.participants:
            if participant.id in seen and participant.id not in duplicates:
                duplicates.append(participant.id)
            seen.add(participant.id)
        if duplicates:
            raise ValueError(f"duplicate participant ids: {duplicates}")
        return self
