# Area: Shared
"""Round value helpers: turning scoresheet inputs into round scores."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from .types import Number, Participant, RoundType


def checkbox_round_score(checked: bool, round_value: Optional[Number]) -> Optional[Number]:
    """A checked box scores the round's value; an unchecked box is unscored."""
    return round_value if checked else None


def round_score(
    round_type: RoundType,
    value: Any,
    round_value: Optional[Number] = None,
) -> Optional[Number]:
    """
    Convert a raw scoresheet entry into a round score.

    Args:
        round_type: Input widget of the round
        value: Entered number (Numeric) or checked state (Checkbox)
        round_value: Points a Checkbox round is worth

    Returns:
        The round score, or None if the round is unscored

    Raises:
        ValueError: If the round type is not supported, or a Numeric
            entry is not a number
    """
    if round_type is RoundType.NUMERIC:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Numeric round score must be a number, got {value!r}")
        return value
    if round_type is RoundType.CHECKBOX:
        return checkbox_round_score(bool(value), round_value)
    raise ValueError(f"Unsupported round type: {round_type!r}")


def inconsistent_teams(participants: Iterable[Participant]) -> List[Hashable]:
    """
    Find teams whose members disagree on their round scores.

    Teammates are expected to carry identical round scores. Returns
    the offending team ids in first-seen order.
    """
    reference: Dict[Hashable, Tuple[Optional[Number], ...]] = {}
    offending: List[Hashable] = []
    for participant in participants:
        if participant.team_id is None:
            continue
        scores = tuple(r.score for r in participant.rounds)
        expected = reference.setdefault(participant.team_id, scores)
        if scores != expected and participant.team_id not in offending:
            offending.append(participant.team_id)
    return offending
