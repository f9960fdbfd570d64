# Area: IO
"""
board_game_scoring._io.loader — Match file loading
==================================================

Reads match JSON, validates it against the payload schemas and
converts it into engine value types.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple, Union

from pydantic import ValidationError

from ..errors import InvalidMatchError
from ..rounds import inconsistent_teams
from ..types import Participant, ScoresheetConfig
from .schemas import MatchPayload

logger = logging.getLogger("board_game_scoring.io")


@dataclass(frozen=True)
class MatchInput:
    """Validated engine input for one match."""

    scoresheet: ScoresheetConfig
    participants: Tuple[Participant, ...]


def _format_validation_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        messages.append(f"{location}: {item['msg']}")
    return messages


def parse_match(data: Any, source: str = "<data>") -> MatchInput:
    """
    Validate a decoded match payload.

    Args:
        data: Decoded JSON (dict with ``scoresheet`` and ``participants``)
        source: Label used in error messages

    Returns:
        MatchInput ready for the engine

    Raises:
        InvalidMatchError: If the payload fails validation
    """
    try:
        payload = MatchPayload.model_validate(data)
    except ValidationError as e:
        raise InvalidMatchError(
            source=source,
            validation_errors=_format_validation_errors(e),
            payload=data if isinstance(data, dict) else None,
        ) from e

    match = MatchInput(
        scoresheet=payload.scoresheet.to_scoresheet(),
        participants=tuple(p.to_participant() for p in payload.participants),
    )

    for team_id in inconsistent_teams(match.participants):
        logger.warning(f"Team {team_id!r} members have different round scores in {source}")

    logger.debug(f"Loaded {len(match.participants)} participants from {source}")
    return match


def load_match(path: Union[str, Path]) -> MatchInput:
    """
    Load and validate a match JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidMatchError: If the file cannot be read, is not valid JSON
            or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Match file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidMatchError(
            source=str(path),
            validation_errors=[f"Cannot read match file: {e}"],
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidMatchError(
            source=str(path),
            validation_errors=[f"Invalid JSON: {e}"],
        ) from e

    return parse_match(data, source=str(path))
