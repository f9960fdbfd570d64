# Area: Shared
"""
board_game_scoring.errors — Custom exception classes
====================================================

Defines the exception hierarchy for input and configuration errors.
The scoring engine itself never raises for bad data; it degrades to
undetermined (None) scores. These exceptions belong to the boundary:
match file loading, configuration and the CLI.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .error_formatter import format_error_block


class ScoringError(Exception):
    """Base exception for all board_game_scoring errors."""
    pass


class InvalidMatchError(ScoringError):
    """Raised when a match payload cannot be parsed or validated."""

    def __init__(
        self,
        source: str,
        validation_errors: List[str],
        payload: Optional[Dict[str, Any]] = None,
    ):
        self.source = source
        self.validation_errors = validation_errors
        self.payload = payload
        super().__init__(
            f"Invalid match data from '{source}': {validation_errors}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_MATCH",
            source=self.source,
            validation_errors=self.validation_errors,
            payload=self.payload,
        )


class ConfigError(ScoringError):
    """Raised when configuration values are missing or invalid."""

    def __init__(self, validation_errors: List[str], source: str = "config"):
        self.source = source
        self.validation_errors = validation_errors
        super().__init__(f"Invalid configuration: {validation_errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_CONFIG",
            source=self.source,
            validation_errors=self.validation_errors,
        )
