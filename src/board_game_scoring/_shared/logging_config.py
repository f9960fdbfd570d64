# Area: Shared
"""
board_game_scoring._shared.logging_config — Structured logging setup
====================================================================

Configures dual logging: terminal (colored, stderr) + file (JSON).
stdout is left alone because the CLI prints its results there.
Provides structured error logging for boundary errors.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .logging_formatters import JSONFormatter, QuietFilter, TerminalFormatter

if TYPE_CHECKING:
    from ..errors import ScoringError

# Package logger
logger = logging.getLogger("board_game_scoring")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file_path: Optional[str] = None,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    level : int or str
        Logging level, e.g. ``logging.DEBUG`` or ``"DEBUG"``. Defaults to INFO.
    log_file_path : str, optional
        Path to a JSON log file. No file handler is added when omitted.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    pkg_logger = logging.getLogger("board_game_scoring")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_scoring_error(error: "ScoringError") -> None:
    """
    Log a boundary error in the structured format.

    Parameters
    ----------
    error : ScoringError
        The error to log (InvalidMatchError or ConfigError).
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"Scoring error: {error.__class__.__name__}",
        extra={
            "source": getattr(error, "source", None),
            "error_type": error.__class__.__name__,
        },
    )
