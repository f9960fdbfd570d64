# Area: Shared
"""
board_game_scoring._shared.logging_formatters — Logging formatters and filters
==============================================================================

Contains formatter/filter classes and the quiet mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to silence terminal output
_quiet_mode_enabled = False


class QuietFilter(logging.Filter):
    """Filter that suppresses terminal logs when quiet mode is enabled.

    File logging is not filtered, so a quiet CLI run still leaves a full
    record in the log file.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _quiet_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        # Copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_quiet_mode() -> None:
    """Suppress terminal logs (file logging remains unchanged)."""
    global _quiet_mode_enabled
    _quiet_mode_enabled = True


def disable_quiet_mode() -> None:
    """Restore terminal logs."""
    global _quiet_mode_enabled
    _quiet_mode_enabled = False


def is_quiet_mode_enabled() -> bool:
    """Check if quiet mode is enabled."""
    return _quiet_mode_enabled
