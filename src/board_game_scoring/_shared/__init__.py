# Area: Shared
"""
Shared utilities used by the I/O layer and the CLI.

This package contains:
- Logging configuration
- Logging formatters and quiet mode
"""

from .logging_config import setup_logging, log_scoring_error
from .logging_formatters import (
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "log_scoring_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
