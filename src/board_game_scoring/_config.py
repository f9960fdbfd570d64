# Area: Shared
"""
board_game_scoring._config — CLI configuration
==============================================

Loads configuration from a JSON file and the environment, then
validates it. The CLI loads ``.env`` (python-dotenv) before calling
``load_config`` so values there act as environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ConfigError

logger = logging.getLogger("board_game_scoring")

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "log_file": None,
    "indent": 2,
}

# Environment variable -> config key
ENV_MAPPINGS = {
    "SCORING_LOG_LEVEL": "log_level",
    "SCORING_LOG_FILE": "log_file",
    "SCORING_JSON_INDENT": "indent",
}

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from file, then override with environment variables.

    Args:
        config_path: Optional path to a JSON config file. A missing file
            is skipped with a warning.

    Returns:
        Merged configuration dict (not yet validated)

    Raises:
        ConfigError: If the config file is unreadable, not valid JSON
            or not a JSON object
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError([f"Config file is not valid JSON: {e}"], source=str(path)) from e
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError([f"Cannot read config file: {e}"], source=str(path)) from e
            if not isinstance(loaded, dict):
                raise ConfigError(["Config file must contain a JSON object"], source=str(path))
            config.update(loaded)
        else:
            logger.warning(f"Config file not found, using defaults: {path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and normalize configuration values.

    Args:
        config: Configuration dict

    Returns:
        Normalized config (upper-case log level, integer indent)

    Raises:
        ConfigError: Listing every invalid value
    """
    errors: List[str] = []
    normalized = dict(config)

    level = str(config.get("log_level", "INFO")).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {config.get('log_level')!r}")
    normalized["log_level"] = level

    try:
        indent = int(config.get("indent", 2))
        if indent < 0:
            errors.append(f"indent must be >= 0, got {indent}")
        normalized["indent"] = indent
    except (TypeError, ValueError):
        errors.append(f"indent must be an integer, got {config.get('indent')!r}")

    if not normalized.get("log_file"):
        normalized["log_file"] = None

    if errors:
        raise ConfigError(errors)
    return normalized
