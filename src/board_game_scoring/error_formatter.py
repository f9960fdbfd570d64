# Area: Shared
"""Error formatting for structured error logs."""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional


def format_error_block(
    error_type: str,
    source: str,
    validation_errors: Optional[List[str]],
    payload: Optional[Dict[str, Any]] = None,
) -> str:
    """Format a structured error block for terminal and log output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SCORING ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
    ]

    if payload is not None:
        lines.append("")
        lines.append(" ── PAYLOAD " + "─" * 52)
        lines.append(indent_json(payload))

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
