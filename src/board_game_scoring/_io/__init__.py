# Area: IO
"""
Match file input and result output.

- Payload schemas (pydantic)
- Loading and validation into engine types
- JSON report building
"""

from .loader import MatchInput, load_match, parse_match
from .results import MODES, build_report, dumps_report

__all__ = [
    "MatchInput",
    "load_match",
    "parse_match",
    "MODES",
    "build_report",
    "dumps_report",
]
