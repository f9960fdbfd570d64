# Area: Shared
"""
board_game_scoring.cli — Command-line interface
===============================================

Scores a match JSON file and prints the result as JSON.

Usage:
    python -m board_game_scoring match.json                     # Winners + placements
    python -m board_game_scoring match.json --mode placements   # Placements only
    python -m board_game_scoring match.json --output out.json   # Also write to file

Settings can come from (later wins):
    1. --config config.json
    2. .env file / environment: SCORING_LOG_LEVEL, SCORING_LOG_FILE, SCORING_JSON_INDENT
    3. CLI flags: --log-level, --log-file
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ._config import load_config, validate_config
from ._io import MODES, build_report, dumps_report, load_match
from ._shared import disable_quiet_mode, enable_quiet_mode, log_scoring_error, setup_logging
from .errors import ScoringError

logger = logging.getLogger("board_game_scoring.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="board-game-scoring",
        description="Compute final scores and placements for a board game match",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  board-game-scoring match.json
  board-game-scoring match.json --mode final-scores
  board-game-scoring match.json --output results.json --quiet
  SCORING_LOG_LEVEL=DEBUG board-game-scoring match.json
        """,
    )

    parser.add_argument(
        "match_file",
        type=str,
        help="Path to match JSON (scoresheet + participants)",
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        default=MODES[0],
        help="What to compute (default: results)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Also write the JSON result to this path",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Override log level (DEBUG, INFO, WARNING, ERROR)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write JSON logs to this file",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress terminal logs (results are still printed)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    load_dotenv()

    try:
        config = load_config(args.config)
        if args.log_level:
            config["log_level"] = args.log_level
        if args.log_file:
            config["log_file"] = args.log_file
        config = validate_config(config)
    except ScoringError as e:
        log_scoring_error(e)
        return 1

    setup_logging(level=config["log_level"], log_file_path=config["log_file"])
    if args.quiet:
        enable_quiet_mode()
    else:
        disable_quiet_mode()

    try:
        match = load_match(args.match_file)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except ScoringError as e:
        log_scoring_error(e)
        return 1

    logger.info(
        f"Scoring {len(match.participants)} participants "
        f"({match.scoresheet.rounds_score.value} / {match.scoresheet.win_condition.value})"
    )
    report = build_report(match, mode=args.mode)
    text = dumps_report(report, indent=config["indent"])

    print(text)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Wrote results to {out_path}")

    return 0
