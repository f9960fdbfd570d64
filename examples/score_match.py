"""
score_match.py — Score a finished match
=======================================

Shows the library API on a small team match, then the same match
loaded from ``sample_match.json``.

    python score_match.py
"""

import logging
from pathlib import Path

from board_game_scoring import (
    Participant,
    Round,
    RoundsScore,
    ScoresheetConfig,
    WinCondition,
    compute_match_results,
    compute_placements,
    load_match,
    requires_tie_breaker,
)

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ── Build a match in code ──
scoresheet = ScoresheetConfig(
    rounds_score=RoundsScore.AGGREGATE,
    win_condition=WinCondition.HIGHEST_SCORE,
)
participants = [
    # Team "blue": both members carry the same round scores
    Participant(id=1, rounds=(Round(12), Round(8)), team_id="blue"),
    Participant(id=2, rounds=(Round(12), Round(8)), team_id="blue"),
    Participant(id=3, rounds=(Round(15), Round(None))),
    Participant(id=4, rounds=(Round(11), Round(9))),
    Participant(id=5, rounds=()),  # joined but never scored
]

for result in compute_match_results(participants, scoresheet):
    flag = "WIN " if result.winner else "    "
    print(f"{flag}#{result.placement}  player {result.id}  score={result.score}  team={result.team_id}")

placements = compute_placements(participants, scoresheet)
if requires_tie_breaker(placements, participants):
    print("Distinct competitors share a placement: ask for a tie breaker")

# ── Same thing from a match file ──
match = load_match(Path(__file__).parent / "sample_match.json")
for placement in compute_placements(match.participants, match.scoresheet):
    print(placement)
