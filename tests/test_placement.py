# Area: Engine Tests
"""Tests for compute_placements() with individual players."""

from board_game_scoring import (
    Participant,
    PlacementResult,
    Round,
    RoundsScore,
    ScoresheetConfig,
    WinCondition,
    compute_placements,
)


def player(pid, *scores, team_id=None):
    return Participant(id=pid, rounds=tuple(Round(s) for s in scores), team_id=team_id)


def aggregate(win_condition, target_score=50):
    return ScoresheetConfig(RoundsScore.AGGREGATE, win_condition, target_score)


def best_of(win_condition, target_score=50):
    return ScoresheetConfig(RoundsScore.BEST_OF, win_condition, target_score)


class TestRankingOrder:
    """Sorting by win condition."""

    def test_highest_score(self):
        players = [player(1, 10, 20), player(2, 15, 30)]
        assert compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE)) == [
            PlacementResult(id=2, score=45, placement=1),
            PlacementResult(id=1, score=30, placement=2),
        ]

    def test_lowest_score(self):
        players = [player(1, 10, 20), player(2, 15, 30)]
        assert compute_placements(players, aggregate(WinCondition.LOWEST_SCORE)) == [
            PlacementResult(id=1, score=30, placement=1),
            PlacementResult(id=2, score=45, placement=2),
        ]

    def test_target_score_by_distance(self):
        players = [
            player(1, 10, 50),
            player(2, 15, 30),
            player(3, 20, 40),
            player(4, 25, 60),
            player(5, 30, 70),
            player(6, 35, 80),
            player(7, 27, 23),
            player(8, 45, 100),
        ]
        assert compute_placements(players, aggregate(WinCondition.TARGET_SCORE, 50)) == [
            PlacementResult(id=7, score=50, placement=1),
            PlacementResult(id=2, score=45, placement=2),
            PlacementResult(id=1, score=60, placement=3),
            PlacementResult(id=3, score=60, placement=3),
            PlacementResult(id=4, score=85, placement=5),
            PlacementResult(id=5, score=100, placement=6),
            PlacementResult(id=6, score=115, placement=7),
            PlacementResult(id=8, score=145, placement=8),
        ]

    def test_best_of_target_met(self):
        players = [player(1, 10, 50), player(2, 15, 30)]
        assert compute_placements(players, best_of(WinCondition.TARGET_SCORE, 50)) == [
            PlacementResult(id=1, score=50, placement=1),
            PlacementResult(id=2, score=30, placement=2),
        ]

    def test_target_equal_distance_keeps_input_order(self):
        """Equal distance keeps input order; different scores still open new placements."""
        players = [player(1, 55), player(2, 45)]
        assert compute_placements(players, aggregate(WinCondition.TARGET_SCORE, 50)) == [
            PlacementResult(id=1, score=55, placement=1),
            PlacementResult(id=2, score=45, placement=2),
        ]

    def test_best_of_highest(self):
        players = [player(1, 10, 20), player(2, 15, 30)]
        assert compute_placements(players, best_of(WinCondition.HIGHEST_SCORE)) == [
            PlacementResult(id=2, score=30, placement=1),
            PlacementResult(id=1, score=20, placement=2),
        ]

    def test_best_of_lowest(self):
        players = [player(1, 10, 20), player(2, 15, 30)]
        assert compute_placements(players, best_of(WinCondition.LOWEST_SCORE)) == [
            PlacementResult(id=1, score=10, placement=1),
            PlacementResult(id=2, score=15, placement=2),
        ]

    def test_no_winner_keeps_input_order(self):
        players = [player(1, 10), player(2, 20)]
        assert compute_placements(players, aggregate(WinCondition.NO_WINNER)) == [
            PlacementResult(id=1, score=10, placement=1),
            PlacementResult(id=2, score=20, placement=2),
        ]


class TestTies:
    """Tied scores share a placement."""

    def test_two_way_tie(self):
        players = [player(1, 30), player(2, 30), player(3, 20)]
        assert compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE)) == [
            PlacementResult(id=1, score=30, placement=1),
            PlacementResult(id=2, score=30, placement=1),
            PlacementResult(id=3, score=20, placement=3),
        ]

    def test_all_equal(self):
        players = [player(1, 40), player(2, 40), player(3, 40)]
        placements = compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE))
        assert [p.placement for p in placements] == [1, 1, 1]

    def test_tie_in_the_middle(self):
        players = [player(1, 50), player(2, 30), player(3, 30), player(4, 30), player(5, 10)]
        placements = compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE))
        assert [p.placement for p in placements] == [1, 2, 2, 2, 5]

    def test_single_player(self):
        assert compute_placements([player(1, 30)], aggregate(WinCondition.HIGHEST_SCORE)) == [
            PlacementResult(id=1, score=30, placement=1),
        ]

    def test_no_players(self):
        assert compute_placements([], aggregate(WinCondition.HIGHEST_SCORE)) == []


class TestUndeterminedScores:
    """Participants without a score rank last and tie with each other."""

    def test_rank_after_scored_players(self):
        players = [player(1, 10), player(2), player(3, 20), player(4, None)]
        assert compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE)) == [
            PlacementResult(id=3, score=20, placement=1),
            PlacementResult(id=1, score=10, placement=2),
            PlacementResult(id=2, score=None, placement=3),
            PlacementResult(id=4, score=None, placement=3),
        ]

    def test_last_for_lowest_score(self):
        """None is not treated as a low score."""
        players = [player(1, 5), player(2), player(3, -3)]
        placements = compute_placements(players, aggregate(WinCondition.LOWEST_SCORE))
        assert [(p.id, p.placement) for p in placements] == [(3, 1), (1, 2), (2, 3)]

    def test_missing_target_ties_everyone(self):
        players = [player(1, 10), player(2, 50), player(3, 20)]
        placements = compute_placements(players, aggregate(WinCondition.TARGET_SCORE, None))
        assert [p.score for p in placements] == [None, None, None]
        assert [p.placement for p in placements] == [1, 1, 1]

    def test_all_unscored(self):
        players = [player(1, None), player(2)]
        placements = compute_placements(players, aggregate(WinCondition.HIGHEST_SCORE))
        assert [p.placement for p in placements] == [1, 1]


class TestDeterminism:
    """Repeated calls give identical output."""

    def test_same_output(self):
        players = [player(1, 30), player(2, 30), player(3, 20, 5), player(4)]
        scoresheet = aggregate(WinCondition.HIGHEST_SCORE)
        first = compute_placements(players, scoresheet)
        second = compute_placements(players, scoresheet)
        assert first == second
        assert len(first) == len(players)

    def test_accepts_generator(self):
        scoresheet = aggregate(WinCondition.HIGHEST_SCORE)
        placements = compute_placements((player(i, i) for i in range(3)), scoresheet)
        assert [p.id for p in placements] == [2, 1, 0]
