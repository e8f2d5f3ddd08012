"""Unit tests for point computation."""

import pytest

from top6.constants import AWAY, HOME, POINT_BUCKETS
from top6.scoring import count_forfeits, count_victories, games_for_player, points_won

from helpers import game, player


class TestPointsWon:
    """Tests for the points formula."""

    @pytest.mark.parametrize(
        'victories,forfeits,expected',
        [
            (0, 0, 0),
            (1, 0, 1),
            (2, 0, 2),
            (3, 0, 3),
            (4, 0, 5),
            (0, 4, 5),
            (2, 2, 5),
            (2, 1, 3),
        ],
    )
    def test_points_formula(self, victories, forfeits, expected):
        """Test points = credited games, with 5 for a full sweep."""
        assert points_won(victories, forfeits) == expected

    def test_four_is_unreachable(self):
        """Test no combination of 0..4 victories and forfeits gives 4 points."""
        values = {points_won(v, f) for v in range(5) for f in range(5)}
        assert 4 not in values

    def test_values_in_buckets_when_credited_games_fit(self):
        """Test every reachable value of a 4-games match is a bucket."""
        for v in range(5):
            for f in range(5 - v):
                assert points_won(v, f) in POINT_BUCKETS


class TestVictories:
    """Tests for victory counting."""

    def test_counts_games_won_three_sets(self):
        """Test a victory is a game where the player's side reached 3 sets."""
        results = [
            game(1, 10, home_sets=3, away_sets=1),
            game(1, 11, home_sets=2, away_sets=3),
            game(1, 12, home_sets=3, away_sets=2),
            game(2, 10, home_sets=3, away_sets=0),
        ]
        assert count_victories(1, results, HOME) == 2

    def test_away_side_uses_away_sets(self):
        """Test away player victories use the away set count."""
        results = [
            game(1, 10, home_sets=3, away_sets=1),
            game(2, 10, home_sets=0, away_sets=3),
        ]
        assert count_victories(10, results, AWAY) == 1

    def test_player_not_in_games(self):
        """Test a player without games has no victory."""
        results = [game(1, 10, home_sets=3, away_sets=0)]
        assert count_victories(99, results, HOME) == 0

    def test_games_are_filtered_by_side(self):
        """Test a player id is only looked up on its own side."""
        results = [game(5, 6, home_sets=3, away_sets=0)]
        assert games_for_player(5, results, AWAY) == []
        assert len(games_for_player(5, results, HOME)) == 1


class TestForfeits:
    """Tests for forfeit counting."""

    def test_opponent_forfeited_games(self):
        """Test games forfeited by the opponent only are credited."""
        results = [
            game(1, 10, away_ff=True, home_ff=False),
            game(1, 11, away_ff=True, home_ff=True),  # Mirrored, not credited
            game(1, 12, home_sets=3, away_sets=0),
        ]
        assert count_forfeits(1, results, [], HOME) == 1

    def test_forfeited_opposing_players(self):
        """Test forfeited opposing line-up players are counted."""
        opponents = [player(10, forfeited=True), player(11), player(12)]
        assert count_forfeits(1, [], opponents, HOME) == 1

    def test_takes_the_larger_count(self):
        """Test forfeit count is the max of both sources, not the sum."""
        results = [
            game(1, 10, away_ff=True),
            game(1, 11, away_ff=True),
        ]
        opponents = [player(10, forfeited=True)]
        assert count_forfeits(1, results, opponents, HOME) == 2

    def test_away_side(self):
        """Test away player forfeits use the home forfeit flags."""
        results = [game(1, 10, home_ff=True)]
        assert count_forfeits(10, results, [], AWAY) == 1
        assert count_forfeits(1, results, [], HOME) == 0

    def test_two_wins_and_one_forfeit_is_three_points(self):
        """Test a player winning 2 games with 1 opponent forfeit scores 3."""
        results = [
            game(1, 10, home_sets=3, away_sets=1),
            game(1, 11, home_sets=3, away_sets=2),
            game(1, 12, away_ff=True),
            game(1, 13, home_sets=1, away_sets=3),
        ]
        victories = count_victories(1, results, HOME)
        forfeits = count_forfeits(1, results, [], HOME)
        assert (victories, forfeits) == (2, 1)
        assert points_won(victories, forfeits) == 3
