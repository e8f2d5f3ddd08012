"""Tests for the top consolidator."""

import pytest

from top6.consolidation import TopConsolidator
from top6.levels import attribute_levels
from top6.models import Club, PlayerId, PlayerPointHistory, PlayerPointRecord
from top6.validators import validate_ranked_entries

from helpers import AWAY_CLUB, HOME_CLUB, VERVIERS_CLUB, make_config


def history(player_id, name, club, *points_by_week, level='PROVINCIALE_1'):
    records = [
        PlayerPointRecord(
            division_id=201,
            week=week,
            victory_count=0,
            forfeit=0,
            match_id=f'M{week}',
            match_unique_id=week,
            level=level,
            points_won=points,
        )
        for week, points in points_by_week
    ]
    return PlayerPointHistory(player_id=PlayerId(player_id), name=name, club=club, records=records)


def consolidator_for(*histories, week=3, **kwargs):
    by_id = {h.player_id: h for h in histories}
    return TopConsolidator(by_id, attribute_levels(by_id, week), make_config(), **kwargs)


@pytest.fixture
def consolidator():
    return consolidator_for(
        history(1, 'Alpha Ann', HOME_CLUB, (1, 5), (2, 3)),  # 8 pts, one 5
        history(2, 'Bravo Bob', AWAY_CLUB, (1, 3), (2, 5)),  # 8 pts, one 5
        history(3, 'Charlie Cid', HOME_CLUB, (1, 5), (2, 2), (3, 1)),  # 8 pts, one 5
        history(4, 'Delta Dan', HOME_CLUB, (1, 5), (2, 5), (3, 0)),  # 10 pts
        history(5, 'Echo Eve', AWAY_CLUB, (1, 3), (2, 3), (3, 2)),  # 8 pts, no 5
        history(6, 'Fox Fay', VERVIERS_CLUB, (1, 5), (2, 5)),  # other region
        history(7, 'Golf Gus', HOME_CLUB, (1, 5), (2, 5), level='NATIONAL'),
        history(8, 'Hotel Hal', AWAY_CLUB, (1, 0)),  # 0 pts
        clubs={HOME_CLUB: Club(HOME_CLUB, 'Home', 'Home TT Club')},
    )


class TestRanking:
    """Tests for ranked lists."""

    def test_order_and_tie_breaks(self, consolidator):
        """Test order: total desc, 5 pts matches desc, then name asc."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        names = [e.name for e in entries]
        assert names == [
            'Delta Dan',
            'Alpha Ann',
            'Bravo Bob',
            'Charlie Cid',
            'Echo Eve',
            'Hotel Hal',
        ]

    def test_positions_contiguous_from_zero(self, consolidator):
        """Test positions start at 0 and follow the order."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        assert [e.position for e in entries] == list(range(len(entries)))
        assert validate_ranked_entries(entries, 10) == []

    def test_limit(self, consolidator):
        """Test no more than `limit` entries are returned."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 2)
        assert [e.name for e in entries] == ['Delta Dan', 'Alpha Ann']
        assert consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 0) == []
        assert consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, -1) == []

    def test_region_and_level_filters(self, consolidator):
        """Test other regions and levels are left out."""
        verviers = consolidator.get_top_for_region_and_level('Verviers', 'PROVINCIALE_1', 3, 10)
        national = consolidator.get_top_for_region_and_level('Liège', 'NATIONAL', 3, 10)
        assert [e.name for e in verviers] == ['Fox Fay']
        assert [e.name for e in national] == ['Golf Gus']
        assert consolidator.get_top_for_region_and_level('Unknown', 'NATIONAL', 3, 10) == []

    def test_points_cut_at_week(self, consolidator):
        """Test points are counted up to the requested week."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 1, 10)
        by_name = {e.name: e.points.total for e in entries}
        assert by_name['Delta Dan'] == 5
        assert by_name['Echo Eve'] == 3
        assert all(e.week == 1 for e in entries)

    def test_zero_total_players_kept_by_default(self, consolidator):
        """Test players with 0 points stay in the ranking by default."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        assert entries[-1].name == 'Hotel Hal'
        assert entries[-1].points.total == 0
        assert entries[-1].points.count_0_pts == 1

    def test_exclude_zero_totals(self):
        """Test the exclusion flag drops players with 0 points."""
        consolidator = consolidator_for(
            history(1, 'Alpha Ann', HOME_CLUB, (1, 5)),
            history(8, 'Hotel Hal', AWAY_CLUB, (1, 0)),
            exclude_zero_totals=True,
        )
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        assert [e.name for e in entries] == ['Alpha Ann']

    def test_club_names(self, consolidator):
        """Test club long names are used, falling back to the club id."""
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        by_name = {e.name: e.club_name for e in entries}
        assert by_name['Delta Dan'] == 'Home TT Club'
        assert by_name['Bravo Bob'] == AWAY_CLUB

    def test_same_query_same_result(self, consolidator):
        """Test repeated queries return identical rankings."""
        first = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        second = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 3, 10)
        assert first == second

    def test_level_assigned_without_points(self):
        """Test a level-assigned player with a 0 point record appears with total 0."""
        consolidator = consolidator_for(history(1, 'Alpha Ann', HOME_CLUB, (2, 0)))
        assert consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 1, 10) == []
        entries = consolidator.get_top_for_region_and_level('Liège', 'PROVINCIALE_1', 2, 10)
        assert [e.points.total for e in entries] == [0]
