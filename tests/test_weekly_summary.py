"""Tests for the weekly matches summary."""

import pytest

from top6.diagnostics import ErrorCollector
from top6.models import Division
from top6.weekly_summary import (
    summarize_weekly_matches,
    summary_division_name,
    summary_to_dict,
)

from helpers import player, team_match


@pytest.fixture
def divisions():
    return {
        201: Division(201, 'B', 'PROVINCIALE_1', 'Men'),
        202: Division(202, '2C', 'PROVINCIALE_2', 'Men'),
        203: Division(203, '2C', 'PROVINCIALE_2', 'Veterans'),
    }


class TestDivisionName:
    """Tests for division display names."""

    def test_single_letter_gets_series_suffix(self, divisions):
        """Test a single letter division is shown as its A series."""
        assert summary_division_name(divisions[201]) == 'BA'

    def test_longer_names_unchanged(self, divisions):
        """Test other names are kept as is."""
        assert summary_division_name(divisions[202]) == '2C'


class TestWeeklySummary:
    """Tests for grouping weekly matches."""

    def test_grouping(self, divisions):
        """Test matches are grouped by region, level, division and category."""
        matches = {
            'Liège': [
                team_match(
                    division_id=201,
                    score='10-6',
                    home_players=[player(1, last='Dupont', first='Jean')],
                    away_players=[player(2, last='Martin', first='Luc')],
                ),
                team_match(match_id='P2/001', division_id=202),
                team_match(match_id='P2/002', division_id=203),
            ],
        }
        summary = summarize_weekly_matches(matches, divisions)

        liege = summary['Liège']
        assert set(liege) == {'PROVINCIALE_1', 'PROVINCIALE_2'}
        assert set(liege['PROVINCIALE_2']['2C']) == {'Men', 'Veterans'}

        match = liege['PROVINCIALE_1']['BA']['Men'][0]
        assert match.score == '10-6'
        assert match.home_players[0].name == 'J. Dupont'
        assert match.away_players[0].name == 'L. Martin'
        assert match.home_players[0].individual_score == 0

    def test_unknown_division_warns(self, divisions):
        """Test a match of an unknown division is skipped with a warning."""
        collector = ErrorCollector()
        summary = summarize_weekly_matches(
            {'Liège': [team_match(division_id=999)]}, divisions, collector
        )
        assert summary == {'Liège': {}}
        assert collector.warnings == ['Division 999 not found']

    def test_all_regions_present(self, divisions):
        """Test configured regions without matches still appear."""
        summary = summarize_weekly_matches({}, divisions, regions=['Liège', 'Verviers'])
        assert summary == {'Liège': {}, 'Verviers': {}}

    def test_match_without_details(self, divisions):
        """Test a match without sheet is summarized without players."""
        summary = summarize_weekly_matches(
            {'Liège': [team_match(division_id=201, with_details=False)]}, divisions
        )
        match = summary['Liège']['PROVINCIALE_1']['BA']['Men'][0]
        assert match.home_players == []

    def test_to_dict(self, divisions):
        """Test the summary converts to plain JSON data."""
        summary = summarize_weekly_matches(
            {'Liège': [team_match(division_id=201, home_players=[player(1, last='Dupont')])]},
            divisions,
        )
        data = summary_to_dict(summary)
        match = data['Liège']['PROVINCIALE_1']['BA']['Men'][0]
        assert match['home_club'] == 'L360'
        assert match['home_players'] == [{'name': 'T. Dupont', 'individual_score': 0}]
