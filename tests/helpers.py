"""Builders for matches and configuration used across the test suite."""

from top6.config import TopConfiguration
from top6.models import (
    IndividualGameResult,
    MatchDetails,
    Player,
    PlayerId,
    TeamMatch,
)
from top6.schemas import PointOverride

HOME_CLUB = 'L360'
AWAY_CLUB = 'L095'
VERVIERS_CLUB = 'V101'


def make_config(overrides=None, excluded=()) -> TopConfiguration:
    return TopConfiguration(
        regions={
            'Liège': [HOME_CLUB, AWAY_CLUB],
            'Verviers': [VERVIERS_CLUB],
        },
        levels={
            'NATIONAL': [100],
            'PROVINCIALE_1': [201],
            'PROVINCIALE_2': [202, 203],
        },
        points_overrides={
            PlayerId(player_id): [PointOverride(**o) for o in items]
            for player_id, items in (overrides or {}).items()
        },
        excluded_players=frozenset(PlayerId(p) for p in excluded),
    )


def player(player_id: int, last: str = '', first: str = 'Test', forfeited: bool = False) -> Player:
    return Player(
        player_id=PlayerId(player_id),
        first_name=first,
        last_name=last or f'Player{player_id}',
        is_forfeited=forfeited,
    )


def game(
    home_id: int,
    away_id: int,
    home_sets: int | None = None,
    away_sets: int | None = None,
    home_ff: bool | None = None,
    away_ff: bool | None = None,
) -> IndividualGameResult:
    return IndividualGameResult(
        home_player_ids=(PlayerId(home_id),),
        away_player_ids=(PlayerId(away_id),),
        is_home_forfeited=home_ff,
        is_away_forfeited=away_ff,
        home_set_count=home_sets,
        away_set_count=away_sets,
    )


def team_match(
    match_id: str = 'P1/001',
    week: int = 1,
    division_id: int = 201,
    home_players=(),
    away_players=(),
    games=(),
    score: str | None = '10-6',
    home_club: str = HOME_CLUB,
    away_club: str = AWAY_CLUB,
    home_team: str = 'A',
    away_team: str = 'B',
    with_details: bool = True,
    match_unique_id: int = 1,
    **flags,
) -> TeamMatch:
    details = None
    if with_details:
        details = MatchDetails(
            home_players=tuple(home_players),
            away_players=tuple(away_players),
            individual_results=tuple(games),
        )
    return TeamMatch(
        match_id=match_id,
        match_unique_id=match_unique_id,
        division_id=division_id,
        week=week,
        home_club=home_club,
        home_team=home_team,
        away_club=away_club,
        away_team=away_team,
        score=score,
        details=details,
        **flags,
    )


def sweep_match(
    match_id: str,
    week: int,
    home_ids,
    away_ids,
    division_id: int = 201,
    **kwargs,
) -> TeamMatch:
    """Normal match where each home player wins all 4 of their games 3-0."""
    games = [
        game(h, a, home_sets=3, away_sets=0)
        for h in home_ids
        for a in away_ids
    ]
    return team_match(
        match_id=match_id,
        week=week,
        division_id=division_id,
        home_players=[player(i) for i in home_ids],
        away_players=[player(i) for i in away_ids],
        games=games,
        score='16-0',
        **kwargs,
    )
