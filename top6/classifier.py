"""Classification of team match outcomes.

A team match is credited per side. The first applicable rule wins:

    BYE        the opponent is the league's placeholder club
    MODIFIED   the score was changed by an administrator ("sm")
    FORFEITED  the opponent forfeited and no game was played
    NORMAL     points come from the individual game results
"""

import re
from enum import Enum
from typing import Optional

from .constants import AWAY, BYE_CLUB, BYE_TEAM_MARKER, HOME, MODIFIED_SCORE_MARKER
from .models import Player, TeamMatch

MODIFIED_SCORE_PATTERN = re.compile(r'^(\d{1,2})-(\d{1,2})')


class MatchOutcome(Enum):
    BYE = 'bye'
    MODIFIED_SCORE = 'modified_score'
    FORFEITED = 'forfeited'
    NORMAL = 'normal'


def opposite_side(side: str) -> str:
    return AWAY if side == HOME else HOME


def is_bye_side(match: TeamMatch, side: str) -> bool:
    """True when the given side is the placeholder of a bye fixture."""
    if side == HOME:
        return match.home_club == BYE_CLUB and BYE_TEAM_MARKER in (match.home_team or '')
    return match.away_club == BYE_CLUB and BYE_TEAM_MARKER in (match.away_team or '')


def is_bye(match: TeamMatch) -> bool:
    return is_bye_side(match, HOME) or is_bye_side(match, AWAY)


def bye_credited_side(match: TeamMatch) -> Optional[str]:
    """The real side of a bye fixture, or None when the match is not a bye."""
    if is_bye_side(match, HOME):
        return AWAY
    if is_bye_side(match, AWAY):
        return HOME
    return None


def is_modified_score(match: TeamMatch) -> bool:
    return bool(match.score) and MODIFIED_SCORE_MARKER in match.score


def parse_modified_score(score: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse the leading "home-away" score of a modified score.

    Examples:
        '16-0 sm' -> (16, 0)
        'sm'      -> None
    """
    if not score:
        return None
    found = MODIFIED_SCORE_PATTERN.match(score)
    if not found:
        return None
    return int(found.group(1)), int(found.group(2))


def all_games_forfeited(match: TeamMatch) -> bool:
    """True when every individual game was forfeited by both sides or never filled in.

    A sheet without any game passes; a match without sheet does not.
    """
    if match.details is None:
        return False
    return all(
        (r.is_home_forfeited and r.is_away_forfeited) or r.is_empty
        for r in match.details.individual_results
    )


def all_players_forfeited(match: TeamMatch, side: str) -> bool:
    """True when every player listed for the side is flagged as forfeited."""
    if match.details is None:
        return False
    return all(p.is_forfeited for p in side_players(match, side))


def side_players(match: TeamMatch, side: str) -> tuple[Player, ...]:
    if match.details is None:
        return ()
    return match.details.home_players if side == HOME else match.details.away_players


def side_club(match: TeamMatch, side: str) -> str:
    return match.home_club if side == HOME else match.away_club


def is_forfeited_by_opponent(match: TeamMatch, side: str) -> bool:
    """
    True when the side wins because the opponent never played.

    The opponent must be flagged forfeited, the side must not have withdrawn
    (unless both did), and the sheet must show no game actually played.
    """
    if side == HOME:
        opposite_forfeited = match.is_away_forfeited
        current_withdrawn, opposite_withdrawn = match.is_home_withdrawn, match.is_away_withdrawn
    else:
        opposite_forfeited = match.is_home_forfeited
        current_withdrawn, opposite_withdrawn = match.is_away_withdrawn, match.is_home_withdrawn

    if not opposite_forfeited:
        return False
    if current_withdrawn and not opposite_withdrawn:
        return False
    return all_games_forfeited(match) or all_players_forfeited(match, opposite_side(side))


def classify_side(match: TeamMatch, side: str) -> MatchOutcome:
    """Outcome of the match from the point of view of one side."""
    if bye_credited_side(match) == side:
        return MatchOutcome.BYE
    if is_modified_score(match):
        return MatchOutcome.MODIFIED_SCORE
    if is_forfeited_by_opponent(match, side):
        return MatchOutcome.FORFEITED
    return MatchOutcome.NORMAL
