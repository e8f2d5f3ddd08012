"""Point computation for a player's team match."""

from typing import Iterable, Sequence

from .constants import BONUS_POINTS, GAMES_PER_PLAYER, HOME, WINNING_SET_COUNT
from .models import IndividualGameResult, Player, PlayerId


def points_won(victories: int, forfeits: int) -> int:
    """
    Points earned by a player for a team match.

    Scoring:
        - 1 point per individual victory
        - 1 point per game forfeited by the opponent
        - A full sweep (4 credited games) is worth 5 points instead of 4

    The value 4 can therefore never be returned.
    """
    credited = victories + forfeits
    return BONUS_POINTS if credited == GAMES_PER_PLAYER else credited


def games_for_player(
    player_id: PlayerId,
    results: Iterable[IndividualGameResult],
    side: str,
) -> list[IndividualGameResult]:
    """Individual games in which the player appears on the given side."""
    if side == HOME:
        return [r for r in results if player_id in r.home_player_ids]
    return [r for r in results if player_id in r.away_player_ids]


def count_victories(
    player_id: PlayerId,
    results: Sequence[IndividualGameResult],
    side: str,
) -> int:
    """Count games where the player's side reached the winning set count."""
    victories = 0
    for result in games_for_player(player_id, results, side):
        sets = result.home_set_count if side == HOME else result.away_set_count
        if sets == WINNING_SET_COUNT:
            victories += 1
    return victories


def count_forfeits(
    player_id: PlayerId,
    results: Sequence[IndividualGameResult],
    opposing_players: Sequence[Player],
    side: str,
) -> int:
    """
    Count games credited to the player because the opponent did not play.

    Takes the larger of:
        - games of the player forfeited by the opponent but not by the player's side
        - opposing line-up players flagged as forfeited
    """
    games_ff = 0
    for result in games_for_player(player_id, results, side):
        if side == HOME:
            own, opposite = result.is_home_forfeited, result.is_away_forfeited
        else:
            own, opposite = result.is_away_forfeited, result.is_home_forfeited
        if opposite is True and not own:
            games_ff += 1

    players_ff = sum(1 for p in opposing_players if p.is_forfeited)

    return max(games_ff, players_ff)
