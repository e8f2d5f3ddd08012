"""Points engine: turns team match sheets into per-player point records.

Each eligible side of a match is classified (see classifier.py) and every
listed player gets at most one record per week. The administrator overrides
are then replayed on a copy of the result.
"""

import copy
from typing import Optional, Sequence

from .classifier import (
    MatchOutcome,
    bye_credited_side,
    classify_side,
    opposite_side,
    parse_modified_score,
    side_club,
    side_players,
)
from .config import TopConfiguration
from .constants import GAMES_PER_PLAYER, HOME, LEVEL_NA, OVERRIDE_PLACEHOLDER, SIDES
from .diagnostics import ErrorCollector
from .logging_config import get_logger
from .models import (
    Player,
    PlayerHistories,
    PlayerId,
    PlayerPointHistory,
    PlayerPointRecord,
    TeamMatch,
)
from .schemas import PointOverride
from .scoring import count_forfeits, count_victories, points_won

logger = get_logger('points_engine')


class PlayerPointsLedger:
    """
    Mutable player -> history map owned by a single processing run.

    Enforces one record per (player, week): a second record for the same
    match is a duplicated line-up entry (warning), a second record from
    another match is a conflict (error). The first record is kept.
    """

    def __init__(self, config: TopConfiguration, collector: ErrorCollector):
        self.config = config
        self.collector = collector
        self.histories: PlayerHistories = {}
        self._unknown_divisions: set[int] = set()

    def add(
        self,
        player: Player,
        club: str,
        match: TeamMatch,
        victory_count: int = 0,
        forfeit: int = 0,
    ) -> Optional[PlayerPointRecord]:
        """
        Credit a player for a match.

        Returns:
            The new record, or None when the player was skipped or already credited
        """
        player_id = player.player_id
        # Unidentified line-up slot (forfeited player without licence)
        if player_id == 0:
            return None

        history = self.histories.get(player_id)
        if history is None:
            history = PlayerPointHistory(player_id=player_id, name=player.display_name, club=club)
            self.histories[player_id] = history

        existing = history.record_for_week(match.week)
        if existing is not None:
            self._report_duplicate(history, existing, match)
            return None

        # Club at the time of the last credited match
        history.club = club
        record = PlayerPointRecord(
            division_id=match.division_id,
            week=match.week,
            victory_count=victory_count,
            forfeit=forfeit,
            match_id=match.match_id,
            match_unique_id=match.match_unique_id,
            level=self.level_for_division(match.division_id),
            points_won=points_won(victory_count, forfeit),
        )
        history.records.append(record)
        return record

    def level_for_division(self, division_id: int) -> str:
        """Level of a division, warning once per division outside every level."""
        level = self.config.level_for_division(division_id)
        if level == LEVEL_NA and division_id not in self._unknown_divisions:
            self._unknown_divisions.add(division_id)
            self.collector.warn(
                f'Division {division_id} is not in any configured level, level {LEVEL_NA} used'
            )
        return level

    def _report_duplicate(
        self,
        history: PlayerPointHistory,
        existing: PlayerPointRecord,
        match: TeamMatch,
    ) -> None:
        name, player_id = history.name, history.player_id
        if existing.match_id == match.match_id:
            self.collector.warn(
                f'{name} (ID : {player_id}) a été enregistré plusieurs fois sur la feuille '
                f'de match {existing.match_id}. Seule une participation a été comptabilisée'
            )
        else:
            self.collector.error(
                f'{name} (ID : {player_id}) a été enregistré sur deux feuilles de match '
                f'différentes lors de la semaine {match.week}. Match 1 : {existing.match_id}, '
                f'Match 2 : {match.match_id}. La participation de {name} pour le match '
                f'{match.match_id} a été exclue du calcul.'
            )


def _credit_side(
    ledger: PlayerPointsLedger,
    match: TeamMatch,
    side: str,
    victory_count: int,
    forfeit: int,
) -> None:
    club = side_club(match, side)
    for player in side_players(match, side):
        ledger.add(player, club, match, victory_count, forfeit)


def _handle_bye(ledger: PlayerPointsLedger, match: TeamMatch, side: str) -> None:
    # Maximum non-bonus credit, worth the 5 points bucket
    _credit_side(ledger, match, side, victory_count=GAMES_PER_PLAYER, forfeit=0)


def _handle_modified_score(ledger: PlayerPointsLedger, match: TeamMatch, side: str) -> None:
    scores = parse_modified_score(match.score)
    if scores is None:
        logger.debug(f'Match {match.match_id}: unparseable modified score {match.score!r}')
        return

    home_score, away_score = scores
    own, opposite = (home_score, away_score) if side == HOME else (away_score, home_score)

    if opposite == 0:
        _credit_side(ledger, match, side, victory_count=0, forfeit=GAMES_PER_PLAYER)
    elif own != 0:
        ledger.collector.warn(
            f"Le match {match.match_id} a un score modifié, mais le score n'est pas le "
            f'score maximum de défaite. Aucune décision prise pour le top6.'
        )


def _handle_forfeited(ledger: PlayerPointsLedger, match: TeamMatch, side: str) -> None:
    _credit_side(ledger, match, side, victory_count=0, forfeit=GAMES_PER_PLAYER)


def _handle_normal(ledger: PlayerPointsLedger, match: TeamMatch, side: str) -> None:
    details = match.details
    if details is None:
        return

    club = side_club(match, side)
    opposing_players = side_players(match, opposite_side(side))

    for player in side_players(match, side):
        if ledger.config.is_player_excluded(player.player_id):
            logger.info(f'Player {player.display_name} is excluded from points calculation')
            continue

        victories = count_victories(player.player_id, details.individual_results, side)
        forfeit = count_forfeits(
            player.player_id, details.individual_results, opposing_players, side
        )
        ledger.add(player, club, match, victories, forfeit)


HANDLERS = {
    MatchOutcome.BYE: _handle_bye,
    MatchOutcome.MODIFIED_SCORE: _handle_modified_score,
    MatchOutcome.FORFEITED: _handle_forfeited,
    MatchOutcome.NORMAL: _handle_normal,
}


def eligible_sides(match: TeamMatch, config: TopConfiguration) -> list[str]:
    """Sides whose club belongs to a configured region."""
    return [side for side in SIDES if config.is_club_configured(side_club(match, side))]


def process_match(ledger: PlayerPointsLedger, match: TeamMatch) -> None:
    """Credit the players of one team match."""
    sides = eligible_sides(match, ledger.config)

    credited = bye_credited_side(match)
    if credited is not None:
        if credited in sides:
            HANDLERS[classify_side(match, credited)](ledger, match, credited)
        return

    if not match.score:
        return

    for side in sides:
        outcome = classify_side(match, side)
        HANDLERS[outcome](ledger, match, side)


def compute_player_points(
    matches: Optional[Sequence[TeamMatch]],
    config: TopConfiguration,
    collector: Optional[ErrorCollector] = None,
) -> PlayerHistories:
    """
    Build every player's point history from the season's matches.

    Overrides are not applied here, see apply_points_overrides().

    Args:
        matches: All team matches of the season
        config: Top configuration (clubs, levels, exclusions)
        collector: Receives duplicate and conflict diagnostics

    Returns:
        Player histories keyed by player id (empty when no matches were ingested)
    """
    collector = collector if collector is not None else ErrorCollector()
    ledger = PlayerPointsLedger(config, collector)

    if matches is None:
        collector.error('Matches are missing from the ingestion model. Cannot process player points.')
        return ledger.histories

    logger.info(f'Processing {len(matches)} matches for player points...')
    for match in matches:
        process_match(ledger, match)

    logger.info(f'{len(ledger.histories)} players credited')
    return ledger.histories


def _apply_override(
    histories: PlayerHistories,
    player_id: PlayerId,
    override: PointOverride,
    config: TopConfiguration,
) -> None:
    history = histories.get(player_id)
    if history is None:
        history = PlayerPointHistory(
            player_id=player_id, name=OVERRIDE_PLACEHOLDER, club=OVERRIDE_PLACEHOLDER
        )
        histories[player_id] = history

    record = history.record_for_week(override.week_name)
    if record is None:
        history.records.append(
            PlayerPointRecord(
                division_id=0,
                week=override.week_name,
                victory_count=override.victory_count,
                forfeit=override.forfeit,
                match_id=OVERRIDE_PLACEHOLDER,
                match_unique_id=0,
                level=config.level_for_division(0),
                points_won=points_won(override.victory_count, override.forfeit),
                is_override=True,
            )
        )
        logger.info(
            f'Adding override for {history.name} (ID : {player_id}). Week: {override.week_name}.'
        )
        return

    if override.forfeit:
        logger.info(
            f'Overriding forfeit of {history.name}. Week: {override.week_name}. '
            f'Setting forfeit to {override.forfeit}.'
        )
        record.forfeit = override.forfeit
    if override.victory_count:
        logger.info(
            f'Overriding victory of {history.name}. Week: {override.week_name}. '
            f'Setting victory to {override.victory_count}.'
        )
        record.victory_count = override.victory_count
    record.points_won = points_won(record.victory_count, record.forfeit)
    record.is_override = True


def apply_points_overrides(
    histories: PlayerHistories,
    config: TopConfiguration,
) -> PlayerHistories:
    """
    Replay the administrator corrections on a copy of the histories.

    An override updates the player's record for that week, or adds a
    placeholder record when there is none. Overrides never raise duplicate
    diagnostics and applying them twice gives the same result.

    Returns:
        New histories; the input mapping is left untouched
    """
    overridden = copy.deepcopy(histories)
    for player_id, overrides in config.points_overrides.items():
        for override in overrides:
            _apply_override(overridden, player_id, override, config)
    return overridden
