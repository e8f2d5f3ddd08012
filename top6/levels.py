"""Level attribution: the level each player represents, week by week."""

from .constants import LEVEL_NA
from .logging_config import get_logger
from .models import LevelAssignment, PlayerHistories, PlayerId, PlayerPointRecord

logger = get_logger('levels')


def main_level(records: list[PlayerPointRecord]) -> str:
    """
    Level a player is attributed from a slice of records.

    The level with the most records wins; on a tie, the level played
    first (lowest week) wins. Without records the level is NA.
    """
    groups: dict[str, list[PlayerPointRecord]] = {}
    for record in records:
        groups.setdefault(record.level, []).append(record)

    if not groups:
        return LEVEL_NA

    # min() keeps the first group encountered on a full tie
    return min(
        groups.items(),
        key=lambda item: (-len(item[1]), min(r.week for r in item[1])),
    )[0]


def attribute_levels(histories: PlayerHistories, current_week: int) -> LevelAssignment:
    """
    Attribute a level to every player for weeks 1..current_week.

    Each week is recomputed from the full history up to that week, a
    player's level can change once more matches are played at another level.

    Args:
        histories: Player histories (overrides included)
        current_week: Last week to attribute

    Returns:
        Mapping week -> player id -> level
    """
    logger.info('Attributing levels...')
    levels: LevelAssignment = {}
    for week in range(1, current_week + 1):
        week_levels: dict[PlayerId, str] = {}
        for player_id, history in histories.items():
            week_levels[player_id] = main_level([r for r in history.records if r.week <= week])
        levels[week] = week_levels
    return levels


def level_for_player(levels: LevelAssignment, player_id: PlayerId, week: int) -> str:
    return levels.get(week, {}).get(player_id, LEVEL_NA)
