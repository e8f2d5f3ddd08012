"""Sanity checks for point records and rankings."""

from .constants import GAMES_PER_PLAYER
from .consolidation import ranking_sort_key
from .models import PlayerHistories, PlayerPointRecord, RankedEntry
from .scoring import points_won


def validate_point_record(record: PlayerPointRecord) -> list[str]:
    """
    Check that a point record is internally consistent.

    Checks:
    - Victories and forfeits between 0 and 4
    - Points match the scoring formula
    - The unreachable value 4 never appears

    Args:
        record: PlayerPointRecord to validate

    Returns:
        List of warning messages (empty if valid)
    """
    warnings = []
    where = f'week {record.week}, match {record.match_id}'

    if not 0 <= record.victory_count <= GAMES_PER_PLAYER:
        warnings.append(f'{where}: victory count {record.victory_count} out of range')
    if not 0 <= record.forfeit <= GAMES_PER_PLAYER:
        warnings.append(f'{where}: forfeit count {record.forfeit} out of range')

    expected = points_won(record.victory_count, record.forfeit)
    if record.points_won != expected:
        warnings.append(f'{where}: {record.points_won} pts recorded, expected {expected}')
    if record.points_won == 4:
        warnings.append(f'{where}: 4 points is not an achievable value')

    return warnings


def validate_histories(histories: PlayerHistories) -> list[str]:
    """Validate every record and the one-record-per-week rule."""
    warnings = []
    for player_id, history in histories.items():
        weeks = set()
        for record in history.records:
            warnings.extend(
                f'{history.name} ({player_id}) {w}' for w in validate_point_record(record)
            )
            if record.week in weeks:
                warnings.append(f'{history.name} ({player_id}) has several records in week {record.week}')
            weeks.add(record.week)
    return warnings


def validate_ranked_entries(entries: list[RankedEntry], limit: int) -> list[str]:
    """
    Check that a ranking is well formed.

    Checks:
    - No more than `limit` entries
    - Positions contiguous from 0
    - Entries sorted by the ranking order

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if len(entries) > limit:
        errors.append(f'{len(entries)} entries returned for a limit of {limit}')

    for expected, entry in enumerate(entries):
        if entry.position != expected:
            errors.append(f'{entry.name} at position {entry.position}, expected {expected}')

    keys = [ranking_sort_key(e.name, e.player_id, e.points) for e in entries]
    if keys != sorted(keys):
        errors.append('Entries are not sorted by points')

    return errors
