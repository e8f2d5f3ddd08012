"""Point aggregation over a player's history."""

from typing import Optional

from .constants import POINT_BUCKETS
from .models import PlayerHistories, PlayerId, PlayerPointHistory, PointAggregate


def aggregate_points(history: Optional[PlayerPointHistory], cutoff_week: int) -> PointAggregate:
    """
    Sum a player's points up to and including a week.

    Each record also counts toward its point bucket (5, 3, 2, 1 or 0).

    Args:
        history: Player history (None is treated as empty)
        cutoff_week: Last week taken into account

    Returns:
        PointAggregate with total and per-bucket counts
    """
    if history is None:
        return PointAggregate()

    buckets = dict.fromkeys(POINT_BUCKETS, 0)
    total = 0
    for record in history.records:
        if record.week > cutoff_week:
            continue
        total += record.points_won
        if record.points_won in buckets:
            buckets[record.points_won] += 1

    return PointAggregate(
        total=total,
        count_5_pts=buckets[5],
        count_3_pts=buckets[3],
        count_2_pts=buckets[2],
        count_1_pts=buckets[1],
        count_0_pts=buckets[0],
    )


def get_player_results_until_week(
    histories: PlayerHistories, player_id: PlayerId, week: int
) -> Optional[PlayerPointHistory]:
    """Copy of a player's history restricted to weeks <= week."""
    history = histories.get(player_id)
    if history is None:
        return None
    return PlayerPointHistory(
        player_id=history.player_id,
        name=history.name,
        club=history.club,
        records=[r for r in history.records if r.week <= week],
    )
