"""Top consolidation: ranked lists per region, level and week."""

from typing import Optional

from .aggregation import aggregate_points
from .config import TopConfiguration
from .logging_config import get_logger
from .models import (
    Club,
    LevelAssignment,
    PlayerHistories,
    PlayerId,
    PointAggregate,
    RankedEntry,
)

logger = get_logger('consolidation')


def ranking_sort_key(name: str, player_id: PlayerId, points: PointAggregate) -> tuple:
    """
    Sort key of a ranking.

    Order: total points desc, number of 5 points matches desc,
    name asc, player id asc.
    """
    return (-points.total, -points.count_5_pts, name, player_id)


class TopConsolidator:
    """
    Serves ranked lists from the histories and level attribution of one run.

    Aggregates and full rankings are computed once per (player, week) and
    (region, level, week), then reused for every query of the run.

    Args:
        histories: Player histories (overrides applied)
        levels: Level attribution (week -> player -> level)
        config: Top configuration (region membership)
        clubs: Optional club metadata for display names
        exclude_zero_totals: Drop players without any point from the rankings
    """

    def __init__(
        self,
        histories: PlayerHistories,
        levels: LevelAssignment,
        config: TopConfiguration,
        clubs: Optional[dict[str, Club]] = None,
        exclude_zero_totals: bool = False,
    ):
        self.histories = histories
        self.levels = levels
        self.config = config
        self.clubs = clubs or {}
        self.exclude_zero_totals = exclude_zero_totals
        self._aggregates: dict[tuple[PlayerId, int], PointAggregate] = {}
        self._rankings: dict[tuple[str, str, int], list[RankedEntry]] = {}

    def points_for(self, player_id: PlayerId, week: int) -> PointAggregate:
        key = (player_id, week)
        if key not in self._aggregates:
            self._aggregates[key] = aggregate_points(self.histories.get(player_id), week)
        return self._aggregates[key]

    def club_name(self, club_id: str) -> str:
        club = self.clubs.get(club_id)
        if club is None:
            return club_id
        return club.long_name or club.name or club_id

    def _rank(self, region: str, level: str, week: int) -> list[RankedEntry]:
        region_clubs = set(self.config.clubs_for_region(region))
        week_levels = self.levels.get(week, {})

        candidates = []
        for player_id, player_level in week_levels.items():
            if player_level != level:
                continue
            history = self.histories.get(player_id)
            if history is None or history.club not in region_clubs:
                continue
            points = self.points_for(player_id, week)
            if self.exclude_zero_totals and points.total == 0:
                continue
            candidates.append((history, points))

        candidates.sort(key=lambda c: ranking_sort_key(c[0].name, c[0].player_id, c[1]))

        return [
            RankedEntry(
                player_id=history.player_id,
                name=history.name,
                club_id=history.club,
                club_name=self.club_name(history.club),
                points=points,
                position=position,
                region=region,
                level=level,
                week=week,
            )
            for position, (history, points) in enumerate(candidates)
        ]

    def get_top_for_region_and_level(
        self, region: str, level: str, week: int, limit: int
    ) -> list[RankedEntry]:
        """
        Ranked players of a region and level for a week.

        Args:
            region: Region name
            level: Level name
            week: Week of the ranking (points counted up to this week)
            limit: Maximum number of entries returned

        Returns:
            At most `limit` entries, positions starting at 0
        """
        key = (region, level, week)
        if key not in self._rankings:
            self._rankings[key] = self._rank(region, level, week)
            logger.debug(f'{region} / {level} / week {week}: {len(self._rankings[key])} players')
        return self._rankings[key][: max(limit, 0)]
