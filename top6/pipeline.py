"""Main ranking run that ties every stage together."""

from dataclasses import dataclass
from typing import Optional, Sequence

from .config import TopConfiguration
from .consolidation import TopConsolidator
from .diagnostics import ErrorCollector
from .levels import attribute_levels
from .logging_config import get_logger
from .models import Club, LevelAssignment, PlayerHistories, RankedEntry, TeamMatch
from .points_engine import apply_points_overrides, compute_player_points

logger = get_logger('pipeline')


@dataclass
class TopRun:
    """Output of one ranking run."""
    week: int
    config: TopConfiguration
    histories: PlayerHistories
    levels: LevelAssignment
    consolidator: TopConsolidator
    collector: ErrorCollector

    def get_top_for_region_and_level(
        self, region: str, level: str, week: int, limit: int
    ) -> list[RankedEntry]:
        return self.consolidator.get_top_for_region_and_level(region, level, week, limit)

    def all_tops(self, limit: int, week: Optional[int] = None) -> dict[str, dict[str, list[RankedEntry]]]:
        """Rankings of every configured region and level."""
        week = self.week if week is None else week
        return {
            region: {
                level: self.get_top_for_region_and_level(region, level, week, limit)
                for level in self.config.all_levels
            }
            for region in self.config.all_regions
        }

    def all_errors_and_warnings(self) -> list[str]:
        return self.collector.all_errors_and_warnings()


def run_top(
    matches: Optional[Sequence[TeamMatch]],
    config: TopConfiguration,
    week: int,
    clubs: Optional[dict[str, Club]] = None,
    exclude_zero_totals: bool = False,
) -> TopRun:
    """
    Compute the rankings of a season up to a week.

    Stages run in order, each over the whole season: points, overrides,
    level attribution, then consolidation (served lazily by the returned
    run). Every call builds its own maps and error collector.

    Args:
        matches: All team matches of the season
        config: Top configuration
        week: Current week
        clubs: Optional club metadata for display names
        exclude_zero_totals: Drop players without any point from the rankings

    Returns:
        TopRun with histories, levels, rankings and diagnostics
    """
    collector = ErrorCollector()

    logger.info(f'Computing tops up to week {week}')
    base = compute_player_points(matches, config, collector)
    # Without ingested matches the points model stays empty, overrides included
    histories = base if matches is None else apply_points_overrides(base, config)
    levels = attribute_levels(histories, week)
    consolidator = TopConsolidator(
        histories, levels, config, clubs=clubs, exclude_zero_totals=exclude_zero_totals
    )

    if collector.errors or collector.warnings:
        logger.warning(
            f'{len(collector.errors)} errors and {len(collector.warnings)} warnings found'
        )

    return TopRun(
        week=week,
        config=config,
        histories=histories,
        levels=levels,
        consolidator=consolidator,
        collector=collector,
    )
