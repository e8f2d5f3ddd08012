"""Week-over-week ranking comparison and per-player ranking history."""

from dataclasses import dataclass, field

from .config import TopConfiguration
from .consolidation import TopConsolidator
from .models import PlayerId, RankedEntry

TOP_SIZE = 10
COMPARISON_DEPTH = 20


@dataclass
class ClubMovement:
    club: str
    change: str  # 'up', 'down' or 'stable'
    players_in_top: int


@dataclass
class WeekComparison:
    """How a region's rankings moved since the previous week."""
    new_top_players: list[RankedEntry] = field(default_factory=list)
    players_who_dropped: list[RankedEntry] = field(default_factory=list)
    biggest_point_gains: list[tuple[RankedEntry, int]] = field(default_factory=list)
    club_movements: list[ClubMovement] = field(default_factory=list)


@dataclass(frozen=True)
class RankingHistoryEntry:
    week: int
    region: str
    level: str
    position: int  # 1-based
    points: int


def count_club_players_in_top(
    consolidator: TopConsolidator,
    config: TopConfiguration,
    region: str,
    club_id: str,
    week: int,
) -> int:
    """Players of a club in the top 10 of any level of the region."""
    return sum(
        1
        for level in config.all_levels
        for entry in consolidator.get_top_for_region_and_level(region, level, week, TOP_SIZE)
        if entry.club_id == club_id
    )


def build_previous_week_comparison(
    consolidator: TopConsolidator,
    config: TopConfiguration,
    region: str,
    week: int,
) -> WeekComparison:
    """
    Compare a region's rankings of a week with the previous week.

    Collects the new top 10 players (5 max), the players who left the
    top 10 (3 max), the biggest point gains (5 max) and the clubs whose
    number of top 10 players changed or who have at least 3 of them.
    """
    comparison = WeekComparison()
    if week <= 1:
        return comparison

    previous_week = week - 1
    gains: list[tuple[RankedEntry, int]] = []

    for level in config.all_levels:
        current = consolidator.get_top_for_region_and_level(region, level, week, COMPARISON_DEPTH)
        previous = consolidator.get_top_for_region_and_level(
            region, level, previous_week, COMPARISON_DEPTH
        )
        previous_by_id = {entry.player_id: entry for entry in previous}

        for index, entry in enumerate(current):
            before = previous_by_id.get(entry.player_id)
            if before is None:
                if index < TOP_SIZE:
                    comparison.new_top_players.append(entry)
            else:
                gain = entry.points.total - before.points.total
                if gain > 0:
                    gains.append((entry, gain))

        current_top_ids = {entry.player_id for entry in current[:TOP_SIZE]}
        comparison.players_who_dropped.extend(
            entry for entry in previous[:TOP_SIZE] if entry.player_id not in current_top_ids
        )

    gains.sort(key=lambda g: g[1], reverse=True)

    for club_id in config.clubs_for_region(region):
        now = count_club_players_in_top(consolidator, config, region, club_id, week)
        before = count_club_players_in_top(consolidator, config, region, club_id, previous_week)
        if now == 0 and before == 0:
            continue
        change = 'up' if now > before else 'down' if now < before else 'stable'
        if change != 'stable' or now >= 3:
            comparison.club_movements.append(
                ClubMovement(club=consolidator.club_name(club_id), change=change, players_in_top=now)
            )

    comparison.new_top_players = comparison.new_top_players[:5]
    comparison.players_who_dropped = comparison.players_who_dropped[:3]
    comparison.biggest_point_gains = gains[:5]
    return comparison


def player_ranking_history(
    consolidator: TopConsolidator,
    config: TopConfiguration,
    player_id: PlayerId,
    week: int,
) -> list[RankingHistoryEntry]:
    """Position of a player in each week's ranking, where the player was ranked."""
    history = []
    for current_week in range(1, week + 1):
        for region in config.all_regions:
            for level in config.all_levels:
                ranking = consolidator.get_top_for_region_and_level(
                    region, level, current_week, len(consolidator.histories)
                )
                for entry in ranking:
                    if entry.player_id == player_id:
                        history.append(
                            RankingHistoryEntry(
                                week=current_week,
                                region=region,
                                level=level,
                                position=entry.position + 1,
                                points=entry.points.total,
                            )
                        )
    return history
