"""Weekly matches summary grouped by region, level, division and category."""

from dataclasses import asdict, dataclass, field
from typing import Optional

from .diagnostics import ErrorCollector
from .models import Division, Player, TeamMatch


@dataclass(frozen=True)
class SummaryPlayer:
    name: str
    individual_score: int


@dataclass(frozen=True)
class WeeklyMatchSummary:
    home_team: str
    away_team: str
    home_club: str
    away_club: str
    score: Optional[str]
    home_players: list[SummaryPlayer] = field(default_factory=list)
    away_players: list[SummaryPlayer] = field(default_factory=list)


# region -> level -> division name -> category -> matches
WeeklySummary = dict[str, dict[str, dict[str, dict[str, list[WeeklyMatchSummary]]]]]


def summary_division_name(division: Division) -> str:
    """Single-letter division names are shown with the 'A' series suffix."""
    if division.name and len(division.name) == 1:
        return f'{division.name}A'
    return division.name


def _summary_player(player: Player) -> SummaryPlayer:
    initial = player.first_name[0] if player.first_name else ''
    return SummaryPlayer(
        name=f'{initial}. {player.last_name}',
        individual_score=player.victory_count or 0,
    )


def summarize_match(match: TeamMatch) -> WeeklyMatchSummary:
    details = match.details
    return WeeklyMatchSummary(
        home_team=match.home_team,
        away_team=match.away_team,
        home_club=match.home_club,
        away_club=match.away_club,
        score=match.score,
        home_players=[_summary_player(p) for p in details.home_players] if details else [],
        away_players=[_summary_player(p) for p in details.away_players] if details else [],
    )


def summarize_weekly_matches(
    matches_per_region: dict[str, list[TeamMatch]],
    divisions: dict[int, Division],
    collector: Optional[ErrorCollector] = None,
    regions: Optional[list[str]] = None,
) -> WeeklySummary:
    """
    Group the matches of the week for the weekly newsletter.

    Matches of an unknown division are reported as warnings and skipped.

    Args:
        matches_per_region: Region -> matches played this week
        divisions: Division metadata keyed by division id
        collector: Receives unknown-division warnings
        regions: Regions always present in the result, even without matches

    Returns:
        Nested mapping region -> level -> division -> category -> summaries
    """
    collector = collector if collector is not None else ErrorCollector()
    summary: WeeklySummary = {region: {} for region in regions or []}

    for region, matches in matches_per_region.items():
        region_summary = summary.setdefault(region, {})
        for match in matches:
            division = divisions.get(match.division_id)
            if division is None:
                collector.warn(f'Division {match.division_id} not found')
                continue

            (
                region_summary.setdefault(division.level, {})
                .setdefault(summary_division_name(division), {})
                .setdefault(division.category, [])
                .append(summarize_match(match))
            )

    return summary


def summary_to_dict(summary: WeeklySummary) -> dict:
    """JSON-serializable copy of a weekly summary."""
    return {
        region: {
            level: {
                division: {
                    category: [asdict(match) for match in matches]
                    for category, matches in categories.items()
                }
                for division, categories in divisions.items()
            }
            for level, divisions in levels.items()
        }
        for region, levels in summary.items()
    }
