"""Data models for the Top 6 ranking engine."""

from dataclasses import dataclass, field
from typing import NewType, Optional

PlayerId = NewType('PlayerId', int)


@dataclass(frozen=True)
class Player:
    """A player listed on one side of a match sheet."""
    player_id: PlayerId
    first_name: str = ''
    last_name: str = ''
    is_forfeited: bool = False
    victory_count: Optional[int] = None  # As published on the sheet

    @property
    def display_name(self) -> str:
        return f'{self.last_name} {self.first_name}'


@dataclass(frozen=True)
class IndividualGameResult:
    """One game within a team match."""
    home_player_ids: tuple[PlayerId, ...] = ()
    away_player_ids: tuple[PlayerId, ...] = ()
    is_home_forfeited: Optional[bool] = None
    is_away_forfeited: Optional[bool] = None
    home_set_count: Optional[int] = None
    away_set_count: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        """True when the game carries neither forfeit flags nor set counts."""
        return (
            self.is_home_forfeited is None
            and self.is_away_forfeited is None
            and self.home_set_count is None
            and self.away_set_count is None
        )


@dataclass(frozen=True)
class MatchDetails:
    """Line-ups and individual results of a team match."""
    home_players: tuple[Player, ...] = ()
    away_players: tuple[Player, ...] = ()
    individual_results: tuple[IndividualGameResult, ...] = ()


@dataclass(frozen=True)
class TeamMatch:
    """One scheduled fixture between two teams."""
    match_id: str
    division_id: int
    week: int
    home_club: str
    home_team: str
    away_club: str
    away_team: str
    match_unique_id: int = 0
    score: Optional[str] = None
    is_home_forfeited: bool = False
    is_away_forfeited: bool = False
    is_home_withdrawn: bool = False
    is_away_withdrawn: bool = False
    details: Optional[MatchDetails] = None


@dataclass
class PlayerPointRecord:
    """Points earned by a player in one division for one week."""
    division_id: int
    week: int
    victory_count: int
    forfeit: int
    match_id: str
    match_unique_id: int
    level: str
    points_won: int
    is_override: bool = False


@dataclass
class PlayerPointHistory:
    """All point records of a player for the season."""
    player_id: PlayerId
    name: str
    club: str
    records: list[PlayerPointRecord] = field(default_factory=list)

    def record_for_week(self, week: int) -> Optional[PlayerPointRecord]:
        for record in self.records:
            if record.week == week:
                return record
        return None


@dataclass(frozen=True)
class PointAggregate:
    """Total points and per-bucket match counts up to a cutoff week."""
    total: int = 0
    count_5_pts: int = 0
    count_3_pts: int = 0
    count_2_pts: int = 0
    count_1_pts: int = 0
    count_0_pts: int = 0


@dataclass(frozen=True)
class RankedEntry:
    """A player's position in a region/level ranking for a week."""
    player_id: PlayerId
    name: str
    club_id: str
    club_name: str
    points: PointAggregate
    position: int  # 0-based
    region: str
    level: str
    week: int


@dataclass(frozen=True)
class Club:
    """Club metadata."""
    club_id: str
    name: str
    long_name: str = ''


@dataclass(frozen=True)
class Division:
    """Division metadata used by the weekly summary."""
    division_id: int
    name: str
    level: str
    category: str = ''


# Histories keyed by player, levels keyed by week then player
PlayerHistories = dict[PlayerId, PlayerPointHistory]
LevelAssignment = dict[int, dict[PlayerId, str]]
