"""Pydantic schemas for JSON data validation."""

from pydantic import BaseModel, Field, field_validator

from .models import (
    Club,
    Division,
    IndividualGameResult,
    MatchDetails,
    Player,
    PlayerId,
    TeamMatch,
)


class PlayerEntry(BaseModel):
    """Player listed on a match sheet."""

    unique_index: int = Field(..., ge=0)
    first_name: str = ''
    last_name: str = ''
    is_forfeited: bool = False
    victory_count: int | None = None

    class Config:
        extra = 'ignore'

    def to_model(self) -> Player:
        return Player(
            player_id=PlayerId(self.unique_index),
            first_name=self.first_name,
            last_name=self.last_name,
            is_forfeited=self.is_forfeited,
            victory_count=self.victory_count,
        )


class IndividualMatchResult(BaseModel):
    """Result of one individual game; absent fields mean the game was not played."""

    home_player_unique_index: list[int] = Field(default_factory=list)
    away_player_unique_index: list[int] = Field(default_factory=list)
    is_home_forfeited: bool | None = None
    is_away_forfeited: bool | None = None
    home_set_count: int | None = Field(None, ge=0, le=3)
    away_set_count: int | None = Field(None, ge=0, le=3)

    class Config:
        extra = 'ignore'

    def to_model(self) -> IndividualGameResult:
        return IndividualGameResult(
            home_player_ids=tuple(PlayerId(i) for i in self.home_player_unique_index),
            away_player_ids=tuple(PlayerId(i) for i in self.away_player_unique_index),
            is_home_forfeited=self.is_home_forfeited,
            is_away_forfeited=self.is_away_forfeited,
            home_set_count=self.home_set_count,
            away_set_count=self.away_set_count,
        )


class MatchDetailsEntry(BaseModel):
    """Line-ups and individual results of a team match."""

    home_players: list[PlayerEntry] = Field(default_factory=list)
    away_players: list[PlayerEntry] = Field(default_factory=list)
    individual_match_results: list[IndividualMatchResult] = Field(default_factory=list)

    class Config:
        extra = 'ignore'

    def to_model(self) -> MatchDetails:
        return MatchDetails(
            home_players=tuple(p.to_model() for p in self.home_players),
            away_players=tuple(p.to_model() for p in self.away_players),
            individual_results=tuple(r.to_model() for r in self.individual_match_results),
        )


class TeamMatchEntry(BaseModel):
    """Team match as ingested from the league API."""

    match_id: str
    match_unique_id: int = 0
    division_id: int
    week_name: int = Field(..., ge=1)
    home_club: str
    home_team: str
    away_club: str
    away_team: str
    score: str | None = None
    is_home_forfeited: bool = False
    is_away_forfeited: bool = False
    is_home_withdrawn: bool = False
    is_away_withdrawn: bool = False
    match_details: MatchDetailsEntry | None = None

    class Config:
        extra = 'ignore'

    def to_model(self) -> TeamMatch:
        return TeamMatch(
            match_id=self.match_id,
            match_unique_id=self.match_unique_id,
            division_id=self.division_id,
            week=self.week_name,
            home_club=self.home_club,
            home_team=self.home_team,
            away_club=self.away_club,
            away_team=self.away_team,
            score=self.score,
            is_home_forfeited=self.is_home_forfeited,
            is_away_forfeited=self.is_away_forfeited,
            is_home_withdrawn=self.is_home_withdrawn,
            is_away_withdrawn=self.is_away_withdrawn,
            details=self.match_details.to_model() if self.match_details else None,
        )


class MatchesFile(BaseModel):
    """Complete matches.json file structure."""

    matches: list[TeamMatchEntry]

    def to_models(self) -> list[TeamMatch]:
        return [m.to_model() for m in self.matches]


class WeeklyMatchesFile(BaseModel):
    """Matches of the week grouped by region (weekly_matches.json)."""

    matches: dict[str, list[TeamMatchEntry]]

    def to_models(self) -> dict[str, list[TeamMatch]]:
        return {region: [m.to_model() for m in matches] for region, matches in self.matches.items()}


class PointOverride(BaseModel):
    """Administrator correction for one player and one week."""

    week_name: int = Field(..., ge=1)
    victory_count: int = Field(0, ge=0, le=4)
    forfeit: int = Field(0, ge=0, le=4)

    class Config:
        extra = 'forbid'


class TopConfigFile(BaseModel):
    """Complete top_config.json file structure."""

    regions_definition: dict[str, list[str]]
    levels_definition: dict[str, list[int]]
    points_overrides: dict[int, list[PointOverride]] = Field(default_factory=dict)
    excluded_players: list[int] = Field(default_factory=list)

    @field_validator('regions_definition', 'levels_definition')
    @classmethod
    def validate_not_empty(cls, v):
        """Ensure regions and levels are defined."""
        if not v:
            raise ValueError('At least one entry is required')
        return v

    @field_validator('levels_definition')
    @classmethod
    def validate_unique_divisions(cls, v):
        """Ensure a division belongs to a single level."""
        seen: dict[int, str] = {}
        for level, divisions in v.items():
            for division_id in divisions:
                if division_id in seen:
                    raise ValueError(
                        f'Division {division_id} is in both {seen[division_id]} and {level}'
                    )
                seen[division_id] = level
        return v

    class Config:
        extra = 'forbid'


class ClubEntry(BaseModel):
    """Club metadata."""

    unique_index: str = Field(..., min_length=1)
    name: str
    long_name: str = ''

    class Config:
        extra = 'ignore'

    def to_model(self) -> Club:
        return Club(club_id=self.unique_index, name=self.name, long_name=self.long_name)


class ClubsFile(BaseModel):
    """Complete clubs.json file structure."""

    clubs: list[ClubEntry]

    def to_models(self) -> dict[str, Club]:
        return {c.unique_index: c.to_model() for c in self.clubs}


class DivisionEntry(BaseModel):
    """Division metadata."""

    division_id: int
    division_name: str
    level: str
    division_category: str = ''

    class Config:
        extra = 'ignore'

    def to_model(self) -> Division:
        return Division(
            division_id=self.division_id,
            name=self.division_name,
            level=self.level,
            category=self.division_category,
        )


class DivisionsFile(BaseModel):
    """Complete divisions.json file structure."""

    divisions: list[DivisionEntry]

    def to_models(self) -> dict[int, Division]:
        return {d.division_id: d.to_model() for d in self.divisions}
