"""Top configuration and runtime settings."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from .constants import DEFAULT_PLAYERS_IN_TOP, DEFAULT_WEEK_NAME, LEVEL_NA
from .models import PlayerId
from .schemas import PointOverride, TopConfigFile
from .utils import load_json

DEFAULT_CONFIG_PATH = Path('data') / 'top_config.json'


@dataclass
class TopConfiguration:
    """
    Regions, levels, overrides and exclusions used by the ranking engine.

    Args:
        regions: Region name -> club unique indexes
        levels: Level name -> division ids
        points_overrides: Player -> list of per-week corrections
        excluded_players: Player ids never credited from a normal match
    """

    regions: dict[str, list[str]]
    levels: dict[str, list[int]]
    points_overrides: dict[PlayerId, list[PointOverride]] = field(default_factory=dict)
    excluded_players: frozenset[PlayerId] = frozenset()

    @classmethod
    def from_schema(cls, config: TopConfigFile) -> 'TopConfiguration':
        return cls(
            regions={region: list(clubs) for region, clubs in config.regions_definition.items()},
            levels={level: list(divs) for level, divs in config.levels_definition.items()},
            points_overrides={
                PlayerId(player_id): list(overrides)
                for player_id, overrides in config.points_overrides.items()
            },
            excluded_players=frozenset(PlayerId(p) for p in config.excluded_players),
        )

    @property
    def all_regions(self) -> list[str]:
        return list(self.regions)

    @property
    def all_levels(self) -> list[str]:
        return list(self.levels)

    @property
    def all_clubs(self) -> list[str]:
        """Club unique indexes of every configured region."""
        return [club for clubs in self.regions.values() for club in clubs]

    def clubs_for_region(self, region: str) -> list[str]:
        return self.regions.get(region, [])

    def is_club_configured(self, club: str) -> bool:
        return club in self.all_clubs

    def region_for_club(self, club: str) -> str | None:
        for region, clubs in self.regions.items():
            if club in clubs:
                return region
        return None

    def level_for_division(self, division_id: int) -> str:
        """Level a division belongs to, or NA when the division is not configured."""
        for level, divisions in self.levels.items():
            if division_id in divisions:
                return level
        return LEVEL_NA

    def is_player_excluded(self, player_id: PlayerId) -> bool:
        return player_id in self.excluded_players


@lru_cache(maxsize=1)
def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> TopConfiguration:
    """
    Load the top configuration from a JSON file.

    Configuration is cached after first load for performance.

    Returns:
        TopConfiguration with validated settings

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ValueError: If the config file has an invalid structure

    Example:
        from top6.config import load_config
        config = load_config('data/top_config.json')
        print(config.all_regions)
    """
    return TopConfiguration.from_schema(load_json(config_path, schema=TopConfigFile))


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    load_config.cache_clear()


@dataclass(frozen=True)
class RuntimeSettings:
    """Settings of a single run, read from the environment."""

    week_name: int = DEFAULT_WEEK_NAME
    players_in_top: int = DEFAULT_PLAYERS_IN_TOP
    exclude_zero_totals: bool = False
    write_full_debug: bool = True

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> 'RuntimeSettings':
        env = os.environ if environ is None else environ
        return cls(
            week_name=int(env.get('WEEK_NAME', DEFAULT_WEEK_NAME)),
            players_in_top=int(env.get('PLAYERS_IN_TOP', DEFAULT_PLAYERS_IN_TOP)),
            exclude_zero_totals=env.get('EXCLUDE_ZERO_TOTALS') == 'true',
            write_full_debug=env.get('WRITE_FULL_DEBUG') != 'false',
        )
