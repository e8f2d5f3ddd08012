from .models import (
    Club,
    Division,
    IndividualGameResult,
    MatchDetails,
    Player,
    PlayerId,
    PlayerPointHistory,
    PlayerPointRecord,
    PointAggregate,
    RankedEntry,
    TeamMatch,
)
from .scoring import points_won
from .config import TopConfiguration, RuntimeSettings, load_config, clear_config_cache
from .diagnostics import ErrorCollector
from .points_engine import compute_player_points, apply_points_overrides
from .levels import attribute_levels
from .aggregation import aggregate_points, get_player_results_until_week
from .consolidation import TopConsolidator
from .pipeline import TopRun, run_top
from .weekly_summary import summarize_weekly_matches
from .comparison import build_previous_week_comparison, player_ranking_history

__all__ = [
    # Models
    'Club',
    'Division',
    'IndividualGameResult',
    'MatchDetails',
    'Player',
    'PlayerId',
    'PlayerPointHistory',
    'PlayerPointRecord',
    'PointAggregate',
    'RankedEntry',
    'TeamMatch',
    # Configuration
    'TopConfiguration',
    'RuntimeSettings',
    'load_config',
    'clear_config_cache',
    # Processing stages
    'points_won',
    'ErrorCollector',
    'compute_player_points',
    'apply_points_overrides',
    'attribute_levels',
    'aggregate_points',
    'get_player_results_until_week',
    'TopConsolidator',
    'TopRun',
    'run_top',
    # Reporting inputs
    'summarize_weekly_matches',
    'build_previous_week_comparison',
    'player_ranking_history',
]
