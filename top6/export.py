"""Debug files and flattened ranking documents for downstream consumers."""

from dataclasses import asdict
from pathlib import Path
from typing import Any

from .logging_config import get_logger
from .pipeline import TopRun
from .utils import save_json

logger = get_logger('export')

POINTS_DEBUG_FILE = 'points_debug.json'
LEVEL_ATTRIBUTION_DEBUG_FILE = 'level_attribution_debug.json'
TOPS_DEBUG_FILE = 'tops_debug.json'
ERRORS_FILE = 'errors.json'


def sanitize_document_id(document_id: str) -> str:
    """Document ids may not contain slashes."""
    return document_id.replace('/', '_').replace(' ', '_')


def histories_to_dict(run: TopRun) -> dict[str, Any]:
    return {str(player_id): asdict(history) for player_id, history in run.histories.items()}


def levels_to_dict(run: TopRun) -> dict[str, dict[str, str]]:
    return {
        str(week): {str(player_id): level for player_id, level in players.items()}
        for week, players in run.levels.items()
    }


def tops_to_dict(run: TopRun, limit: int) -> dict[str, dict[str, list[dict[str, Any]]]]:
    return {
        region: {level: [asdict(entry) for entry in entries] for level, entries in levels.items()}
        for region, levels in run.all_tops(limit).items()
    }


def build_ranking_documents(run: TopRun, limit: int = 1000) -> list[dict[str, Any]]:
    """
    Flatten the week's rankings, one document per ranked player.

    Positions are 1-based in the documents.
    """
    documents = []
    for region, levels in run.all_tops(limit).items():
        for level, entries in levels.items():
            for entry in entries:
                documents.append(
                    {
                        'id': sanitize_document_id(
                            f'{run.week}-{region}-{level}-{entry.player_id}'
                        ),
                        'week_name': run.week,
                        'region': region,
                        'level': level,
                        'unique_index': entry.player_id,
                        'name': entry.name,
                        'club': entry.club_id,
                        'club_name': entry.club_name,
                        'position': entry.position + 1,
                        'points': asdict(entry.points),
                    }
                )
    return documents


def write_debug_files(run: TopRun, output_dir: str | Path, limit: int) -> list[Path]:
    """
    Write the intermediate models of a run as JSON.

    Returns:
        Paths of the written files
    """
    output_dir = Path(output_dir)
    files = {
        POINTS_DEBUG_FILE: histories_to_dict(run),
        LEVEL_ATTRIBUTION_DEBUG_FILE: levels_to_dict(run),
        TOPS_DEBUG_FILE: tops_to_dict(run, limit),
        ERRORS_FILE: {'errors': run.collector.errors, 'warnings': run.collector.warnings},
    }

    written = []
    for name, data in files.items():
        path = output_dir / name
        save_json(path, data)
        written.append(path)

    logger.info(f'Debug files written to {output_dir}')
    return written
