#!/usr/bin/env python3
"""
Top 6 ranking CLI

Computes the weekly player rankings of every region and level from the
season's match sheets stored as JSON.

Inputs (in --data-dir):
    matches.json      all team matches of the season
    top_config.json   regions, levels, overrides and excluded players
    clubs.json        optional club names

Usage:
    python top_cli.py --week 9
    python top_cli.py --week 9 --limit 12 --output output/week_9
    WEEK_NAME=9 EXCLUDE_ZERO_TOTALS=true python top_cli.py
"""

import argparse
import logging
import sys
from pathlib import Path

from top6 import RuntimeSettings, load_config, run_top, summarize_weekly_matches
from top6.comparison import build_previous_week_comparison
from top6.export import build_ranking_documents, write_debug_files
from top6.logging_config import setup_logging
from top6.schemas import ClubsFile, DivisionsFile, MatchesFile, WeeklyMatchesFile
from top6.utils import load_json, load_json_safe, save_json
from top6.weekly_summary import summary_to_dict


def print_tops(run, limit: int) -> None:
    for region, levels in run.all_tops(limit).items():
        print('\n' + '=' * 60)
        print(f'TOP {region.upper()} - WEEK {run.week}')
        print('=' * 60)
        for level, entries in levels.items():
            if not entries:
                continue
            print(f'\n  {level}')
            for entry in entries:
                points = entry.points
                print(
                    f'    {entry.position + 1:>3}. {entry.name} ({entry.club_name}): '
                    f'{points.total} pts [5x{points.count_5_pts} 3x{points.count_3_pts} '
                    f'2x{points.count_2_pts} 1x{points.count_1_pts} 0x{points.count_0_pts}]'
                )


def print_comparison(run) -> None:
    for region in run.config.all_regions:
        comparison = build_previous_week_comparison(run.consolidator, run.config, region, run.week)
        if not (comparison.new_top_players or comparison.biggest_point_gains):
            continue
        print(f'\n  {region}: evolution since week {run.week - 1}')
        for entry in comparison.new_top_players:
            print(f'    + {entry.name} enters the top ({entry.level})')
        for entry, gain in comparison.biggest_point_gains:
            print(f'    ↑ {entry.name} +{gain} pts')
        for entry in comparison.players_who_dropped:
            print(f'    - {entry.name} leaves the top ({entry.level})')


def main():
    settings = RuntimeSettings.from_env()

    parser = argparse.ArgumentParser(description="Top 6 weekly player rankings")
    parser.add_argument(
        "--week", "-w",
        type=int,
        default=settings.week_name,
        help="Current week (default: WEEK_NAME or %(default)s)",
    )
    parser.add_argument(
        "--limit", "-n",
        type=int,
        default=settings.players_in_top,
        help="Players shown per ranking (default: PLAYERS_IN_TOP or %(default)s)",
    )
    parser.add_argument(
        "--data-dir", "-d",
        default="data",
        help="Path to data directory",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory for debug and ranking files (defaults to output/week_{N})",
    )
    parser.add_argument(
        "--exclude-zero",
        action="store_true",
        default=settings.exclude_zero_totals,
        help="Leave players without any point out of the rankings",
    )
    parser.add_argument(
        "--weekly-summary",
        action="store_true",
        help="Also summarize weekly_matches.json (requires divisions.json)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress detailed output",
    )

    args = parser.parse_args()

    setup_logging(
        log_dir=Path("logs"),
        level=logging.WARNING if args.quiet else logging.INFO,
    )

    data_dir = Path(args.data_dir)
    matches_path = data_dir / "matches.json"
    config_path = data_dir / "top_config.json"
    clubs_path = data_dir / "clubs.json"
    output_dir = Path(args.output) if args.output else Path("output") / f"week_{args.week}"

    for path in (matches_path, config_path):
        if not path.exists():
            print(f"❌ File not found: {path}")
            sys.exit(1)

    try:
        config = load_config(config_path)
        matches = load_json(matches_path, schema=MatchesFile).to_models()
        clubs_file = load_json_safe(clubs_path, schema=ClubsFile)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(1)

    clubs = clubs_file.to_models() if clubs_file else {}

    print(f"Computing tops for week {args.week} ({len(matches)} matches)...")
    run = run_top(
        matches,
        config,
        args.week,
        clubs=clubs,
        exclude_zero_totals=args.exclude_zero,
    )

    if not args.quiet:
        print_tops(run, args.limit)
        print_comparison(run)

    save_json(output_dir / "rankings.json", build_ranking_documents(run))
    if settings.write_full_debug:
        write_debug_files(run, output_dir, args.limit)

    if args.weekly_summary:
        weekly = load_json_safe(data_dir / "weekly_matches.json", schema=WeeklyMatchesFile)
        divisions = load_json_safe(data_dir / "divisions.json", schema=DivisionsFile)
        if weekly is None or divisions is None:
            print("⚠️  weekly_matches.json or divisions.json missing, no weekly summary")
        else:
            summary = summarize_weekly_matches(
                weekly.to_models(), divisions.to_models(), run.collector, config.all_regions
            )
            save_json(output_dir / "weekly_summary.json", summary_to_dict(summary))

    diagnostics = run.all_errors_and_warnings()
    if diagnostics:
        print(f"\n⚠️  {len(run.collector.errors)} errors, {len(run.collector.warnings)} warnings:")
        for message in diagnostics:
            print(f"   - {message}")

    print(f"\nResults saved to {output_dir}")


if __name__ == "__main__":
    main()
