"""
100 Mario Leaderboard CLI

Fetches the Super Expert creator ranking, compares it with the snapshot
saved by the previous run, saves it if it changed, and prints the table.

Usage:
    mario-leaderboard [-n COUNT] [-u USERNAME] [--nosave]
    OR
    python -m mario_leaderboard.cli
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mario_leaderboard.config import DATA_FILE, DEFAULT_COUNT, LEADERBOARD_URL
from mario_leaderboard.display.colors import ANSI_PALETTE, PLAIN_PALETTE, Palette
from mario_leaderboard.display.delta import build_rows
from mario_leaderboard.display.table import render_table
from mario_leaderboard.ingestion.extractor import extract_entries
from mario_leaderboard.ingestion.fetch import fetch_leaderboard_html
from mario_leaderboard.models import RankingRecord
from mario_leaderboard.snapshot.changes import diff_positions, run_sanity_checks, summarize_changes
from mario_leaderboard.snapshot.matcher import match_previous
from mario_leaderboard.snapshot.storage import load_snapshot, save_snapshot
from mario_leaderboard.utils import (
    LeaderboardError,
    set_package_log_level,
    setup_logging,
    validate_count,
)

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass
class RunResult:
    """Outcome of one pipeline run."""
    records: list[RankingRecord]
    changed: bool
    saved: bool
    table: str
    error: LeaderboardError | None = None


def _count_arg(value: str) -> int:
    try:
        count = int(value)
        validate_count(count)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return count


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Show the 100 Mario Super Expert creator ranking and what changed since the last run'
    )
    parser.add_argument('-n', '--count', type=_count_arg, default=DEFAULT_COUNT,
                        help=f'Number of rows to display (default: {DEFAULT_COUNT})')
    parser.add_argument('-u', '--username', default=None,
                        help='Highlight this creator (case-insensitive)')
    parser.add_argument('--nosave', '--no-save', dest='no_save', action='store_true',
                        help='Do not update the saved snapshot')
    parser.add_argument('--data-file', type=Path, default=DATA_FILE,
                        help=f'Snapshot JSON file (default: {DATA_FILE})')
    parser.add_argument('--url', default=LEADERBOARD_URL, help='Ranking page to fetch')
    parser.add_argument('--no-color', action='store_true', help='Disable terminal colors')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def run(
    html: str | None,
    previous: Sequence[RankingRecord],
    count: int = DEFAULT_COUNT,
    highlight: str | None = None,
    no_save: bool = False,
    data_file: Path = DATA_FILE,
    palette: Palette = ANSI_PALETTE,
) -> RunResult:
    """
    Run the extraction, comparison and rendering pipeline.

    Args:
        html: Ranking page markup ("" or None after a failed fetch)
        previous: Snapshot saved by the last run
        count: Rows to display
        highlight: Creator name to highlight
        no_save: Skip persistence even if the ranking changed
        data_file: Where to save the new snapshot
        palette: Formatters for markers and highlight

    Returns:
        RunResult with the matched records, the change/save flags and the table
    """
    entries = extract_entries(html)
    records = match_previous(entries, previous)
    if records:
        run_sanity_checks(records, "Current ranking")

    diff = diff_positions(records, previous)
    changed = not diff.empty
    saved = False
    error = None

    if changed:
        logger.info(f"Ranking changed: {summarize_changes(diff)}")

    if no_save:
        logger.info("Skipping save (--nosave)")
    elif changed:
        try:
            save_snapshot(records, data_file)
            saved = True
        except LeaderboardError as e:
            logger.error(str(e))
            error = e

    rows = build_rows(records, has_history=bool(previous), palette=palette)
    table = render_table(rows, count=count, highlight=highlight, marker=palette.highlight)

    return RunResult(records=records, changed=changed, saved=saved, table=table, error=error)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status (1 if the snapshot could not be saved)
    """
    args = parse_args(argv)
    if args.verbose:
        set_package_log_level('mario_leaderboard', logging.DEBUG)

    html = fetch_leaderboard_html(args.url)
    previous = load_snapshot(args.data_file)

    result = run(
        html,
        previous,
        count=args.count,
        highlight=args.username,
        no_save=args.no_save,
        data_file=args.data_file,
        palette=PLAIN_PALETTE if args.no_color else ANSI_PALETTE,
    )

    print('')
    print(result.table)
    print('')

    return 1 if result.error else 0


if __name__ == "__main__":
    sys.exit(main())
