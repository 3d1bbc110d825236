"""
Snapshot Storage

Reads and writes the persisted snapshot, a JSON array of records:

    [
      {"position": 1, "oldPosition": -1, "name": "Alice", "wins": 120, "oldWins": null},
      ...
    ]

A missing or unreadable file is not fatal. It is replaced with an empty
array and the run continues as if no previous snapshot existed.
"""

import json
from collections.abc import Sequence
from pathlib import Path

from mario_leaderboard.config import DATA_FILE, JSON_INDENT
from mario_leaderboard.models import RankingRecord
from mario_leaderboard.utils import SnapshotError, atomic_write_json, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def _reset_snapshot_file(path: Path) -> None:
    """Create the storage folder and an empty snapshot file."""
    logger.info(f"Attempting to create new snapshot file at {path}...")
    try:
        atomic_write_json([], path, indent=JSON_INDENT)
    except OSError as e:
        logger.warning(f"Could not create {path}: {e}")
        return
    logger.info("Created!")


def load_snapshot(path: Path = DATA_FILE) -> list[RankingRecord]:
    """
    Load the persisted snapshot.

    Args:
        path: Snapshot JSON file

    Returns:
        Records ordered by position; empty list if the file was missing or corrupt
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        records = [RankingRecord.from_dict(item) for item in data]
    except FileNotFoundError:
        logger.warning(f"Failed to open snapshot file: {path} does not exist")
        _reset_snapshot_file(path)
        return []
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Failed to read snapshot file {path}: {e}")
        _reset_snapshot_file(path)
        return []

    records.sort(key=lambda r: r.position)
    logger.debug(f"Loaded {len(records)} records from {path}")
    return records


def save_snapshot(records: Sequence[RankingRecord], path: Path = DATA_FILE) -> Path:
    """
    Persist a snapshot, replacing the previous file.

    Args:
        records: Snapshot records
        path: Destination JSON file

    Returns:
        Path written

    Raises:
        SnapshotError: If the file cannot be written
    """
    try:
        atomic_write_json([r.to_dict() for r in records], path, indent=JSON_INDENT)
    except OSError as e:
        raise SnapshotError(f"Could not save snapshot to {path}: {e}") from e

    logger.info(f"Saved {len(records)} records to {path}")
    return path
