"""
Shared utilities for the 100 Mario leaderboard tracker.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path


class LeaderboardError(Exception):
    """Base exception for leaderboard tracker errors"""
    pass


class SnapshotError(LeaderboardError):
    """Raised when a snapshot cannot be written"""
    pass


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_package_log_level(package: str, level: int) -> None:
    """Apply a level to every logger already created under a package."""
    for name in list(logging.root.manager.loggerDict):
        if name == package or name.startswith(f"{package}."):
            logging.getLogger(name).setLevel(level)


# --- File Operations ---
def atomic_write_json(data, path: Path, indent: int = 2) -> None:
    """
    Write JSON-serializable data to a file atomically using a temporary file.

    This prevents a half-written snapshot if the write is interrupted.

    Args:
        data: Object to serialize (lists and dicts of plain values)
        path: Destination path for the JSON file
        indent: Indentation passed to json.dump
    """
    logger = setup_logging(__name__)

    if path.is_dir():
        raise IsADirectoryError(f"Cannot write JSON over directory {path}")

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file first
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix='.json',
            encoding='utf-8',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp_path = Path(tmp.name)
            json.dump(data, tmp, indent=indent, ensure_ascii=False)

        # Atomic move (rename) to final destination
        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {path}")

    except Exception:
        # Clean up temp file if it exists
        if 'tmp_path' in locals() and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_count(count: int) -> None:
    """
    Validate that a display row count is usable.

    Args:
        count: Number of rows requested

    Raises:
        ValueError: If count is not a positive integer
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"Invalid row count: {count!r}. Must be a positive integer")


def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in characters

    Raises:
        ValueError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} characters. "
            f"Maximum allowed: {max_size:,} characters"
        )


__all__ = [
    # Errors
    'LeaderboardError',
    'SnapshotError',
    # Logging
    'setup_logging',
    'set_package_log_level',
    # File operations
    'atomic_write_json',
    # Validation
    'validate_count',
    'validate_input_size',
]
