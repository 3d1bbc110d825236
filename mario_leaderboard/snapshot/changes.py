"""
Snapshot Change Detection

Decides whether a freshly extracted ranking differs from the saved one.
Records are compared position by position: the saved snapshot is only
replaced when some rank shows a different creator or a different clear
count. Also provides sanity checks for a snapshot before it is persisted.
"""

from collections.abc import Sequence

import pandas as pd

from mario_leaderboard.models import RankingRecord
from mario_leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

DIFF_COLUMNS = ["position", "name", "score", "name_old", "score_old"]


def snapshot_to_frame(records: Sequence[RankingRecord]) -> pd.DataFrame:
    """
    Build a DataFrame from snapshot records.

    Scores use the nullable Int64 dtype so unset wins stay <NA>
    instead of turning the column into floats.

    Args:
        records: Snapshot records

    Returns:
        DataFrame with columns: position, name, score, previous_position, previous_score
    """
    return pd.DataFrame({
        'position': pd.Series([r.position for r in records], dtype='int64'),
        'name': pd.Series([r.name for r in records], dtype='object'),
        'score': pd.Series([r.score for r in records], dtype='Int64'),
        'previous_position': pd.Series([r.previous_position for r in records], dtype='int64'),
        'previous_score': pd.Series([r.previous_score for r in records], dtype='Int64'),
    })


def diff_positions(
    new: Sequence[RankingRecord],
    old: Sequence[RankingRecord],
) -> pd.DataFrame:
    """
    List the positions whose creator or wins differ from the old snapshot.

    A position missing from the old snapshot always counts as different.

    Args:
        new: Snapshot from this run
        old: Previously persisted snapshot (may be empty)

    Returns:
        DataFrame with columns: position, name, score, name_old, score_old
        (one row per differing position, empty if nothing changed)
    """
    new_df = snapshot_to_frame(new)[['position', 'name', 'score']]
    old_df = (
        snapshot_to_frame(old)[['position', 'name', 'score']]
        .drop_duplicates(subset='position', keep='first')
    )

    merged = new_df.merge(
        old_df, on='position', how='left', suffixes=('', '_old'), indicator=True
    )

    missing = merged['_merge'] == 'left_only'
    name_changed = merged['name'] != merged['name_old']
    same_score = (
        merged['score'].eq(merged['score_old']).fillna(False).astype(bool)
        | (merged['score'].isna() & merged['score_old'].isna())
    )

    changed = missing | name_changed | ~same_score
    return merged.loc[changed, DIFF_COLUMNS].reset_index(drop=True)


def has_changed(new: Sequence[RankingRecord], old: Sequence[RankingRecord]) -> bool:
    """
    Check whether the new snapshot should replace the old one.

    Args:
        new: Snapshot from this run
        old: Previously persisted snapshot

    Returns:
        True if any position's (name, score) differs or is absent from old
    """
    return not diff_positions(new, old).empty


def summarize_changes(diff: pd.DataFrame) -> dict[str, int]:
    """Summarize a diff_positions result into counts for logging."""
    return {
        'changed_count': len(diff),
        'new_positions': int(diff['name_old'].isna().sum()),
    }


def run_sanity_checks(records: Sequence[RankingRecord], label: str = "Snapshot") -> bool:
    """
    Run validation checks on a snapshot.

    Args:
        records: Snapshot records
        label: Label for log messages

    Returns:
        True if all checks pass, False otherwise
    """
    df = snapshot_to_frame(records)
    issues = []

    if df.empty:
        issues.append("No entries")
    else:
        # Positions must be exactly 1..K
        dup_positions = df[df['position'].duplicated()]['position'].unique()
        if len(dup_positions) > 0:
            issues.append(f"Duplicate positions found: {list(dup_positions)}")

        expected = set(range(1, len(df) + 1))
        actual = set(df['position'].tolist())
        if actual != expected:
            issues.append(
                f"Position range is {df['position'].min()}-{df['position'].max()}, "
                f"expected 1-{len(df)}"
            )

        negative = df[(df['score'] < 0).fillna(False)]
        if not negative.empty:
            issues.append(f"Found {len(negative)} rows with negative wins")

        unset = int(df['score'].isna().sum())
        if unset:
            issues.append(f"Found {unset} rows with unreadable wins")

        dup_names = df[df['name'].duplicated()]['name'].unique()
        if len(dup_names) > 0:
            issues.append(f"Duplicate names found: {list(dup_names)}")

    if issues:
        logger.warning(f"Sanity Check Warnings ({label}):")
        for issue in issues[:10]:
            logger.warning(f"  - {issue}")
        if len(issues) > 10:
            logger.warning(f"  ... and {len(issues) - 10} more issues")
        return False

    logger.debug(f"Sanity Check Passed ({label})")
    return True
