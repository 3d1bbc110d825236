"""
Tests for snapshot change detection and sanity checks.
"""

from mario_leaderboard.models import RankingRecord
from mario_leaderboard.snapshot.changes import (
    diff_positions,
    has_changed,
    run_sanity_checks,
    snapshot_to_frame,
    summarize_changes,
)


def snapshot(*entries):
    return [RankingRecord(position=i + 1, name=name, score=score) for i, (name, score) in enumerate(entries)]


class TestHasChanged:
    """Tests for has_changed."""

    def test_identical_snapshots(self):
        old = snapshot(("Alice", 120), ("Bob", 45))
        assert has_changed(snapshot(("Alice", 120), ("Bob", 45)), old) is False

    def test_score_change(self):
        old = snapshot(("Alice", 120), ("Bob", 45))
        assert has_changed(snapshot(("Alice", 120), ("Bob", 50)), old) is True

    def test_swapped_names(self):
        old = snapshot(("Alice", 100), ("Bob", 100))
        assert has_changed(snapshot(("Bob", 100), ("Alice", 100)), old) is True

    def test_empty_old_snapshot(self):
        assert has_changed(snapshot(("Alice", 120)), []) is True

    def test_position_missing_from_old(self):
        old = snapshot(("Alice", 120))
        assert has_changed(snapshot(("Alice", 120), ("Bob", 45)), old) is True

    def test_shorter_new_snapshot_unchanged(self):
        old = snapshot(("Alice", 120), ("Bob", 45))
        assert has_changed(snapshot(("Alice", 120)), old) is False

    def test_empty_new_snapshot(self):
        assert has_changed([], snapshot(("Alice", 120))) is False
        assert has_changed([], []) is False

    def test_unset_scores_compare_equal(self):
        old = snapshot(("Alice", None))
        assert has_changed(snapshot(("Alice", None)), old) is False

    def test_unset_against_set_score(self):
        old = snapshot(("Alice", 3))
        assert has_changed(snapshot(("Alice", None)), old) is True

    def test_ignores_previous_fields(self):
        old = [RankingRecord(1, "Alice", 120, previous_position=4, previous_score=100)]
        new = [RankingRecord(1, "Alice", 120, previous_position=1, previous_score=120)]
        assert has_changed(new, old) is False


class TestDiffPositions:
    """Tests for diff_positions and summarize_changes."""

    def test_lists_only_changed_positions(self):
        old = snapshot(("Alice", 120), ("Bob", 45), ("Cara", 10))
        new = snapshot(("Alice", 120), ("Bob", 50), ("Cara", 10), ("Dan", 2))

        diff = diff_positions(new, old)

        assert diff['position'].tolist() == [2, 4]
        assert diff.loc[0, 'score'] == 50
        assert diff.loc[0, 'score_old'] == 45

    def test_summary_counts(self):
        old = snapshot(("Alice", 120))
        new = snapshot(("Alice", 121), ("Bob", 45))

        summary = summarize_changes(diff_positions(new, old))

        assert summary == {'changed_count': 2, 'new_positions': 1}

    def test_no_changes_is_empty(self):
        old = snapshot(("Alice", 120))
        assert diff_positions(snapshot(("Alice", 120)), old).empty


class TestSnapshotToFrame:
    """Tests for snapshot_to_frame."""

    def test_empty_snapshot_has_columns(self):
        df = snapshot_to_frame([])
        assert list(df.columns) == ['position', 'name', 'score', 'previous_position', 'previous_score']
        assert df.empty

    def test_unset_score_is_na(self):
        df = snapshot_to_frame(snapshot(("Alice", None), ("Bob", 4)))
        assert df['score'].isna().tolist() == [True, False]
        assert str(df['score'].dtype) == 'Int64'


class TestRunSanityChecks:
    """Tests for run_sanity_checks."""

    def test_valid_snapshot(self):
        assert run_sanity_checks(snapshot(("Alice", 120), ("Bob", 45))) is True

    def test_empty_snapshot(self):
        assert run_sanity_checks([]) is False

    def test_gap_in_positions(self):
        records = [RankingRecord(1, "Alice", 120), RankingRecord(3, "Bob", 45)]
        assert run_sanity_checks(records) is False

    def test_duplicate_positions(self):
        records = [RankingRecord(1, "Alice", 120), RankingRecord(1, "Bob", 45)]
        assert run_sanity_checks(records) is False

    def test_unreadable_score(self):
        assert run_sanity_checks(snapshot(("Alice", None))) is False

    def test_duplicate_names(self):
        assert run_sanity_checks(snapshot(("Sam", 9), ("Sam", 8))) is False
