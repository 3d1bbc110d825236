"""
Tests for shared utilities.
"""

import json

import pytest

from mario_leaderboard.utils import atomic_write_json, validate_count, validate_input_size


class TestAtomicWriteJson:
    """Tests for atomic_write_json."""

    def test_writes_and_creates_folder(self, tmp_path):
        target = tmp_path / "data" / "out.json"

        atomic_write_json([{"a": 1}], target)

        assert json.loads(target.read_text(encoding="utf-8")) == [{"a": 1}]

    def test_failed_dump_leaves_no_temp_file(self, tmp_path):
        target = tmp_path / "data" / "out.json"

        with pytest.raises(TypeError):
            atomic_write_json([object()], target)

        assert list(target.parent.iterdir()) == []

    def test_failed_dump_keeps_existing_file(self, tmp_path):
        target = tmp_path / "out.json"
        target.write_text("[]", encoding="utf-8")

        with pytest.raises(TypeError):
            atomic_write_json({"bad": {1, 2}}, target)

        assert target.read_text(encoding="utf-8") == "[]"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


class TestValidation:
    """Tests for validate_count and validate_input_size."""

    @pytest.mark.parametrize("count", [1, 10, 500])
    def test_valid_counts(self, count):
        validate_count(count)

    @pytest.mark.parametrize("count", [0, -1, True, "10"])
    def test_invalid_counts(self, count):
        with pytest.raises(ValueError):
            validate_count(count)

    def test_input_too_large(self):
        with pytest.raises(ValueError):
            validate_input_size("x" * 11, 10)
