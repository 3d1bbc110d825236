"""Data models for the leaderboard tracker."""

from __future__ import annotations

from dataclasses import dataclass

from mario_leaderboard.config import NEW_ENTRANT


@dataclass(frozen=True)
class RankingRecord:
    """One entrant's state at a point in time."""
    position: int                          # 1-based rank within the snapshot
    name: str                              # Display name, the only identity across runs
    score: int | None                      # Total wins, None when the digits were unreadable
    previous_position: int = NEW_ENTRANT   # Rank in the last snapshot, or NEW_ENTRANT
    previous_score: int | None = None      # Wins in the last snapshot, None if unmatched

    @property
    def is_new(self) -> bool:
        """True when no record in the previous snapshot had this name."""
        return self.previous_position == NEW_ENTRANT

    def to_dict(self) -> dict:
        """Serialize to the persisted JSON shape."""
        return {
            'position': self.position,
            'oldPosition': self.previous_position,
            'name': self.name,
            'wins': self.score,
            'oldWins': self.previous_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RankingRecord:
        """
        Build a record from its persisted JSON shape.

        Raises:
            KeyError: If position or name is missing
            TypeError, ValueError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        old_position = data.get('oldPosition')
        return cls(
            position=int(data['position']),
            name=str(data['name']),
            score=_optional_int(data.get('wins')),
            previous_position=NEW_ENTRANT if old_position is None else int(old_position),
            previous_score=_optional_int(data.get('oldWins')),
        )


def _optional_int(value) -> int | None:
    # json.load accepts NaN literals; treat them as unset
    if value is None:
        return None
    if isinstance(value, float) and value != value:
        return None
    return int(value)
