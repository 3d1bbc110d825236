"""
Rank and wins change markers.

Turns a matched record into the strings shown in the table: an arrow for
rank movement and the number of clears gained since the last snapshot.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from mario_leaderboard.config import NEW_ENTRANT
from mario_leaderboard.display.colors import ANSI_PALETTE, Palette
from mario_leaderboard.models import RankingRecord

GLYPH_NEW = "+"
GLYPH_UP = "↑"
GLYPH_DOWN = "↓"


@dataclass(frozen=True)
class PresentationRow:
    """One table row, every field already formatted as text."""
    position: str
    position_change: str
    name: str
    wins: str
    wins_change: str


def position_change(
    position: int,
    previous_position: int,
    has_history: bool = True,
    palette: Palette = ANSI_PALETTE,
) -> str:
    """
    Marker for rank movement since the last snapshot.

    Args:
        position: Current rank
        previous_position: Rank in the last snapshot, or NEW_ENTRANT
        has_history: False when there was no previous snapshot at all
        palette: Formatters for the markers

    Returns:
        "" (no history or unchanged), "+" (new), "↓" (dropped) or "↑" (climbed)
    """
    if not has_history:
        return ""

    if previous_position == NEW_ENTRANT:
        return palette.new(GLYPH_NEW)

    # Larger position number = worse rank
    if position > previous_position:
        return palette.down(GLYPH_DOWN)

    if position < previous_position:
        return palette.up(GLYPH_UP)

    return ""


def score_change(score: int | None, previous_score: int | None) -> str:
    """
    Number of wins gained since the last snapshot.

    Decreases are not shown.

    Returns:
        Decimal string of score - previous_score if it increased, otherwise ""
    """
    if score is None or previous_score is None:
        return ""

    if score > previous_score:
        return str(score - previous_score)

    return ""


def build_rows(
    records: Sequence[RankingRecord],
    has_history: bool = True,
    palette: Palette = ANSI_PALETTE,
) -> list[PresentationRow]:
    """Format matched records for render_table. Unreadable wins show as blank."""
    return [
        PresentationRow(
            position=str(record.position),
            position_change=position_change(
                record.position, record.previous_position, has_history, palette
            ),
            name=record.name,
            wins="" if record.score is None else str(record.score),
            wins_change=score_change(record.score, record.previous_score),
        )
        for record in records
    ]
