"""
Leaderboard table rendering.

Produces fixed-width columns with a header row:

    POS   NAME  WINS +
      1 ↑ Alice  120 3
      2 ↓ Bob     45

Cells are parsed back from their escape codes into rich Text, so colored
cells line up with plain ones.
"""

import io
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mario_leaderboard.config import DEFAULT_COUNT
from mario_leaderboard.display.colors import Formatter, blue
from mario_leaderboard.display.delta import PresentationRow

# (row attribute, header label, alignment)
COLUMNS = (
    ("position", "POS", "right"),
    ("position_change", "", "left"),
    ("name", "NAME", "left"),
    ("wins", "WINS", "right"),
    ("wins_change", "+", "right"),
)
CONSOLE_WIDTH = 1000  # Wide enough that rich never wraps or shrinks a column


def _cell(value: str) -> Text:
    text = Text.from_ansi(value)
    # Tabs would otherwise measure as zero cells
    text.expand_tabs()
    return text


def render_table(
    rows: Sequence[PresentationRow],
    count: int = DEFAULT_COUNT,
    highlight: str | None = None,
    marker: Formatter = blue,
) -> str:
    """
    Render the first rows of the leaderboard as aligned text.

    Args:
        rows: Presentation rows in display order (not re-sorted)
        count: Maximum number of rows to show
        highlight: Creator name to mark, compared case-insensitively
        marker: Formatter applied to every field of the highlighted row

    Returns:
        Header line followed by one line per shown row, joined by newlines
    """
    target = highlight.lower() if highlight else None

    table = Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        padding=(0, 1, 0, 0),
        header_style="",
    )
    for _, label, align in COLUMNS:
        table.add_column(label, justify=align, no_wrap=True)

    for row in rows[:max(count, 0)]:
        values = [getattr(row, attr) for attr, _, _ in COLUMNS]
        if target is not None and row.name.lower() == target:
            values = [marker(value) for value in values]
        table.add_row(*(_cell(value) for value in values))

    console = Console(
        file=io.StringIO(),
        width=CONSOLE_WIDTH,
        force_terminal=True,
        color_system="standard",
        highlight=False,
        legacy_windows=False,
    )
    console.print(table)

    lines = console.file.getvalue().splitlines()
    return "\n".join(line.rstrip() for line in lines)
