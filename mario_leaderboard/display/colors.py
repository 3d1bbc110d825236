"""
Terminal styling.

Styles are plain `str -> str` callables so the table code never touches
escape codes directly and tests can pass their own markers.
"""

from collections.abc import Callable
from dataclasses import dataclass

from rich.color import ColorSystem
from rich.style import Style

Formatter = Callable[[str], str]


def ansi(style_name: str) -> Formatter:
    """Return a formatter wrapping text in the 16-color escape codes for a rich style."""
    style = Style.parse(style_name)

    def apply(text: str) -> str:
        return style.render(text, color_system=ColorSystem.STANDARD)

    return apply


def plain(text: str) -> str:
    return text


red = ansi("red")
green = ansi("green")
blue = ansi("blue")


@dataclass(frozen=True)
class Palette:
    """Formatters used by the rank markers and the highlighted row."""
    up: Formatter = green
    down: Formatter = red
    new: Formatter = green
    highlight: Formatter = blue


ANSI_PALETTE = Palette()
PLAIN_PALETTE = Palette(up=plain, down=plain, new=plain, highlight=plain)
