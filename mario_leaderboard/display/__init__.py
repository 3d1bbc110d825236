"""
Leaderboard Display

Modules:
- colors: Terminal styling callables
- delta: Rank and wins change markers
- table: Aligned text table
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "build_rows":
        from mario_leaderboard.display.delta import build_rows
        return build_rows
    if name == "render_table":
        from mario_leaderboard.display.table import render_table
        return render_table
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
