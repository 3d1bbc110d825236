"""
Snapshot Comparison and Storage

Modules:
- matcher: Attach last-run rank and wins to each new record
- changes: Decide whether a new snapshot supersedes the saved one
- storage: Load and save the persisted snapshot
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "match_previous":
        from mario_leaderboard.snapshot.matcher import match_previous
        return match_previous
    if name == "has_changed":
        from mario_leaderboard.snapshot.changes import has_changed
        return has_changed
    if name == "load_snapshot":
        from mario_leaderboard.snapshot.storage import load_snapshot
        return load_snapshot
    if name == "save_snapshot":
        from mario_leaderboard.snapshot.storage import save_snapshot
        return save_snapshot
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
