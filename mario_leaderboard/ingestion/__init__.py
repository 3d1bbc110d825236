"""
Leaderboard Ingestion

Modules:
- fetch: Download the ranking page
- extractor: Turn ranking page markup into RankingRecords
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "fetch_leaderboard_html":
        from mario_leaderboard.ingestion.fetch import fetch_leaderboard_html
        return fetch_leaderboard_html
    if name == "extract_entries":
        from mario_leaderboard.ingestion.extractor import extract_entries
        return extract_entries
    if name == "digits_from_class_tokens":
        from mario_leaderboard.ingestion.extractor import digits_from_class_tokens
        return digits_from_class_tokens
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
