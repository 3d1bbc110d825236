"""
Central configuration for the 100 Mario leaderboard tracker.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Source Page ---
LEADERBOARD_URL = (
    "https://supermariomakerbookmark.nintendo.net/creators?type=mario_100_super_expert"
)
REQUEST_TIMEOUT = 15  # Seconds before the page fetch is abandoned
REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/123.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}
MAX_HTML_SIZE = 5_000_000  # Maximum page size in characters (~5MB)

# --- Page Structure (CSS selectors) ---
RANKING_SELECTOR = ".creator-ranking"
CARD_SELECTOR = ".creator-card"
NAME_SELECTOR = ".creator-info .name"
DIGIT_SELECTOR = ".mario100-point .typography"

# --- Snapshot Storage ---
# Relative to the working directory
DATA_FOLDER = Path(".") / "data"
DATA_FILE = DATA_FOLDER / "leaderboard.json"
JSON_INDENT = 2

# --- Ranking Records ---
NEW_ENTRANT = -1  # previous_position of an entrant absent from the last snapshot

# --- Display ---
DEFAULT_COUNT = 10  # Rows shown when --count is not given
