"""
Leaderboard Page Fetch

Downloads the creator ranking page. Failures never propagate: the caller
gets an empty string and the pipeline produces an empty snapshot.
"""

import requests

from mario_leaderboard.config import (
    LEADERBOARD_URL,
    MAX_HTML_SIZE,
    REQUEST_HEADERS,
    REQUEST_TIMEOUT,
)
from mario_leaderboard.utils import setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)


def fetch_leaderboard_html(
    url: str = LEADERBOARD_URL,
    timeout: float = REQUEST_TIMEOUT,
    session: requests.Session | None = None,
) -> str:
    """
    Fetch the ranking page markup.

    Args:
        url: Page to download
        timeout: Seconds to wait for the server
        session: Optional requests session (a fresh request is made otherwise)

    Returns:
        Page HTML, or "" if the request failed
    """
    client = session or requests
    try:
        response = client.get(url, headers=REQUEST_HEADERS, timeout=timeout)
        response.raise_for_status()
        html = response.text
        validate_input_size(html, MAX_HTML_SIZE)
    except requests.RequestException as e:
        logger.error(f"Failed to load HTML from {url}: {e}")
        return ""
    except ValueError as e:
        logger.error(f"Rejected page from {url}: {e}")
        return ""

    logger.debug(f"Fetched {len(html):,} characters from {url}")
    return html
