"""
Ranking Page Extractor

Turns the creator ranking page into an ordered list of RankingRecords.

The page does not print a creator's clear count as text. Each digit is a
separate `.typography` element whose class carries the digit as a suffix,
e.g. `<span class="typography typography-7">`:

    <div class="creator-card">
      <div class="creator-info"><div class="name">Alice</div></div>
      <div class="mario100-point">
        <span class="typography typography-1"></span>
        <span class="typography typography-2"></span>
        <span class="typography typography-0"></span>
      </div>
    </div>

encodes Alice with 120 wins.
"""

from collections.abc import Sequence

from bs4 import BeautifulSoup

from mario_leaderboard.config import (
    CARD_SELECTOR,
    DIGIT_SELECTOR,
    NAME_SELECTOR,
    RANKING_SELECTOR,
)
from mario_leaderboard.models import RankingRecord
from mario_leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Class token suffix -> decimal digit
DIGIT_SUFFIXES = {
    "0": 0,
    "1": 1,
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
}


def digits_from_class_tokens(tokens: Sequence[str]) -> int | None:
    """
    Decode a score from the digit-bearing class tokens of one card.

    Each token contributes the text after its last hyphen, looked up in
    DIGIT_SUFFIXES. Tokens are read in the order given.

    Args:
        tokens: Ordered class tokens, one per digit element (e.g. ["typography-4", "typography-5"])

    Returns:
        The decoded integer, or None if there are no tokens or any suffix is not a digit
    """
    if not tokens:
        return None

    score = 0
    for token in tokens:
        _, hyphen, suffix = token.rpartition("-")
        if not hyphen or suffix not in DIGIT_SUFFIXES:
            return None
        score = score * 10 + DIGIT_SUFFIXES[suffix]

    return score


def _digit_token(classes: Sequence[str]) -> str:
    """Pick the digit-bearing class token of one element.

    Prefers the last token with a digit suffix; falls back to the last
    hyphenated token so an unknown suffix still makes the score unset.
    """
    hyphenated = [c for c in classes if "-" in c]
    with_digit = [c for c in hyphenated if c.rpartition("-")[2] in DIGIT_SUFFIXES]
    candidates = with_digit or hyphenated
    return candidates[-1] if candidates else ""


def parse_card(card, position: int) -> RankingRecord:
    """
    Extract one creator card.

    Args:
        card: BeautifulSoup Tag for a `.creator-card`
        position: 1-based rank assigned from document order

    Returns:
        RankingRecord with no previous-snapshot data
    """
    # Exact text, whitespace included
    name = "".join(el.get_text() for el in card.select(NAME_SELECTOR))

    tokens = [_digit_token(el.get("class", [])) for el in card.select(DIGIT_SELECTOR)]
    score = digits_from_class_tokens(tokens)
    if score is None:
        logger.warning(f"Could not read wins for position {position} ({name!r}): tokens={tokens}")

    return RankingRecord(position=position, name=name, score=score)


def extract_entries(html: str | None) -> list[RankingRecord]:
    """
    Parse the ranking page into records ordered by position.

    Args:
        html: Page markup; None or "" yields an empty list

    Returns:
        One RankingRecord per creator card, positions 1..K in document order
    """
    if not html:
        logger.warning("No leaderboard markup to parse")
        return []

    soup = BeautifulSoup(html, "html.parser")
    cards = soup.select(f"{RANKING_SELECTOR} {CARD_SELECTOR}")

    entries = [parse_card(card, index + 1) for index, card in enumerate(cards)]
    logger.debug(f"Extracted {len(entries)} creator cards")
    return entries
