"""
Snapshot Matcher

Correlates new records with the previous snapshot by display name.
The page exposes no stable creator ID, so name equality is the only link
between runs. When the previous snapshot lists a name more than once, the
first occurrence wins.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from mario_leaderboard.config import NEW_ENTRANT
from mario_leaderboard.models import RankingRecord
from mario_leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def index_by_name(records: Iterable[RankingRecord]) -> dict[str, RankingRecord]:
    """
    Map each name to its first record in snapshot order.

    Args:
        records: Snapshot records

    Returns:
        Dictionary of name -> first matching record
    """
    first: dict[str, RankingRecord] = {}
    for record in records:
        if record.name in first:
            logger.debug(
                f"Duplicate name {record.name!r} at position {record.position}; "
                f"keeping position {first[record.name].position}"
            )
            continue
        first[record.name] = record
    return first


def match_previous(
    entries: Sequence[RankingRecord],
    previous: Sequence[RankingRecord],
) -> list[RankingRecord]:
    """
    Return new records carrying the matched previous rank and wins.

    Prior records are not consumed: one previous record can match several
    new ones.

    Args:
        entries: Freshly extracted records
        previous: Last persisted snapshot

    Returns:
        New list of records with previous_position/previous_score set
    """
    lookup = index_by_name(previous)
    matched = []

    for entry in entries:
        prior = lookup.get(entry.name)
        if prior is None:
            matched.append(replace(entry, previous_position=NEW_ENTRANT, previous_score=None))
        else:
            matched.append(replace(entry, previous_position=prior.position, previous_score=prior.score))

    new_count = sum(1 for record in matched if record.is_new)
    logger.debug(f"Matched {len(matched) - new_count} of {len(matched)} entries ({new_count} new)")
    return matched
