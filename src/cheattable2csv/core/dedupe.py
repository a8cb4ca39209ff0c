from __future__ import annotations

"""
Flat Row Deduplication.

Collapses the repeated ids produced by the flattening pass, keeping the
first occurrence of each id in its original position.
"""

import logging
from typing import List, Set

from cheattable2csv.domain.models import FlatEntry

logger = logging.getLogger(__name__)


def dedupe_entries(rows: List[FlatEntry]) -> List[FlatEntry]:
    """
    Return the rows whose id has not been seen earlier in the sequence.

    Args:
        rows: Flat rows in output order.

    Returns:
        List[FlatEntry]: First occurrence of every id, order preserved.
    """
    seen: Set[str] = set()
    unique: List[FlatEntry] = []

    for row in rows:
        if row.id in seen:
            continue
        seen.add(row.id)
        unique.append(row)

    logger.info(f"Unique entries retained: {len(unique)}")
    return unique
