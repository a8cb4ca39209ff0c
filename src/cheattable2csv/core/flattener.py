from __future__ import annotations

"""
Cheat Entry Flattener.

Walks the nested cheat entry tree depth-first and produces the flat row
sequence used by the export. Every immediate child is emitted twice: once
under its composed 'parent + child' label and once as the subject of the
next recursion level. The deduplication pass keeps the first (composed) row.
"""

import logging
from typing import List

from cheattable2csv.core.hexadecimal import evaluate_address
from cheattable2csv.core.offsets import format_offsets
from cheattable2csv.domain.constants import (
    ARROW_MARKER,
    AUTO_ASSEMBLER_TYPE,
    DEFAULT_MAX_DEPTH,
    NOT_AVAILABLE,
)
from cheattable2csv.domain.errors import MalformedTreeError
from cheattable2csv.domain.models import CheatEntry, FlatEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten_entries(
        entries: List[CheatEntry],
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[FlatEntry]:
    """
    Flatten a list of cheat entries into ordered export rows.

    Output order is depth-first, parents before their children, siblings in
    source order. Entries at or below 'max_depth' are emitted but their
    children are not descended into.

    Args:
        entries: Top-level entries to flatten.
        depth: Nesting level of 'entries'.
        max_depth: Deepest level whose children are still expanded.

    Returns:
        List[FlatEntry]: Flat rows, possibly holding repeated ids.

    Raises:
        MalformedTreeError: If an entry declares children without a child list.
        InvalidHexTermError: If an address expression is not valid hexadecimal.
    """
    out: List[FlatEntry] = []
    _flatten_into(out, entries, depth, max_depth)
    return out


def strip_surrounding_quotes(text: str) -> str:
    """Remove one literal double quote at the start and one at the end."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def remove_arrow_markers(text: str) -> str:
    """Remove every '->' marker from a label."""
    return text.replace(ARROW_MARKER, "")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _flatten_into(
        out: List[FlatEntry],
        entries: List[CheatEntry],
        depth: int,
        max_depth: int,
) -> None:
    """Append the rows for 'entries' and their expanded descendants to 'out'."""
    for entry in entries:
        parent_label = remove_arrow_markers(strip_surrounding_quotes(entry.description))
        out.append(_to_flat(entry, parent_label))

        if not entry.children or depth >= max_depth:
            continue

        nested = entry.children[0]
        if not nested:
            raise MalformedTreeError(entry.id)

        for child in nested:
            if child.variable_type == AUTO_ASSEMBLER_TYPE:
                logger.debug(f"Skipping script entry {child.id} under {entry.id}")
                continue

            out.append(_to_flat(child, parent_label + strip_surrounding_quotes(child.description)))
            _flatten_into(out, [child], depth + 1, max_depth)


def _to_flat(entry: CheatEntry, description: str) -> FlatEntry:
    return FlatEntry(
        id=entry.id,
        description=description,
        variable_type=entry.variable_type or NOT_AVAILABLE,
        address=entry.address or NOT_AVAILABLE,
        sum_address=evaluate_address(entry.address),
        offsets=format_offsets(entry.offsets),
    )
