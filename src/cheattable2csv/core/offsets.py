from __future__ import annotations

"""
Offset Formatter.

Renders the pointer-chain offsets of a cheat entry as one display string.
Offsets are not validated beyond their '0x' prefix.
"""

from typing import List, Optional

from cheattable2csv.domain.constants import HEX_PREFIX, OFFSET_SEPARATOR


def format_offsets(offsets: Optional[List[List[str]]]) -> str:
    """
    Join every offset of every group, in order, with ', '.

    Each offset gets a '0x' prefix unless it already has one.

    Args:
        offsets: Offset groups as decoded from the source, or None.

    Returns:
        str: The formatted chain, or an empty string when there are no offsets.
    """
    if offsets is None:
        return ""

    return OFFSET_SEPARATOR.join(
        _with_prefix(offset)
        for group in offsets
        for offset in group
    )


def _with_prefix(offset: str) -> str:
    if offset.lower().startswith(HEX_PREFIX):
        return offset
    return f"{HEX_PREFIX}{offset}"
