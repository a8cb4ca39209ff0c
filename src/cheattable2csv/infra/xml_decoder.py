from __future__ import annotations

"""
Cheat Table XML Decoder.

Turns the markup of a Cheat Engine table into the typed CheatEntry tree.
Parsing goes through defusedxml so that entity-expansion payloads hidden in
shared tables are rejected instead of expanded.
"""

import logging
from typing import List, Optional
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as element_tree

from cheattable2csv.domain.errors import DecodeError
from cheattable2csv.domain.models import CheatEntry

logger = logging.getLogger(__name__)

ROOT_TAG = "CheatTable"
ENTRIES_TAG = "CheatEntries"
ENTRY_TAG = "CheatEntry"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode_cheat_table(xml_text: str) -> List[CheatEntry]:
    """
    Decode cheat table markup into its top-level entries.

    Args:
        xml_text: Raw XML content of a .CT file.

    Returns:
        List[CheatEntry]: Top-level entries in document order. A table
                          without a <CheatEntries> element yields an empty list.

    Raises:
        DecodeError: If the markup is unparsable, not a cheat table, or holds
                     an entry without an id.
    """
    try:
        root = element_tree.fromstring(xml_text)
    except (ParseError, DefusedXmlException) as e:
        raise DecodeError(f"XML Parsing Error: {e}") from e

    if root.tag != ROOT_TAG:
        raise DecodeError(f"XML Parsing Error: expected <{ROOT_TAG}> root, found <{root.tag}>")

    top = root.find(ENTRIES_TAG)
    if top is None:
        logger.warning("Cheat table holds no <CheatEntries> element.")
        return []

    return [_decode_entry(el) for el in top.findall(ENTRY_TAG)]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _decode_entry(el: Element) -> CheatEntry:
    """Map one <CheatEntry> element, recursing into its nested wrappers."""
    entry_id = (_text(el, "ID") or "").strip()
    if not entry_id:
        raise DecodeError("XML Parsing Error: <CheatEntry> without an <ID>")

    offsets = [
        [o.text or "" for o in group.findall("Offset")]
        for group in el.findall("Offsets")
    ]
    children = [
        [_decode_entry(child) for child in wrapper.findall(ENTRY_TAG)]
        for wrapper in el.findall(ENTRIES_TAG)
    ]

    return CheatEntry(
        id=entry_id,
        description=_text(el, "Description") or "",
        variable_type=_text(el, "VariableType"),
        address=_text(el, "Address"),
        offsets=offsets or None,
        children=children or None,
        show_as_signed=_text(el, "ShowAsSigned"),
    )


def _text(el: Element, tag: str) -> Optional[str]:
    """Return the text of a direct child, '' for an empty one, None if absent."""
    child = el.find(tag)
    if child is None:
        return None
    return child.text or ""
