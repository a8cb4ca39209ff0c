from __future__ import annotations

"""
Cheat Table Domain Data Models.

Provides the recursive record type decoded from a cheat table and the flat
row type produced by the flattening pass.
"""

from dataclasses import dataclass
from typing import List, Optional

# -----------------------------------------------------------------------------
# SOURCE TREE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CheatEntry:
    """
    One addressable record of the source cheat table.

    Attributes:
        id: Opaque identifier, expected (not guaranteed) to be unique.
        description: Free-text label, possibly quoted and holding '->' markers.
        variable_type: Value type tag; 'Auto Assembler Script' marks script nodes.
        address: Signed hexadecimal arithmetic expression.
        offsets: Offset groups, one per <Offsets> element, in source order.
        children: Child wrappers, one per nested <CheatEntries> element.
            The first wrapper holds the actual child list.
        show_as_signed: Display flag carried over from the source.
    """
    id: str
    description: str = ""
    variable_type: Optional[str] = None
    address: Optional[str] = None
    offsets: Optional[List[List[str]]] = None
    children: Optional[List[List["CheatEntry"]]] = None
    show_as_signed: Optional[str] = None

# -----------------------------------------------------------------------------
# FLAT EXPORT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlatEntry:
    """
    One output row of the flattened cheat table.

    Attributes:
        id: Identifier of the originating record.
        description: Composed display label.
        variable_type: Value type tag or 'N/A'.
        address: Raw address expression or 'N/A'.
        sum_address: Evaluated address expression or 'N/A'.
        offsets: Formatted offset chain ('' when none).
    """
    id: str
    description: str
    variable_type: str
    address: str
    sum_address: str
    offsets: str
