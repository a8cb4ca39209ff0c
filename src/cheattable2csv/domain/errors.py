from __future__ import annotations

"""
Conversion Error Hierarchy.

Known failure kinds raised by the conversion core and its collaborators.
None of them is caught inside the pipeline: they travel to the interface
layer, which reports them once and aborts the run before any export is
written.
"""

from typing import Optional


class CheatTableError(Exception):
    """Base class for every known conversion failure."""


class DecodeError(CheatTableError):
    """The source markup could not be decoded into a cheat table tree."""


class MalformedTreeError(CheatTableError):
    """
    An entry declares nested children but the child list is missing.

    Attributes:
        entry_id: Identifier of the parent entry holding the empty wrapper.
    """

    def __init__(self, entry_id: str, message: Optional[str] = None):
        self.entry_id = entry_id
        super().__init__(
            message
            or f"No CheatEntry found in nested CheatEntries of entry '{entry_id}'. "
               f"Please check the cheat table file."
        )


class InvalidHexTermError(CheatTableError):
    """
    A term of an address expression is not a valid hexadecimal number.

    Attributes:
        term: The offending term, as it appeared after splitting.
        expression: The full address expression being evaluated.
    """

    def __init__(self, term: str, expression: str):
        self.term = term
        self.expression = expression
        super().__init__(f"Invalid hexadecimal value: '{term}' in address '{expression}'")
