from __future__ import annotations

"""
Address Expression Evaluator.

Resolves the address field of a cheat entry, a chain of signed hexadecimal
terms such as '1A2B+10-4', into one normalized hexadecimal value. Both the
single-term and the multi-term forms validate every term strictly.
"""

import re
from typing import List, Optional

from cheattable2csv.domain.constants import HEX_PREFIX, NOT_AVAILABLE
from cheattable2csv.domain.errors import InvalidHexTermError

_TERM_SPLIT_RX = re.compile(r"(?=[+-])")
_HEX_DIGITS_RX = re.compile(r"^[0-9A-Fa-f]+$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def evaluate_address(expr: Optional[str]) -> str:
    """
    Evaluate an address expression into a '0x'-prefixed uppercase hex string.

    A lone term has its leading sign stripped rather than applied, so '-1A'
    yields '0x1A'. With several terms each sign is applied to a running
    total; a negative total is rendered as '-0x' plus its magnitude.

    Args:
        expr: Raw address expression. May be None or empty.

    Returns:
        str: The normalized hexadecimal value, or 'N/A' for an absent address.

    Raises:
        InvalidHexTermError: If any term holds non-hexadecimal characters.
    """
    if not expr or not expr.strip():
        return NOT_AVAILABLE

    terms = split_terms(expr)

    if len(terms) == 1:
        single = terms[0].strip()
        digits = single[1:].strip() if single[:1] in ("+", "-") else single
        return _format_hex(_parse_hex(digits, single, expr))

    total = 0
    for term in terms:
        trimmed = term.strip()
        if trimmed[:1] in ("+", "-"):
            sign, digits = trimmed[0], trimmed[1:].strip()
        else:
            sign, digits = "+", trimmed

        value = _parse_hex(digits, trimmed, expr)
        total += value if sign == "+" else -value

    return _format_hex(total)


def split_terms(expr: str) -> List[str]:
    """
    Split an expression immediately before every '+' or '-' sign.

    The first term may carry no sign. Empty fragments produced by a
    leading sign are discarded.
    """
    return [t for t in _TERM_SPLIT_RX.split(expr) if t]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_hex(digits: str, term: str, expr: str) -> int:
    """Convert strictly hexadecimal digits to an integer."""
    if not _HEX_DIGITS_RX.match(digits):
        raise InvalidHexTermError(term, expr)
    return int(digits, 16)


def _format_hex(value: int) -> str:
    if value < 0:
        return f"-{HEX_PREFIX}{-value:X}"
    return f"{HEX_PREFIX}{value:X}"
