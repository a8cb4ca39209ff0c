from __future__ import annotations

"""
Unit tests for the Cheat Entry Flattener.

Verifies:
1. Row construction and field defaulting.
2. Composite child descriptions (quotes stripped, arrows removed from parent).
3. Duplicate emission of immediate children and its collapse by dedupe.
4. Depth limiting, Auto Assembler skipping and malformed wrappers.
5. Depth-first, input-ordered output.
"""

from typing import List, Optional

import pytest

from cheattable2csv.core.dedupe import dedupe_entries
from cheattable2csv.core.flattener import (
    flatten_entries,
    remove_arrow_markers,
    strip_surrounding_quotes,
)
from cheattable2csv.domain.errors import InvalidHexTermError, MalformedTreeError
from cheattable2csv.domain.models import CheatEntry


def _entry(
        entry_id: str,
        description: str = "",
        variable_type: Optional[str] = "4 Bytes",
        address: Optional[str] = None,
        children: Optional[List[CheatEntry]] = None,
        offsets=None,
) -> CheatEntry:
    return CheatEntry(
        id=entry_id,
        description=description,
        variable_type=variable_type,
        address=address,
        offsets=offsets,
        children=[children] if children is not None else None,
    )


def _chain(levels: int) -> CheatEntry:
    """Build a single-branch tree whose entry at depth d has id 'd'."""
    node = _entry(str(levels - 1), f'"L{levels - 1}"')
    for depth in range(levels - 2, -1, -1):
        node = _entry(str(depth), f'"L{depth}"', children=[node])
    return node


# -----------------------------------------------------------------------------
# Text helpers
# -----------------------------------------------------------------------------

def test_strip_surrounding_quotes():
    assert strip_surrounding_quotes('"Health"') == "Health"
    assert strip_surrounding_quotes('Say "hi"') == "Say \"hi"
    assert strip_surrounding_quotes("plain") == "plain"
    assert strip_surrounding_quotes('"') == ""


def test_remove_arrow_markers():
    assert remove_arrow_markers("Player ->") == "Player "
    assert remove_arrow_markers("a->b->c") == "abc"


# -----------------------------------------------------------------------------
# Row construction
# -----------------------------------------------------------------------------

def test_leaf_entry_row_fields():
    entry = _entry("7", '"Gold ->"', address="10+5", offsets=[["4", "0x8"]])

    [row] = flatten_entries([entry])

    assert row.id == "7"
    assert row.description == "Gold "
    assert row.variable_type == "4 Bytes"
    assert row.address == "10+5"
    assert row.sum_address == "0x15"
    assert row.offsets == "0x4, 0x8"


def test_missing_fields_default_to_sentinel():
    [row] = flatten_entries([_entry("1", "x", variable_type=None)])

    assert row.variable_type == "N/A"
    assert row.address == "N/A"
    assert row.sum_address == "N/A"
    assert row.offsets == ""


def test_sibling_order_is_preserved():
    rows = flatten_entries([_entry("A", "a"), _entry("B", "b")])
    assert [r.id for r in rows] == ["A", "B"]


# -----------------------------------------------------------------------------
# Children
# -----------------------------------------------------------------------------

def test_child_is_emitted_with_composed_label_then_recursed():
    child = _entry("2", '"Health"', address="2000", offsets=[["C"]])
    parent = _entry("1", '"Player ->"', children=[child])

    rows = flatten_entries([parent])

    assert [(r.id, r.description) for r in rows] == [
        ("1", "Player "),
        ("2", "Player Health"),
        ("2", "Health"),
    ]
    assert rows[1].sum_address == "0x2000"
    assert rows[1].offsets == "0xC"


def test_child_label_keeps_its_own_arrows():
    """Only the parent part of a composed label has its arrows removed."""
    child = _entry("2", '"Stats ->"')
    parent = _entry("1", '"Player->"', children=[child])

    rows = flatten_entries([parent])

    assert rows[1].description == "PlayerStats ->"


def test_dedupe_keeps_composed_child_row():
    child = _entry("2", '"Health"')
    parent = _entry("1", '"Player "', children=[child])

    rows = dedupe_entries(flatten_entries([parent]))

    assert [(r.id, r.description) for r in rows] == [("1", "Player "), ("2", "Player Health")]


def test_output_is_depth_first():
    grandchild = _entry("1.1.1", "ggc")
    child_a = _entry("1.1", "a", children=[grandchild])
    child_b = _entry("1.2", "b")
    root = _entry("1", "r", children=[child_a, child_b])
    sibling = _entry("2", "s")

    ids = [r.id for r in dedupe_entries(flatten_entries([root, sibling]))]

    assert ids == ["1", "1.1", "1.1.1", "1.2", "2"]


def test_auto_assembler_child_is_skipped_with_its_subtree():
    hidden = _entry("9", "hidden")
    script = _entry("8", "script", variable_type="Auto Assembler Script", children=[hidden])
    value = _entry("3", "value")
    parent = _entry("1", "p", children=[script, value])

    ids = [r.id for r in flatten_entries([parent])]

    assert "8" not in ids
    assert "9" not in ids
    assert ids == ["1", "3", "3"]


def test_empty_child_wrapper_is_malformed():
    parent = CheatEntry(id="42", description="broken", children=[[]])

    with pytest.raises(MalformedTreeError) as exc_info:
        flatten_entries([parent])

    assert exc_info.value.entry_id == "42"
    assert "42" in str(exc_info.value)


def test_invalid_child_address_aborts_flattening():
    child = _entry("2", "bad", address="module.dll+10")
    with pytest.raises(InvalidHexTermError):
        flatten_entries([_entry("1", "p", children=[child])])


# -----------------------------------------------------------------------------
# Depth limiting
# -----------------------------------------------------------------------------

def test_depth_limit_stops_below_max_depth():
    """A 7-level chain with max_depth=5 keeps depth 5 and drops depth 6."""
    rows = flatten_entries([_chain(7)], max_depth=5)
    ids = {r.id for r in rows}

    assert ids == {"0", "1", "2", "3", "4", "5"}


def test_entry_at_max_depth_is_emitted_without_children():
    rows = flatten_entries([_chain(3)], depth=5, max_depth=5)
    assert [r.id for r in rows] == ["0"]


def test_malformed_wrapper_beyond_depth_limit_is_not_inspected():
    parent = CheatEntry(id="1", description="deep", children=[[]])
    rows = flatten_entries([parent], depth=2, max_depth=2)
    assert [r.id for r in rows] == ["1"]


def test_zero_max_depth_emits_only_top_level():
    rows = flatten_entries([_chain(4)], max_depth=0)
    assert [r.id for r in rows] == ["0"]


# -----------------------------------------------------------------------------
# Id round trip
# -----------------------------------------------------------------------------

def test_every_id_appears_exactly_once_after_dedupe():
    leaves = [_entry(f"leaf{i}", f"leaf {i}") for i in range(3)]
    script = _entry("aa", "script", variable_type="Auto Assembler Script")
    mid = _entry("mid", "mid", children=leaves + [script])
    tree = [_entry("root", "root", children=[mid]), _entry("solo", "solo")]

    ids = [r.id for r in dedupe_entries(flatten_entries(tree))]

    assert sorted(ids) == sorted(["root", "mid", "leaf0", "leaf1", "leaf2", "solo"])
    assert len(ids) == len(set(ids))
