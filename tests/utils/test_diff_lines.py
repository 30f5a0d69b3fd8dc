# topmark:header:start
#
#   project      : godocfmt
#   file         : test_diff_lines.py
#   file_relpath : tests/utils/test_diff_lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Bounded-lookahead line diff."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from godocfmt.utils.diff import DiffEntry, DiffTag, diff_lines, format_diff
from tests.conftest import join_lf

EQ, DEL, INS = DiffTag.EQUAL, DiffTag.DELETE, DiffTag.INSERT


def test_identical_texts() -> None:
    """Equal texts produce only equal lines."""
    assert diff_lines("a\nb", "a\nb") == [(EQ, "a"), (EQ, "b")]


def test_empty_texts() -> None:
    """Splitting the empty string yields one empty line."""
    assert diff_lines("", "") == [(EQ, "")]


def test_changed_line() -> None:
    """A line with no nearby match becomes a delete/insert pair."""
    assert diff_lines("a\nb\nc", "a\nB\nc") == [(EQ, "a"), (DEL, "b"), (INS, "B"), (EQ, "c")]


def test_deleted_lines_resync() -> None:
    """Lines missing from ``after`` are deleted, then both sides resync."""
    assert diff_lines("a\nx\ny\nb", "a\nb") == [(EQ, "a"), (DEL, "x"), (DEL, "y"), (EQ, "b")]


def test_inserted_lines_resync() -> None:
    """Lines missing from ``before`` are inserted, then both sides resync."""
    assert diff_lines("a\nb", "a\nx\nb") == [(EQ, "a"), (INS, "x"), (EQ, "b")]


def test_lookahead_is_bounded() -> None:
    """A match more than four lines away is not found."""
    before = join_lf("1", "2", "3", "4", "5", "z")
    after = "z"
    entries = diff_lines(before, after)
    assert entries[:2] == [(DEL, "1"), (INS, "z")]
    assert [line for tag, line in entries if tag is DEL] == ["1", "2", "3", "4", "5", "z"]


def test_exhausted_side_is_flushed() -> None:
    """When one side runs out, the rest of the other is emitted."""
    assert diff_lines("a", "a\nb\nc") == [(EQ, "a"), (INS, "b"), (INS, "c")]
    assert diff_lines("a\nb\nc", "a") == [(EQ, "a"), (DEL, "b"), (DEL, "c")]


def test_reflowed_comment() -> None:
    """A typical reflow shows the split sentence as a replacement."""
    before = join_lf("// New creates a new instance. It accepts options.", "func New() {}")
    after = join_lf("// New creates a new instance.", "// It accepts options.", "func New() {}")
    assert format_diff(diff_lines(before, after)) == [
        "-// New creates a new instance. It accepts options.",
        "+// New creates a new instance.",
        "+// It accepts options.",
        " func New() {}",
    ]


s_lines: st.SearchStrategy[list[str]] = st.lists(
    st.sampled_from(["a", "b", "c", "", "d"]), max_size=12
)


@pytest.mark.hypothesis_slow
@settings(deadline=None, max_examples=300)
@given(before=s_lines, after=s_lines)
def test_diff_is_total_and_consistent(before: list[str], after: list[str]) -> None:
    """Every line of both inputs is emitted once, in order, with a consistent tag."""
    entries: list[DiffEntry] = diff_lines("\n".join(before), "\n".join(after))
    old: list[str] = [line for tag, line in entries if tag is not INS]
    new: list[str] = [line for tag, line in entries if tag is not DEL]
    assert old == "\n".join(before).split("\n")
    assert new == "\n".join(after).split("\n")
