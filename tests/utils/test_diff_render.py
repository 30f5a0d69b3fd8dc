# topmark:header:start
#
#   project      : godocfmt
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: rendering from text or sequences and empty inputs.

Covers `format_diff` and `render_patch` inputs and output guarantees.
"""

from __future__ import annotations

from godocfmt.utils.diff import DiffTag, format_diff, render_patch


def test_format_diff_prefixes_tags() -> None:
    """Each entry becomes its tag followed by the line."""
    entries = [(DiffTag.EQUAL, "a"), (DiffTag.DELETE, "b"), (DiffTag.INSERT, "c")]
    assert format_diff(entries) == [" a", "-b", "+c"]


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and an iterable of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(False))

    assert isinstance(s1, str) and isinstance(s2, str) and s1 and s2
    assert s1 == s2


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input should not raise and should return a string."""
    assert render_patch("") == ""


def test_render_patch_line_numbers_and_cr() -> None:
    """Line numbers are zero-padded and carriage returns are made visible."""
    out = render_patch([" same\r"], show_line_numbers=True)
    assert out == "0001| same\\r\n"
