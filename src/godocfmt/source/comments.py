# topmark:header:start
#
#   project      : godocfmt
#   file         : comments.py
#   file_relpath : src/godocfmt/source/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate ``//`` doc comments in Go source and splice reformatted text back.

A comment group is a run of consecutive lines holding nothing but a ``//``
comment (after optional indentation). Lines inside string, rune and raw
string literals or ``/* ... */`` block comments are never mistaken for
comments. Groups containing a directive (``//go:generate``, ``//nolint``,
``//+build``) are left untouched.

Each remaining group is parsed, rendered at the width left after the
indentation and the ``// `` prefix, and written back with the file's
indentation and line ending style. Everything outside comment groups is
preserved byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from godocfmt.config.logging import get_logger
from godocfmt.doc.parser import parse
from godocfmt.doc.render import render

if TYPE_CHECKING:
    from collections.abc import Sequence

    from godocfmt.config.logging import GodocfmtLogger

logger: GodocfmtLogger = get_logger(__name__)

COMMENT_PREFIX: Final[str] = "//"
# Width of "// " in front of every prose line.
COMMENT_OVERHEAD: Final[int] = len(COMMENT_PREFIX) + 1

DIRECTIVE_PREFIXES: Final[tuple[str, ...]] = ("nolint", "go:", "lint:")
BUILD_CONSTRAINT_PREFIX: Final[str] = "+build"


class LexState(Enum):
    """What the scanner is inside of at a line boundary."""

    CODE = "code"
    BLOCK_COMMENT = "block_comment"
    RAW_STRING = "raw_string"


@dataclass(frozen=True, slots=True)
class CommentGroup:
    """A run of consecutive whole-line ``//`` comments.

    Attributes:
        start (int): Index of the first line of the group.
        end (int): Index one past the last line of the group.
        indent (str): Whitespace preceding the first comment.
        lines (tuple[str, ...]): The comment lines, indentation included,
            without line terminators.
    """

    start: int
    end: int
    indent: str
    lines: tuple[str, ...]

    def texts(self) -> list[str]:
        """Return the comment text of each line, ``//`` and one space removed."""
        out: list[str] = []
        for line in self.lines:
            text: str = line.lstrip(" \t")[len(COMMENT_PREFIX) :]
            out.append(text.removeprefix(" "))
        return out


def _skip_quoted(line: str, i: int) -> int:
    """Return the index just past the quoted literal opening at ``line[i]``."""
    quote: str = line[i]
    j: int = i + 1
    while j < len(line):
        if line[j] == "\\":
            j += 2
            continue
        if line[j] == quote:
            return j + 1
        j += 1
    return len(line)


def _scan_line(line: str, state: LexState) -> LexState:
    """Advance the lexer state over one line of Go code."""
    i: int = 0
    while i < len(line):
        if state is LexState.BLOCK_COMMENT:
            end: int = line.find("*/", i)
            if end < 0:
                return state
            i, state = end + 2, LexState.CODE
        elif state is LexState.RAW_STRING:
            end = line.find("`", i)
            if end < 0:
                return state
            i, state = end + 1, LexState.CODE
        elif line.startswith("//", i):
            return state
        elif line.startswith("/*", i):
            i, state = i + 2, LexState.BLOCK_COMMENT
        elif line[i] == "`":
            i, state = i + 1, LexState.RAW_STRING
        elif line[i] in "\"'":
            i = _skip_quoted(line, i)
        else:
            i += 1
    return state


def _is_comment_line(line: str) -> bool:
    return line.lstrip(" \t").startswith(COMMENT_PREFIX)


def scan_comment_groups(lines: Sequence[str]) -> list[CommentGroup]:
    """Find all ``//`` comment groups in a Go source file.

    Args:
        lines (Sequence[str]): Source lines without line terminators.

    Returns:
        list[CommentGroup]: Groups in source order.
    """
    groups: list[CommentGroup] = []
    state: LexState = LexState.CODE
    start: int | None = None

    for i, line in enumerate(lines):
        if state is LexState.CODE and _is_comment_line(line):
            if start is None:
                start = i
            continue
        if start is not None:
            groups.append(_make_group(lines, start, i))
            start = None
        state = _scan_line(line, state)

    if start is not None:
        groups.append(_make_group(lines, start, len(lines)))
    return groups


def _make_group(lines: Sequence[str], start: int, end: int) -> CommentGroup:
    first: str = lines[start]
    indent: str = first[: len(first) - len(first.lstrip(" \t"))]
    return CommentGroup(start=start, end=end, indent=indent, lines=tuple(lines[start:end]))


def is_directive_group(group: CommentGroup) -> bool:
    """Return True if the group holds a directive comment that must not be reformatted.

    Directives have no space after ``//``: ``//go:generate``, ``//nolint:errcheck``,
    ``//lint:ignore``, ``//+build linux``.
    """
    for line in group.lines:
        text: str = line.lstrip(" \t")[len(COMMENT_PREFIX) :]
        if not text or text[0] in " \t":
            continue
        if text.lower().startswith(DIRECTIVE_PREFIXES) or text.startswith(
            BUILD_CONSTRAINT_PREFIX
        ):
            return True
    return False


def format_comment_group(group: CommentGroup, width: int) -> list[str]:
    """Reformat one comment group.

    Args:
        group (CommentGroup): The group to reformat.
        width (int): Column budget for whole source lines.

    Returns:
        list[str]: The replacement lines, indentation and ``//`` included,
            without line terminators.
    """
    effective_width: int = width - len(group.indent) - COMMENT_OVERHEAD
    formatted: str = render(parse("\n".join(group.texts())), effective_width)
    formatted = formatted.removesuffix("\n")

    out: list[str] = []
    for line in formatted.split("\n"):
        if line == "":
            out.append(f"{group.indent}{COMMENT_PREFIX}")
        elif line.startswith("\t"):
            out.append(f"{group.indent}{COMMENT_PREFIX}{line}")
        else:
            out.append(f"{group.indent}{COMMENT_PREFIX} {line}")
    return out


def format_source(text: str, width: int) -> str:
    """Reformat every doc comment of a Go source file.

    Args:
        text (str): The file content.
        width (int): Column budget for whole source lines.

    Returns:
        str: The reformatted content; identical to ``text`` when nothing changes.
    """
    raw_lines: list[str] = text.split("\n")
    lines: list[str] = [line.removesuffix("\r") for line in raw_lines]
    crlf: list[bool] = [line.endswith("\r") for line in raw_lines]

    out: list[str] = []
    pos: int = 0
    for group in scan_comment_groups(lines):
        out.extend(raw_lines[pos : group.start])
        pos = group.end
        if is_directive_group(group):
            logger.debug("Skipping directive comment at line %d", group.start + 1)
            out.extend(raw_lines[group.start : group.end])
            continue
        eol: str = "\r" if crlf[group.start] else ""
        replacement: list[str] = format_comment_group(group, width)
        if list(group.lines) != replacement:
            logger.trace("Reformatted comment at line %d", group.start + 1)
        out.extend(line + eol for line in replacement)
    out.extend(raw_lines[pos:])

    return "\n".join(out)
