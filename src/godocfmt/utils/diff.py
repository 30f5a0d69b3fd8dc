# topmark:header:start
#
#   project      : godocfmt
#   file         : diff.py
#   file_relpath : src/godocfmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented diff used to preview formatting changes.

`diff_lines` walks the two texts with a small bounded lookahead to
resynchronize after a mismatch. It is a best-effort renderer for small
deltas, not a minimal edit script: it is deterministic and every step
advances at least one cursor, so it always terminates. `render_patch` formats
and colorizes the result for terminal display.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from yachalk import chalk

from godocfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from godocfmt.config.logging import GodocfmtLogger

logger: GodocfmtLogger = get_logger(__name__)

# Number of lines searched ahead (exclusive) when the cursors disagree.
LOOKAHEAD: Final[int] = 5


class DiffTag(str, Enum):
    """Prefix tagging each line of a diff."""

    EQUAL = " "
    DELETE = "-"
    INSERT = "+"


DiffEntry = tuple[DiffTag, str]


def _find_ahead(lines: Sequence[str], start: int, target: str) -> int:
    """Return the offset (1..LOOKAHEAD-1) of ``target`` after ``start``, or 0."""
    for offset in range(1, LOOKAHEAD):
        if start + offset >= len(lines):
            break
        if lines[start + offset] == target:
            return offset
    return 0


def diff_lines(before: str, after: str) -> list[DiffEntry]:
    """Compute a tagged line diff between two texts.

    Args:
        before (str): Original text.
        after (str): Updated text.

    Returns:
        list[DiffEntry]: ``(tag, line)`` pairs covering every line of both texts.
    """
    a: list[str] = before.split("\n")
    b: list[str] = after.split("\n")
    out: list[DiffEntry] = []
    ai: int = 0
    bi: int = 0

    while ai < len(a) or bi < len(b):
        if ai >= len(a):
            out.append((DiffTag.INSERT, b[bi]))
            bi += 1
            continue
        if bi >= len(b):
            out.append((DiffTag.DELETE, a[ai]))
            ai += 1
            continue
        if a[ai] == b[bi]:
            out.append((DiffTag.EQUAL, a[ai]))
            ai += 1
            bi += 1
            continue

        skip: int = _find_ahead(a, ai, b[bi])
        if skip:
            out.extend((DiffTag.DELETE, line) for line in a[ai : ai + skip])
            ai += skip
            continue

        skip = _find_ahead(b, bi, a[ai])
        if skip:
            out.extend((DiffTag.INSERT, line) for line in b[bi : bi + skip])
            bi += skip
            continue

        logger.trace("no resync at before:%d after:%d", ai + 1, bi + 1)
        out.append((DiffTag.DELETE, a[ai]))
        out.append((DiffTag.INSERT, b[bi]))
        ai += 1
        bi += 1

    return out


def format_diff(entries: Iterable[DiffEntry]) -> list[str]:
    """Return diff entries as plain ``<tag><line>`` strings."""
    return [f"{tag.value}{line}" for tag, line in entries]


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a diff.

    Args:
        patch: Diff lines as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
