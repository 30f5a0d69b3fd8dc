# topmark:header:start
#
#   project      : godocfmt
#   file         : api.py
#   file_relpath : src/godocfmt/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for godocfmt.

This module exposes a small, stable surface for formatting Go doc comments
from Python code without going through the CLI:

- `parse` and `render` for comment text (markers already removed),
- `format_source` for whole Go files,
- `diff_lines` to preview a change,
- `process_file` / `write_result` for on-disk files.

Example:
    ```python
    from pathlib import Path

    from godocfmt.api import process_file, write_result

    result = process_file(Path("pkg/doc.go"), width=80)
    if result.changed:
        write_result(result)
    ```

Library errors (`OSError`, `UnicodeDecodeError`) propagate unchanged; the CLI
translates them into exit codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from godocfmt.config.logging import get_logger
from godocfmt.constants import DEFAULT_WIDTH
from godocfmt.doc.parser import parse
from godocfmt.doc.render import render
from godocfmt.source.comments import format_source
from godocfmt.utils.diff import diff_lines

if TYPE_CHECKING:
    from pathlib import Path

    from godocfmt.config.logging import GodocfmtLogger
    from godocfmt.utils.diff import DiffEntry

__all__ = [
    "FileResult",
    "diff_lines",
    "format_source",
    "format_text",
    "parse",
    "process_file",
    "render",
    "write_result",
]

logger: GodocfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of formatting one file.

    Attributes:
        path (Path): The processed file.
        original (str): Content as read from disk.
        formatted (str): Content after reformatting its doc comments.
    """

    path: Path
    original: str
    formatted: str

    @property
    def changed(self) -> bool:
        """Whether formatting altered the file."""
        return self.original != self.formatted

    def diff(self) -> list[DiffEntry]:
        """Return the tagged line diff from original to formatted content."""
        return diff_lines(self.original, self.formatted)


def format_text(text: str, width: int = DEFAULT_WIDTH) -> str:
    """Reformat doc comment text (comment markers removed) at ``width`` columns."""
    return render(parse(text), width)


def process_file(path: Path, width: int = DEFAULT_WIDTH) -> FileResult:
    """Read a Go file and reformat its doc comments in memory.

    Line endings are read untranslated so CRLF files round-trip.

    Args:
        path (Path): The Go source file.
        width (int): Column budget for whole source lines.

    Returns:
        FileResult: Original and formatted content. Nothing is written.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as fh:
        original: str = fh.read()
    formatted: str = format_source(original, width)
    logger.debug("%s: %s", path, "changed" if original != formatted else "unchanged")
    return FileResult(path=path, original=original, formatted=formatted)


def write_result(result: FileResult) -> bool:
    """Write the formatted content back to disk when it differs.

    Returns:
        bool: True if the file was written.

    Raises:
        OSError: If the file cannot be written.
    """
    if not result.changed:
        return False
    with result.path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(result.formatted)
    logger.info("Reformatted %s", result.path)
    return True
