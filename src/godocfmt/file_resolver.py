# topmark:header:start
#
#   project      : godocfmt
#   file         : file_resolver.py
#   file_relpath : src/godocfmt/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for godocfmt.

Positional paths name either files, processed as given, or directories,
walked recursively for Go sources. Exclude patterns use gitignore semantics
and are matched against paths relative to the current working directory.
The result is a deterministic, sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from godocfmt.config.logging import get_logger
from godocfmt.constants import GO_SOURCE_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable

    from godocfmt.config.logging import GodocfmtLogger

logger: GodocfmtLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        rel: Path = path.resolve().relative_to(base.resolve())
        return rel.as_posix()
    except ValueError:
        return path.as_posix()


def _walk_go_files(directory: Path) -> list[Path]:
    return [p for p in directory.rglob(f"*{GO_SOURCE_SUFFIX}") if p.is_file()]


def resolve_file_list(
    paths: Iterable[str | Path],
    exclude_patterns: Iterable[str] = (),
    *,
    base: Path | None = None,
) -> list[Path]:
    """Return the sorted list of Go files to process.

    Args:
        paths (Iterable[str | Path]): Files and directories given on the command line.
        exclude_patterns (Iterable[str]): Gitignore-style patterns of files to skip.
        base (Path | None): Directory exclude patterns are relative to; defaults
            to the current working directory.

    Returns:
        list[Path]: Files to process, sorted and free of duplicates.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    base = base or Path.cwd()
    candidates: set[Path] = set()

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found: list[Path] = _walk_go_files(path)
            logger.debug("Found %d Go file(s) under %s", len(found), path)
            candidates.update(found)
        elif path.exists():
            candidates.add(path)
        else:
            raise FileNotFoundError(f"{path}: no such file or directory")

    patterns: list[str] = [p for p in exclude_patterns if p.strip()]
    if patterns:
        spec: PathSpec = PathSpec.from_lines("gitwildmatch", patterns)
        before: int = len(candidates)
        candidates = {p for p in candidates if not spec.match_file(_rel_for_match(p, base))}
        logger.debug("Excluded %d file(s) by pattern", before - len(candidates))

    return sorted(candidates)
