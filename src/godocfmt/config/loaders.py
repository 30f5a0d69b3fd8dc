# topmark:header:start
#
#   project      : godocfmt
#   file         : loaders.py
#   file_relpath : src/godocfmt/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading godocfmt configuration from
on-disk TOML files (``godocfmt.toml`` / ``pyproject.toml``) and for
discovering them by walking up from a starting directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from godocfmt.config.keys import Toml
from godocfmt.config.logging import get_logger
from godocfmt.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from godocfmt.config.logging import GodocfmtLogger

TomlTable = dict[str, Any]

logger: GodocfmtLogger = get_logger(__name__)


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``godocfmt.toml`` or ``pyproject.toml``).
        strict (bool): Raise on failure instead of logging and returning an empty dict.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ValueError: If ``strict`` is set and the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        if strict:
            raise ValueError(f"Cannot read config file {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the godocfmt table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.godocfmt]`` (empty when absent); any
    other file is a dedicated config whose top level is the table.
    """
    if path.name == PYPROJECT_FILE_NAME:
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        table: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        return cast("TomlTable", table) if isinstance(table, dict) else {}
    return data


def discover_config_files(start: Path) -> list[Path]:
    """Return config files discovered by walking upward from ``start``.

    Files are returned root-most first, nearest last, so that a later merge
    gives precedence to the nearest file. Within one directory
    ``pyproject.toml`` comes before ``godocfmt.toml``. A ``pyproject.toml``
    without a ``[tool.godocfmt]`` table is ignored. A file setting
    ``root = true`` stops the walk after its directory.

    Args:
        start (Path): Directory (or file) where discovery starts.

    Returns:
        list[Path]: Discovered config file paths ordered for merging.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        root_stop_here: bool = False
        dir_entries: list[Path] = []

        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            p: Path = cur / name
            if not p.is_file():
                continue
            table: TomlTable = extract_tool_table(p, load_toml_dict(p))
            if name == PYPROJECT_FILE_NAME and not table:
                continue
            logger.debug("Discovered config file: %s", p)
            dir_entries.append(p)
            if bool(table.get(Toml.KEY_ROOT, False)):
                root_stop_here = True

        if dir_entries:
            per_dir.append(dir_entries)

        parent: Path = cur.parent
        if parent == cur or root_stop_here:
            break
        cur = parent

    ordered: list[Path] = []
    for dir_list in reversed(per_dir):
        ordered.extend(dir_list)
    return ordered
