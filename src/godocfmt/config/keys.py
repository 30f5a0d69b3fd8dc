# topmark:header:start
#
#   project      : godocfmt
#   file         : keys.py
#   file_relpath : src/godocfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for godocfmt configuration.

Keys are read from ``godocfmt.toml`` and from ``[tool.godocfmt]`` in
``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by godocfmt configuration."""

    # Stop upward config discovery after this file's directory.
    KEY_ROOT: Final[str] = "root"

    # Column budget for whole source lines.
    KEY_WIDTH: Final[str] = "width"

    # Gitignore-style patterns of files to skip.
    KEY_EXCLUDE: Final[str] = "exclude"

    # [tool.<name>] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
