# topmark:header:start
#
#   project      : godocfmt
#   file         : __init__.py
#   file_relpath : src/godocfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for godocfmt.

Re-exports the configuration model so callers can write
``from godocfmt.config import Config, MutableConfig``.
"""

from __future__ import annotations

from godocfmt.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
