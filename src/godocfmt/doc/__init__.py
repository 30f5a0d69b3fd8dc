# topmark:header:start
#
#   project      : godocfmt
#   file         : __init__.py
#   file_relpath : src/godocfmt/doc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doc-comment document model, parser and renderer."""

from __future__ import annotations
