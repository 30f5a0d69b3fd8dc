# topmark:header:start
#
#   project      : godocfmt
#   file         : __init__.py
#   file_relpath : src/godocfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""godocfmt package.

godocfmt reformats Go doc comments: prose is reflowed into sentence-aware,
width-bounded lines while headings, code blocks, lists, doc links and link
definitions are preserved. It exposes a CLI and a small typed API
(`godocfmt.api`).
"""

from __future__ import annotations
