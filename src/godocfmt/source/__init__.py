# topmark:header:start
#
#   project      : godocfmt
#   file         : __init__.py
#   file_relpath : src/godocfmt/source/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locating and rewriting doc comments inside Go source files."""
