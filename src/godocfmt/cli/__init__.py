# topmark:header:start
#
#   project      : godocfmt
#   file         : __init__.py
#   file_relpath : src/godocfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for godocfmt.

The entry point is `godocfmt.cli.main.cli`, installed as the ``godocfmt``
console script.
"""
