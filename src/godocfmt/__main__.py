# topmark:header:start
#
#   project      : godocfmt
#   file         : __main__.py
#   file_relpath : src/godocfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running godocfmt via ``python -m godocfmt``.

Examples:
    Preview the changes for a source tree::

        python -m godocfmt -d ./pkg
"""

from __future__ import annotations

from godocfmt.cli.main import cli

if __name__ == "__main__":
    cli()
