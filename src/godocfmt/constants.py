# topmark:header:start
#
#   project      : godocfmt
#   file         : constants.py
#   file_relpath : src/godocfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""godocfmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    GODOCFMT_VERSION: str = get_version("godocfmt")
except PackageNotFoundError:  # running from a source checkout
    GODOCFMT_VERSION = "0.0.0"

# Column budget for a whole source line, comment prefix and indentation included.
DEFAULT_WIDTH: int = 80

# Extension of the source files picked up when walking directories.
GO_SOURCE_SUFFIX: str = ".go"

# Name of the dedicated configuration file and of the pyproject.toml table.
CONFIG_FILE_NAME: str = "godocfmt.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "godocfmt"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "GODOCFMT_LOG_LEVEL"
