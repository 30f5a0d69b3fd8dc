# topmark:header:start
#
#   project      : godocfmt
#   file         : errors.py
#   file_relpath : src/godocfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the godocfmt CLI.

Usage:
    Raise these exceptions in the command or its helpers to signal errors
    with standardized messages and exit codes. Per-file failures are reported
    through `GodocfmtError.show()` without aborting the run.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from godocfmt.cli.exit_codes import ExitCode


class GodocfmtError(click.ClickException):
    """Base class for all godocfmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class GodocfmtUsageError(GodocfmtError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class GodocfmtConfigError(GodocfmtError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class GodocfmtFileNotFoundError(GodocfmtError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GodocfmtIOError(GodocfmtError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class GodocfmtEncodingError(GodocfmtError):
    """Error for files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
