# topmark:header:start
#
#   project      : godocfmt
#   file         : main.py
#   file_relpath : src/godocfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command line for godocfmt.

``godocfmt [OPTIONS] PATHS...`` reformats the ``//`` doc comments of Go files.
By default changed files are rewritten in place; ``--diff`` prints a preview
and ``--list`` prints the names of files that would change, both without
writing.

Key ideas:
- Shared state (verbosity, color, console) is initialized once and placed into ``ctx.obj``.
- Configuration is merged from discovered files, ``--config`` files and CLI options.
- A failure on one file is reported and the run continues; the first failure
  decides the exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from godocfmt.api import process_file, write_result
from godocfmt.cli.console import ClickConsole
from godocfmt.cli.errors import (
    GodocfmtConfigError,
    GodocfmtEncodingError,
    GodocfmtError,
    GodocfmtFileNotFoundError,
    GodocfmtIOError,
    GodocfmtUsageError,
)
from godocfmt.cli.exit_codes import ExitCode
from godocfmt.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from godocfmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from godocfmt.config.model import MutableConfig
from godocfmt.constants import GODOCFMT_VERSION
from godocfmt.file_resolver import resolve_file_list
from godocfmt.utils.diff import format_diff, render_patch

if TYPE_CHECKING:
    from godocfmt.api import FileResult
    from godocfmt.cli.console_api import ConsoleLike
    from godocfmt.config.logging import GodocfmtLogger
    from godocfmt.config.model import Config

logger: GodocfmtLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Console first, so that errors raised below are shown through it.
    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


def resolve_config(
    *,
    width: int | None,
    exclude_patterns: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
) -> Config:
    """Merge discovered config, ``--config`` files and CLI overrides.

    Raises:
        GodocfmtUsageError: If ``--width`` is not positive.
        GodocfmtConfigError: If a config file is unreadable or holds invalid values.
    """
    if width is not None and width <= 0:
        raise GodocfmtUsageError(f"--width must be a positive integer, got {width}")
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_files=config_files,
            discover=not no_config,
        )
        draft.apply_cli_args({"width": width, "exclude_patterns": exclude_patterns})
        return draft.freeze()
    except ValueError as e:
        raise GodocfmtConfigError(str(e)) from e


def _process_one(path: Path, width: int) -> FileResult:
    """Format one file, translating library errors into CLI errors."""
    try:
        return process_file(path, width)
    except FileNotFoundError as e:
        raise GodocfmtFileNotFoundError(f"{path}: no such file") from e
    except UnicodeDecodeError as e:
        raise GodocfmtEncodingError(f"{path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise GodocfmtIOError(f"{path}: {e.strerror or e}") from e


def _emit_diff(console: ConsoleLike, result: FileResult, *, color: bool) -> None:
    console.print(f"--- {result.path}")
    console.print(f"+++ {result.path}")
    lines: list[str] = format_diff(result.diff())
    if color:
        console.print(render_patch(lines), nl=False)
    else:
        for line in lines:
            console.print(line)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Reformat the // doc comments of Go source files.",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "-w",
    "--width",
    type=int,
    default=None,
    help="Maximum line width, indentation and comment prefix included (default: 80).",
)
@click.option("-d", "--diff", "show_diff", is_flag=True, help="Print a diff instead of writing.")
@click.option(
    "-l",
    "--list",
    "list_files",
    is_flag=True,
    help="Print the files that would change instead of writing.",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Gitignore-style pattern of files to skip (repeatable).",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Extra config file merged after discovered ones (repeatable).",
)
@click.option("--no-config", is_flag=True, help="Do not discover project config files.")
@common_verbose_options
@common_color_options
@click.version_option(GODOCFMT_VERSION, prog_name="godocfmt")
@click.pass_context
def cli(
    ctx: click.Context,
    paths: tuple[Path, ...],
    width: int | None,
    show_diff: bool,
    list_files: bool,
    exclude_patterns: tuple[str, ...],
    config_files: tuple[Path, ...],
    no_config: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the godocfmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj["verbosity_level"]

    if not paths:
        raise GodocfmtUsageError("No paths given. Usage: godocfmt [OPTIONS] PATHS...")
    if show_diff and list_files:
        raise GodocfmtUsageError("The '--diff' and '--list' options are mutually exclusive.")

    config: Config = resolve_config(
        width=width,
        exclude_patterns=exclude_patterns,
        config_files=config_files,
        no_config=no_config,
    )
    logger.debug("Effective config: %s", config)

    try:
        files: list[Path] = resolve_file_list(paths, config.exclude_patterns)
    except FileNotFoundError as e:
        raise GodocfmtFileNotFoundError(str(e)) from e

    first_failure: ExitCode | None = None
    would_change: int = 0
    written: int = 0

    for path in files:
        try:
            result: FileResult = _process_one(path, config.width)
            if not result.changed:
                if verbosity <= logging.DEBUG:
                    console.print(f"{path}: unchanged")
                continue
            would_change += 1
            if show_diff:
                _emit_diff(console, result, color=ctx.obj["color_enabled"])
            elif list_files:
                console.print(str(path))
            else:
                try:
                    write_result(result)
                except OSError as e:
                    raise GodocfmtIOError(f"{path}: {e.strerror or e}") from e
                written += 1
                if verbosity <= logging.INFO:
                    console.print(f"{path}: reformatted")
        except GodocfmtError as e:
            e.show()
            if first_failure is None:
                first_failure = ExitCode(e.exit_code)

    if verbosity <= logging.INFO:
        action: str = "reformatted" if not (show_diff or list_files) else "would change"
        count: int = written if action == "reformatted" else would_change
        console.print(f"{count} of {len(files)} file(s) {action}")

    if first_failure is not None:
        ctx.exit(first_failure)
    if (show_diff or list_files) and would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
