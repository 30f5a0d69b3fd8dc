# topmark:header:start
#
#   project      : godocfmt
#   file         : test_cli_format.py
#   file_relpath : tests/cli/test_cli_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI behavior: in-place rewrite, ``--diff``, ``--list`` and exit codes.

Tests for the "would change" exit code assert ``result.exception is None``
(or a `SystemExit`) to tell it apart from Click's own usage errors, which
also exit with 2.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner

from godocfmt.cli.exit_codes import ExitCode
from godocfmt.cli.main import cli
from godocfmt.constants import GODOCFMT_VERSION
from tests.cli.conftest import run_cli_in
from tests.conftest import join_lf, mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

UNFORMATTED: str = join_lf(
    "package a", "", "// New creates a thing. It is cheap.", "func New() {}", ""
)
FORMATTED: str = join_lf(
    "package a", "", "// New creates a thing.", "// It is cheap.", "func New() {}", ""
)


def _project(root: Path) -> Path:
    path: Path = root / "a.go"
    path.write_text(UNFORMATTED, encoding="utf-8")
    (root / "ok.go").write_text(FORMATTED, encoding="utf-8")
    return path


def _exited_cleanly(result: Result) -> bool:
    return result.exception is None or isinstance(result.exception, SystemExit)


@mark_cli
def test_rewrites_in_place(isolation: Path) -> None:
    """Without flags changed files are rewritten and the run succeeds."""
    path: Path = _project(isolation)
    result: Result = run_cli_in(isolation, ["."])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert path.read_text(encoding="utf-8") == FORMATTED
    assert result.output == ""


@mark_cli
def test_rewrite_is_stable(isolation: Path) -> None:
    """A second run has nothing left to do."""
    _project(isolation)
    run_cli_in(isolation, ["."])
    result: Result = run_cli_in(isolation, ["-l", "."])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


@mark_cli
def test_diff_does_not_write(isolation: Path) -> None:
    """``--diff`` prints the change, leaves the file alone and exits with 2."""
    path: Path = _project(isolation)
    result: Result = run_cli_in(isolation, ["-d", "a.go"])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert _exited_cleanly(result)
    assert path.read_text(encoding="utf-8") == UNFORMATTED
    assert result.output.splitlines() == [
        "--- a.go",
        "+++ a.go",
        " package a",
        " ",
        "-// New creates a thing. It is cheap.",
        "+// New creates a thing.",
        "+// It is cheap.",
        " func New() {}",
        " ",
    ]


@mark_cli
def test_list_prints_changed_files(isolation: Path) -> None:
    """``--list`` names only the files that would change."""
    _project(isolation)
    result: Result = run_cli_in(isolation, ["-l", "."])
    assert result.exit_code == ExitCode.WOULD_CHANGE
    assert _exited_cleanly(result)
    assert result.output.splitlines() == ["a.go"]


@mark_cli
@parametrize(
    ("width", "expected"),
    [
        ("9", "// aaa\n// bbb\n// ccc\npackage w\n"),
        ("10", "// aaa bbb\n// ccc\npackage w\n"),
    ],
    ids=["one word per line", "prose fills exactly seven columns"],
)
def test_width_option(isolation: Path, width: str, expected: str) -> None:
    """``--width`` overrides the default of 80 columns; ``// `` counts against it."""
    path: Path = isolation / "w.go"
    path.write_text("// aaa bbb ccc\npackage w\n", encoding="utf-8")
    result: Result = run_cli_in(isolation, ["-w", width, "w.go"])
    assert result.exit_code == ExitCode.SUCCESS
    assert path.read_text(encoding="utf-8") == expected


@mark_cli
def test_width_from_config(isolation: Path) -> None:
    """The discovered config file provides the width."""
    (isolation / "godocfmt.toml").write_text("root = true\nwidth = 10\n", encoding="utf-8")
    path: Path = isolation / "w.go"
    path.write_text("// aaa bbb ccc\npackage w\n", encoding="utf-8")
    assert run_cli_in(isolation, ["w.go"]).exit_code == ExitCode.SUCCESS
    assert path.read_text(encoding="utf-8") == "// aaa bbb\n// ccc\npackage w\n"


@mark_cli
def test_exclude_option(isolation: Path) -> None:
    """Excluded files are not touched."""
    path: Path = _project(isolation)
    result: Result = run_cli_in(isolation, ["--exclude", "a.go", "-l", "."])
    assert result.exit_code == ExitCode.SUCCESS
    assert path.read_text(encoding="utf-8") == UNFORMATTED


@mark_cli
def test_verbose_summary(isolation: Path) -> None:
    """``-v`` reports each rewrite and a summary line."""
    _project(isolation)
    result: Result = run_cli_in(isolation, ["-v", "."])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.splitlines() == ["a.go: reformatted", "1 of 2 file(s) reformatted"]


@mark_cli
def test_version() -> None:
    """``--version`` prints the package version."""
    result: Result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert GODOCFMT_VERSION in result.output
