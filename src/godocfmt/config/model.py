# topmark:header:start
#
#   project      : godocfmt
#   file         : model.py
#   file_relpath : src/godocfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the formatter and the CLI.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Layers are merged in this order, later layers winning:
    1. built-in defaults,
    2. discovered ``pyproject.toml`` / ``godocfmt.toml`` files, root-most first,
    3. explicitly given config files,
    4. CLI overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from godocfmt.config.keys import Toml
from godocfmt.config.loaders import discover_config_files, extract_tool_table, load_toml_dict
from godocfmt.config.logging import get_logger
from godocfmt.constants import DEFAULT_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable

    from godocfmt.config.loaders import TomlTable
    from godocfmt.config.logging import GodocfmtLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_cli_args` (CLI values or API dicts).
ArgsLike = Mapping[str, Any]

logger: GodocfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        width (int): Column budget for whole source lines.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to skip.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    width: int = DEFAULT_WIDTH
    exclude_patterns: tuple[str, ...] = ()
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            width=self.width,
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer" so merging can tell an explicit
    value from an inherited one.

    Attributes:
        width (int | None): Column budget for whole source lines.
        exclude_patterns (list[str]): Gitignore-style patterns of files to skip;
            patterns accumulate across layers.
        config_files (list[Path]): Provenance of the merged layers.
    """

    width: int | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Validate and freeze this builder into an immutable `Config`.

        Raises:
            ValueError: If the width is not a positive integer.
        """
        width: int = DEFAULT_WIDTH if self.width is None else self.width
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ValueError(f"width must be a positive integer, got {width!r}")
        return Config(
            width=width,
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(width=DEFAULT_WIDTH)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed godocfmt TOML table.

        Args:
            data (TomlTable): The godocfmt table (top level of ``godocfmt.toml`` or
                ``[tool.godocfmt]``).
            config_file (Path | None): The file the table was read from, for messages.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ValueError: If a key holds a value of the wrong type.
        """
        source: str = str(config_file) if config_file else "<dict>"
        draft = cls()

        width: Any = data.get(Toml.KEY_WIDTH)
        if width is not None:
            if isinstance(width, bool) or not isinstance(width, int):
                raise ValueError(f"{source}: '{Toml.KEY_WIDTH}' must be an integer")
            draft.width = width

        exclude: Any = data.get(Toml.KEY_EXCLUDE, [])
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise ValueError(f"{source}: '{Toml.KEY_EXCLUDE}' must be a list of strings")
        draft.exclude_patterns = list(exclude)

        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig:
        """Load a draft from ``godocfmt.toml`` or ``[tool.godocfmt]`` in ``pyproject.toml``.

        Args:
            path (Path): The TOML file.
            strict (bool): Raise when the file cannot be read or parsed.

        Returns:
            MutableConfig: The resulting draft.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable = extract_tool_table(path, load_toml_dict(path, strict=strict))
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Build a draft from defaults, discovered files and extra config files.

        Args:
            start (Path | None): Directory where discovery starts (defaults to CWD).
            extra_files (Iterable[Path]): Explicit config files, merged last, in order.
            discover (bool): Whether to discover project config files.

        Returns:
            MutableConfig: The merged draft; CLI overrides are applied separately.

        Raises:
            ValueError: If a discovered or explicit file cannot be read or parsed.
        """
        merged: MutableConfig = cls.from_defaults()
        if discover:
            for path in discover_config_files(start or Path.cwd()):
                merged = merged.merge_with(cls.from_toml_file(path, strict=True))
        for path in extra_files:
            merged = merged.merge_with(cls.from_toml_file(path, strict=True))
        logger.debug("Merged config from %d file(s)", len(merged.config_files))
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft with ``other`` layered on top of ``self``."""
        return MutableConfig(
            width=other.width if other.width is not None else self.width,
            exclude_patterns=[*self.exclude_patterns, *other.exclude_patterns],
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``width`` (int or None) and ``exclude_patterns``
        (sequence of strings).
        """
        width: Any = args.get("width")
        if width is not None:
            self.width = width
        self.exclude_patterns.extend(args.get("exclude_patterns") or ())
        return self
