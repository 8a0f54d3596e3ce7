"""Typed configuration loading and access.

This module maps the optional relkit.toml onto frozen dataclasses. Every key
has a default, so a project without the file behaves like this repository.

Example relkit.toml:

    [version]
    file = "mypkg/__init__.py"
    pattern = '__version__ = "(\\d+\\.\\d+\\.\\d+)"'

    [changelog]
    file = "CHANGELOG.md"
    fragments_dir = "changelog.d"

    [size]
    max_lines = 800
    extension = ".py"

    [git]
    base_branch = "main"
    remote = "origin"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "ChangelogConfig",
    "Config",
    "ConfigError",
    "GitConfig",
    "SizeConfig",
    "VersionConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relkit.toml"

DEFAULT_VERSION_FILE = "relkit/__init__.py"
DEFAULT_VERSION_PATTERN = r'__version__ = "(\d+\.\d+\.\d+)"'
DEFAULT_CHANGELOG_FILE = "CHANGELOG.md"
DEFAULT_FRAGMENTS_DIR = "changelog.d"
DEFAULT_MAX_LINES = 1000
DEFAULT_EXTENSION = ".py"
DEFAULT_BASE_BRANCH = "main"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class VersionConfig:
    """Where the version string lives.

    ``pattern`` must contain exactly one capture group around the
    MAJOR.MINOR.PATCH triple; the surrounding text is preserved on update.
    """

    file: str = DEFAULT_VERSION_FILE
    pattern: str = DEFAULT_VERSION_PATTERN


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    file: str = DEFAULT_CHANGELOG_FILE
    fragments_dir: str = DEFAULT_FRAGMENTS_DIR


@dataclass(frozen=True, slots=True)
class SizeConfig:
    max_lines: int = DEFAULT_MAX_LINES
    extension: str = DEFAULT_EXTENSION


@dataclass(frozen=True, slots=True)
class GitConfig:
    base_branch: str = DEFAULT_BASE_BRANCH
    remote: str = DEFAULT_REMOTE


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    version: VersionConfig = field(default_factory=VersionConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)
    size: SizeConfig = field(default_factory=SizeConfig)
    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping.

        Raises:
            ValueError: If a value is present but unusable.
        """
        version: StrDict = get_table(data, "version") or {}
        changelog: StrDict = get_table(data, "changelog") or {}
        size: StrDict = get_table(data, "size") or {}
        git: StrDict = get_table(data, "git") or {}

        pattern = get_str(version, "pattern") or DEFAULT_VERSION_PATTERN
        _validate_pattern(pattern)

        max_lines = get_int(size, "max_lines")
        if max_lines is not None and max_lines < 1:
            raise ValueError(f"size.max_lines must be >= 1 (got {max_lines})")

        extension = get_str(size, "extension") or DEFAULT_EXTENSION
        if not extension.startswith("."):
            extension = f".{extension}"

        return cls(
            version=VersionConfig(
                file=get_str(version, "file") or DEFAULT_VERSION_FILE,
                pattern=pattern,
            ),
            changelog=ChangelogConfig(
                file=get_str(changelog, "file") or DEFAULT_CHANGELOG_FILE,
                fragments_dir=get_str(changelog, "fragments_dir") or DEFAULT_FRAGMENTS_DIR,
            ),
            size=SizeConfig(
                max_lines=max_lines or DEFAULT_MAX_LINES,
                extension=extension,
            ),
            git=GitConfig(
                base_branch=get_str(git, "base_branch") or DEFAULT_BASE_BRANCH,
                remote=get_str(git, "remote") or DEFAULT_REMOTE,
            ),
        )


def _validate_pattern(pattern: str) -> None:
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ValueError(f"version.pattern is not a valid regex: {e}") from e
    if compiled.groups != 1:
        raise ValueError(
            f"version.pattern must have exactly one capture group (found {compiled.groups})"
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relkit.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config when the file exists, defaults otherwise.

    A present-but-broken file is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
