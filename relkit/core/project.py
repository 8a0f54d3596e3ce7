"""Project root detection and paths.

The project root is the directory every release command operates on. It is
resolved in this order:

1. an explicit ``--root`` (exported to ``RELKIT_ROOT`` by the CLI callback)
2. ``$RELKIT_ROOT``
3. the nearest ancestor of the working directory holding relkit.toml or .git
4. the working directory itself
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILENAME, Config
from .result import Err, Ok, Result

__all__ = [
    "ENV_VAR",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

ENV_VAR = "RELKIT_ROOT"


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be resolved."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A repository managed by relkit.

    Paths derived from configuration are resolved against ``root``.
    """

    root: Path

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def version_file(self, config: Config) -> Path:
        return self.root / config.version.file

    def changelog_path(self, config: Config) -> Path:
        return self.root / config.changelog.file

    def fragments_dir(self, config: Config) -> Path:
        return self.root / config.changelog.fragments_dir


def is_project_root(path: Path) -> bool:
    return (path / CONFIG_FILENAME).is_file() or (path / ".git").exists()


def find_project_upward(start: Path) -> Path | None:
    """Walk up from start and return the first project root, if any."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if is_project_root(candidate):
            return candidate
    return None


def detect_project(
    *,
    start_dir: Path | None = None,
    env_var: str = ENV_VAR,
) -> Result[Project, ProjectError]:
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Project(root=env_path))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
                searched_from=None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    return Ok(Project(root=found or search_start))
