"""Source file size limit.

Long modules are a maintenance smell; this check fails when any source file
under the project root grows beyond a line limit.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result

IGNORED_DIRS = frozenset(
    {
        ".git",
        "node_modules",
        "__pycache__",
        ".venv",
        "venv",
        "build",
        "dist",
        "testdata",
    }
)


@dataclass(frozen=True, slots=True)
class SizeCheckError:
    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class SizeViolation:
    path: Path
    lines: int


@dataclass(frozen=True, slots=True)
class SizeReport:
    max_lines: int
    checked: int
    violations: tuple[SizeViolation, ...]

    @property
    def ok(self) -> bool:
        return not self.violations


def iter_source_files(root: Path, *, extension: str) -> list[Path]:
    """Source files under root, sorted; ignored and hidden directories are pruned."""
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if d not in IGNORED_DIRS and not d.startswith(".")
        )
        base = Path(dirpath)
        files.extend(base / name for name in filenames if name.endswith(extension))
    return sorted(p for p in files if p.is_file())


def count_lines(path: Path) -> int:
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        return sum(1 for _ in handle)


def check_file_sizes(
    root: Path, *, max_lines: int, extension: str
) -> Result[SizeReport, SizeCheckError]:
    if max_lines < 1:
        return Err(SizeCheckError(f"--max-lines must be >= 1 (got {max_lines})"))

    files = iter_source_files(root, extension=extension)
    violations: list[SizeViolation] = []
    for path in files:
        try:
            lines = count_lines(path)
        except OSError as e:
            return Err(SizeCheckError(f"failed to read {path}: {e}", path=path))
        if lines > max_lines:
            violations.append(SizeViolation(path=path.relative_to(root), lines=lines))

    return Ok(SizeReport(max_lines=max_lines, checked=len(files), violations=tuple(violations)))
