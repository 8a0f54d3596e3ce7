from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.files import atomic_write_text
from relkit.services.release.errors import ReleaseError
from relkit.services.release.model import ReleaseBump
from relkit.services.release.semver import SemVer


@dataclass(frozen=True, slots=True)
class VersionBump:
    current: SemVer
    new: SemVer
    written: bool


def _read(path: Path) -> Result[str, ReleaseError]:
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to read version file: {e}",
                hint=str(path),
            )
        )


def _find(text: str, *, path: Path, pattern: str) -> Result[re.Match[str], ReleaseError]:
    m = re.search(pattern, text)
    if m is None or SemVer.parse(m.group(1)) is None:
        return Err(
            ReleaseError(
                kind="version_not_found",
                message=f"Could not find version in {path}",
                hint=f"expected a match for {pattern}",
            )
        )
    return Ok(m)


def read_version(*, path: Path, pattern: str) -> Result[SemVer, ReleaseError]:
    text = _read(path)
    if isinstance(text, Err):
        return text

    m = _find(text.value, path=path, pattern=pattern)
    if isinstance(m, Err):
        return m

    version = SemVer.parse(m.value.group(1))
    assert version is not None
    return Ok(version)


def write_version(*, path: Path, pattern: str, version: SemVer) -> Result[None, ReleaseError]:
    """Replace the first version match in place, keeping the surrounding text."""
    text = _read(path)
    if isinstance(text, Err):
        return text

    m = _find(text.value, path=path, pattern=pattern)
    if isinstance(m, Err):
        return m

    start, end = m.value.span(1)
    updated = text.value[:start] + str(version) + text.value[end:]

    try:
        atomic_write_text(path, updated)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to write version file: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


def bump_version_file(
    *,
    path: Path,
    pattern: str,
    kind: ReleaseBump,
    dry_run: bool = False,
) -> Result[VersionBump, ReleaseError]:
    current = read_version(path=path, pattern=pattern)
    if isinstance(current, Err):
        return current

    new = current.value.bump(kind)
    if dry_run:
        return Ok(VersionBump(current=current.value, new=new, written=False))

    written = write_version(path=path, pattern=pattern, version=new)
    if isinstance(written, Err):
        return written
    return Ok(VersionBump(current=current.value, new=new, written=True))
