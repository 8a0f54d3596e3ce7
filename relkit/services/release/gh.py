from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import run as run_process
from relkit.services.release.config import release_title
from relkit.services.release.errors import ReleaseError
from relkit.services.release.semver import tag_for_version
from relkit.services.release.timeouts import GH_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class GhRelease:
    tag: str
    status: Literal["created", "exists"]


def ensure_gh_available() -> Result[None, ReleaseError]:
    if shutil.which("gh") is None:
        return Err(
            ReleaseError(
                kind="gh_missing",
                message="gh: missing",
                hint="Install GitHub CLI: https://cli.github.com/",
            )
        )
    return Ok(None)


def create_release(
    *,
    project_root: Path,
    version: str,
    notes: str | None,
    repository: str | None = None,
) -> Result[GhRelease, ReleaseError]:
    """Run ``gh release create`` with the notes passed on stdin.

    An already existing release is not an error.
    """
    tag = tag_for_version(version)
    title = release_title(tag)
    body = notes or title

    cmd = ["gh", "release", "create", tag, "--title", title]
    if repository:
        cmd += ["--repo", repository]
    cmd += ["--notes-file", "-"]

    result = run_process(cmd, cwd=project_root, timeout=GH_TIMEOUT_SECONDS, input=body)
    if isinstance(result, Ok):
        return Ok(GhRelease(tag=tag, status="created"))

    error = result.error
    if "already exists" in f"{error.stderr}\n{error.stdout}":
        return Ok(GhRelease(tag=tag, status="exists"))

    return Err(
        ReleaseError(
            kind="gh_failed",
            message=f"gh release create failed for {tag}",
            hint=error.stderr.strip() or None,
        )
    )
