"""GitHub Actions integration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.files import append_line
from relkit.services.release.errors import ReleaseError


def is_ci(env: Mapping[str, str] | None = None) -> bool:
    return bool((os.environ if env is None else env).get("CI"))


def base_branch_from_env(default: str, env: Mapping[str, str] | None = None) -> str:
    value = (os.environ if env is None else env).get("GITHUB_BASE_REF", "").strip()
    return value or default


def write_github_output(
    values: Mapping[str, str],
    env: Mapping[str, str] | None = None,
) -> Result[bool, ReleaseError]:
    """Append ``key=value`` lines to $GITHUB_OUTPUT.

    Returns Ok(False) when not running under GitHub Actions.
    """
    target = (os.environ if env is None else env).get("GITHUB_OUTPUT")
    if not target:
        return Ok(False)

    path = Path(target)
    try:
        for key, value in values.items():
            append_line(path, f"{key}={value}")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to write GITHUB_OUTPUT: {e}",
                hint=target,
            )
        )
    return Ok(True)
