from __future__ import annotations

import re
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.services.release.errors import ReleaseError


def extract_release_notes(changelog: str, version: str) -> str | None:
    """Return the body of the ``## [<version>]`` section, or None.

    The section runs from the line after its heading to the next ``## [``
    heading or the end of the document.
    """
    pattern = re.compile(
        rf"^## \[{re.escape(version)}\][^\n]*(?:\n|\Z)(.*?)(?=^## \[|\Z)",
        re.MULTILINE | re.DOTALL,
    )
    m = pattern.search(changelog)
    if m is None:
        return None
    body = m.group(1).strip()
    return body or None


def read_release_notes(*, changelog_path: Path, version: str) -> Result[str | None, ReleaseError]:
    if not changelog_path.exists():
        return Ok(None)
    try:
        text = changelog_path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to read changelog: {e}",
                hint=str(changelog_path),
            )
        )
    return Ok(extract_release_notes(text, version))
