"""Fold changelog fragments into CHANGELOG.md."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.files import atomic_write_text
from relkit.services.release.config import CHANGELOG_HEADER, CHANGELOG_INSERT_MARKER
from relkit.services.release.errors import ReleaseError
from relkit.services.release.fragments import Fragment, delete_fragments, list_fragments

_VERSION_HEADING_RE = re.compile(r"^## \[", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class CollectedChangelog:
    version: str
    changelog_path: Path
    deleted: tuple[str, ...]


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def render_entry(*, version: str, fragments: list[Fragment], today: date) -> str:
    entry = f"## [{version}] - {today.isoformat()}\n\n"
    for fragment in fragments:
        if fragment.body:
            entry += fragment.body + "\n\n"
    return entry


def insert_entry(changelog: str | None, entry: str) -> str:
    """Place a rendered entry into the changelog text.

    The entry goes after the insert marker when present, otherwise before the
    first ``## [`` heading, otherwise at the end of the document.
    """
    text = CHANGELOG_HEADER if changelog is None else changelog

    if CHANGELOG_INSERT_MARKER in text:
        return text.replace(
            CHANGELOG_INSERT_MARKER, CHANGELOG_INSERT_MARKER + "\n\n" + entry, 1
        )

    if _VERSION_HEADING_RE.search(text):
        return _VERSION_HEADING_RE.sub(lambda _m: entry + "## [", text, count=1)

    return text.rstrip() + "\n\n" + entry


def update_changelog(
    *,
    path: Path,
    version: str,
    fragments: list[Fragment],
    today: date,
) -> Result[None, ReleaseError]:
    existing: str | None = None
    if path.exists():
        try:
            existing = path.read_text(encoding="utf-8")
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="io_failed",
                    message=f"failed to read changelog: {e}",
                    hint=str(path),
                )
            )

    entry = render_entry(version=version, fragments=fragments, today=today)
    try:
        atomic_write_text(path, insert_entry(existing, entry))
    except OSError as e:
        return Err(
            ReleaseError(
                kind="io_failed",
                message=f"failed to write changelog: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


def collect_changelog(
    *,
    fragments_dir: Path,
    changelog_path: Path,
    version: str,
    today: date | None = None,
) -> Result[CollectedChangelog | None, ReleaseError]:
    """Fold pending fragments into the changelog and delete them.

    Returns Ok(None) when there is nothing to collect. Fragments are only
    deleted after the changelog has been written.
    """
    fragments = list_fragments(fragments_dir)
    if isinstance(fragments, Err):
        return fragments
    if not fragments.value:
        return Ok(None)

    updated = update_changelog(
        path=changelog_path,
        version=version,
        fragments=fragments.value,
        today=today or utc_today(),
    )
    if isinstance(updated, Err):
        return updated

    deleted = delete_fragments(fragments.value)
    if isinstance(deleted, Err):
        return deleted

    return Ok(
        CollectedChangelog(
            version=version,
            changelog_path=changelog_path,
            deleted=tuple(deleted.value),
        )
    )
