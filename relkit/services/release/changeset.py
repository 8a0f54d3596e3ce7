"""Check that a pull request carries a changelog fragment.

Only fragments added by the branch count; fragments already present on the
base branch belong to someone else's change.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok
from relkit.git.repository import Repository
from relkit.services.release.config import EXCLUDE_PATTERNS, SOURCE_PATTERNS
from relkit.services.release.fragments import is_fragment_name


@dataclass(frozen=True, slots=True)
class ChangesetReport:
    base_ref: str
    added_fragments: tuple[str, ...]
    source_changed: bool

    @property
    def ok(self) -> bool:
        return bool(self.added_fragments) or not self.source_changed


def is_source_path(path: str, *, fragments_dir: str) -> bool:
    excludes = (*EXCLUDE_PATTERNS, rf"^{re.escape(fragments_dir.rstrip('/'))}/")
    is_source = any(re.search(p, path) for p in SOURCE_PATTERNS)
    is_excluded = any(re.search(p, path) for p in excludes)
    return is_source and not is_excluded


def filter_fragment_paths(paths: list[str], *, fragments_dir: str) -> list[str]:
    prefix = fragments_dir.rstrip("/") + "/"
    return [p for p in paths if p.startswith(prefix) and is_fragment_name(Path(p).name)]


def _fragments_on_disk(root: Path, fragments_dir: str) -> list[str]:
    directory = root / fragments_dir
    if not directory.is_dir():
        return []
    prefix = fragments_dir.rstrip("/")
    return sorted(
        f"{prefix}/{p.name}" for p in directory.iterdir() if p.is_file() and is_fragment_name(p.name)
    )


def validate_changeset(
    *,
    repo: Repository,
    fragments_dir: str,
    base_branch: str,
    remote: str = "origin",
) -> ChangesetReport:
    """Compare ``<remote>/<base>...HEAD`` and report fragments and source changes.

    When git yields no added files (shallow clone, missing remote ref) the
    check falls back to any fragment present in the working tree.
    """
    base_ref = f"{remote}/{base_branch}"
    revisions = f"{base_ref}...HEAD"

    added = repo.diff_names(revisions, diff_filter="A")
    added_paths = added.value if isinstance(added, Ok) else []
    if added_paths:
        fragments = filter_fragment_paths(added_paths, fragments_dir=fragments_dir)
    else:
        fragments = _fragments_on_disk(repo.path, fragments_dir)

    changed = repo.diff_names(revisions)
    source_changed = False
    if not isinstance(changed, Err):
        source_changed = any(
            is_source_path(p, fragments_dir=fragments_dir) for p in changed.value
        )

    return ChangesetReport(
        base_ref=base_ref,
        added_fragments=tuple(fragments),
        source_changed=source_changed,
    )
