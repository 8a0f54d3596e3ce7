"""Changelog fragments (changesets).

A fragment is one markdown file in the fragment directory describing a single
change. It may open with a small front-matter block declaring its bump type:

    ---
    bump: minor
    ---

    ### Added
    - New feature description

Fragments are read in filename order, which is chronological when the
filenames carry a ``YYYYMMDD_HHMMSS_`` prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.services.release.config import FRAGMENT_README, FRAGMENT_SUFFIX
from relkit.services.release.errors import ReleaseError
from relkit.services.release.model import ReleaseBump, parse_bump

_FENCE = "---"


@dataclass(frozen=True, slots=True)
class Fragment:
    name: str
    path: Path
    body: str
    bump: ReleaseBump | None = None


def is_fragment_name(name: str) -> bool:
    return name.endswith(FRAGMENT_SUFFIX) and name != FRAGMENT_README


def parse_fragment(text: str, *, name: str) -> Result[tuple[str, ReleaseBump | None], ReleaseError]:
    """Split front matter from the body and return ``(body, bump)``."""
    content = text.strip()
    lines = content.splitlines()
    if not lines or lines[0].strip() != _FENCE:
        return Ok((content, None))

    try:
        close = next(i for i, ln in enumerate(lines[1:], start=1) if ln.strip() == _FENCE)
    except StopIteration:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"unterminated front matter in {name}",
                hint="close the block with a '---' line",
            )
        )

    bump: ReleaseBump | None = None
    for line in lines[1:close]:
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        if not sep:
            return Err(
                ReleaseError(
                    kind="invalid_input",
                    message=f"invalid front matter line in {name}: {line.strip()}",
                    hint="expected 'key: value'",
                )
            )
        if key.strip() != "bump":
            continue
        bump = parse_bump(value)
        if bump is None:
            return Err(
                ReleaseError(
                    kind="invalid_input",
                    message=f"invalid bump in {name}: {value.strip()}",
                    hint="expected major, minor or patch",
                )
            )

    body = "\n".join(lines[close + 1 :]).strip()
    return Ok((body, bump))


def list_fragments(fragments_dir: Path) -> Result[list[Fragment], ReleaseError]:
    """Read all fragments, sorted by filename. A missing directory means none."""
    if not fragments_dir.is_dir():
        return Ok([])

    fragments: list[Fragment] = []
    for path in sorted(fragments_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file() or not is_fragment_name(path.name):
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="io_failed",
                    message=f"failed to read fragment {path.name}: {e}",
                    hint=str(path),
                )
            )

        parsed = parse_fragment(text, name=path.name)
        if isinstance(parsed, Err):
            return parsed
        body, bump = parsed.value
        fragments.append(Fragment(name=path.name, path=path, body=body, bump=bump))

    return Ok(fragments)


def delete_fragments(fragments: list[Fragment]) -> Result[list[str], ReleaseError]:
    """Delete fragment files, returning the names removed."""
    deleted: list[str] = []
    for fragment in fragments:
        try:
            fragment.path.unlink()
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="io_failed",
                    message=f"failed to delete fragment {fragment.name}: {e}",
                    hint=str(fragment.path),
                )
            )
        deleted.append(fragment.name)
    return Ok(deleted)
