"""Error payload for the release commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "invalid_input",
    "version_not_found",
    "io_failed",
    "git_failed",
    "push_failed",
    "gh_missing",
    "gh_failed",
    "missing_changeset",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """A failed release step.

    ``kind`` selects the exit code, ``message`` is shown as ``error: ...`` and
    ``hint`` (when present) is printed underneath.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
