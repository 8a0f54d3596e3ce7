from __future__ import annotations

from typing import Literal, cast


ReleaseBump = Literal["major", "minor", "patch"]
ReleaseMode = Literal["instant", "changeset"]

# Ordered from smallest to largest.
BUMP_KINDS: tuple[ReleaseBump, ...] = ("patch", "minor", "major")
RELEASE_MODES: tuple[ReleaseMode, ...] = ("instant", "changeset")


def parse_bump(value: str) -> ReleaseBump | None:
    v = value.strip().lower()
    if v in BUMP_KINDS:
        return cast(ReleaseBump, v)
    return None


def parse_mode(value: str) -> ReleaseMode | None:
    v = value.strip().lower()
    if v in RELEASE_MODES:
        return cast(ReleaseMode, v)
    return None


def max_bump(kinds: list[ReleaseBump]) -> ReleaseBump | None:
    """Return the largest bump in kinds (major > minor > patch)."""
    if not kinds:
        return None
    return max(kinds, key=BUMP_KINDS.index)
