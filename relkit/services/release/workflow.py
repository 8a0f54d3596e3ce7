"""Bump, collect, commit, tag and push in a single run.

Steps:
1. (CI only) configure the bot git identity
2. bump the version file
3. fold changelog fragments into CHANGELOG.md
4. stage everything and commit when the index changed
5. create the annotated release tag
6. push the branch, then the tags
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.git.repository import GitError, Repository
from relkit.output.console import ConsoleProtocol, Style
from relkit.services.release.changelog import collect_changelog
from relkit.services.release.config import (
    CI_GIT_USER_EMAIL,
    CI_GIT_USER_NAME,
    DEFAULT_BUMP,
    release_commit_message,
    release_title,
)
from relkit.services.release.errors import ReleaseError, ReleaseErrorKind
from relkit.services.release.fragments import list_fragments
from relkit.services.release.model import ReleaseBump, ReleaseMode, max_bump
from relkit.services.release.version_file import read_version, write_version


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    mode: ReleaseMode
    bump: ReleaseBump | None
    dry_run: bool = False
    ci: bool = False


@dataclass(frozen=True, slots=True)
class ReleasePaths:
    root: Path
    version_file: Path
    version_pattern: str
    changelog: Path
    fragments_dir: Path


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    previous: str
    version: str
    tag: str
    bump: ReleaseBump
    committed: bool
    pushed: bool


def _git_err(e: GitError, *, kind: ReleaseErrorKind = "git_failed") -> Err[ReleaseError]:
    return Err(ReleaseError(kind=kind, message=f"git {e.command} failed", hint=e.message or None))


def resolve_bump(
    *, request: ReleaseRequest, fragments_dir: Path
) -> Result[ReleaseBump | None, ReleaseError]:
    """Decide the bump type for this run.

    In changeset mode the largest bump declared by pending fragments wins and
    the requested bump is only a fallback. Ok(None) means nothing to release.
    """
    if request.mode == "instant":
        if request.bump is None:
            return Err(
                ReleaseError(
                    kind="invalid_input",
                    message="--bump-type is required (major, minor, or patch)",
                    hint="or use --mode changeset",
                )
            )
        return Ok(request.bump)

    fragments = list_fragments(fragments_dir)
    if isinstance(fragments, Err):
        return fragments
    if not fragments.value:
        return Ok(None)

    declared = [f.bump for f in fragments.value if f.bump is not None]
    return Ok(max_bump(declared) or request.bump or DEFAULT_BUMP)


def version_and_commit(
    *,
    paths: ReleasePaths,
    request: ReleaseRequest,
    console: ConsoleProtocol,
    today: date | None = None,
) -> Result[ReleaseOutcome | None, ReleaseError]:
    """Run the release workflow. Ok(None) means there was nothing to release."""
    bump = resolve_bump(request=request, fragments_dir=paths.fragments_dir)
    if isinstance(bump, Err):
        return bump
    if bump.value is None:
        console.print("No changesets found, nothing to release.")
        return Ok(None)
    kind = bump.value

    current = read_version(path=paths.version_file, pattern=paths.version_pattern)
    if isinstance(current, Err):
        return current

    new = current.value.bump(kind)
    tag = new.to_tag()
    console.header(f"Bumping version: {current.value} -> {new} ({kind})")

    if request.dry_run:
        console.print(f"Would update {paths.version_file}", Style.DIM)
        console.print(f"Would collect changelog into {paths.changelog}", Style.DIM)
        console.print(f"Would commit '{release_commit_message(str(new))}'", Style.DIM)
        console.print(f"Would tag {tag} and push", Style.DIM)
        console.print("Dry run - no changes made")
        return Ok(
            ReleaseOutcome(
                previous=str(current.value),
                version=str(new),
                tag=tag,
                bump=kind,
                committed=False,
                pushed=False,
            )
        )

    repo = Repository(paths.root)

    if request.ci:
        for key, value in (("user.name", CI_GIT_USER_NAME), ("user.email", CI_GIT_USER_EMAIL)):
            configured = repo.set_config(key, value)
            if isinstance(configured, Err):
                return _git_err(configured.error)

    written = write_version(path=paths.version_file, pattern=paths.version_pattern, version=new)
    if isinstance(written, Err):
        return written
    console.success(f"Updated version in {paths.version_file}")

    collected = collect_changelog(
        fragments_dir=paths.fragments_dir,
        changelog_path=paths.changelog,
        version=str(new),
        today=today,
    )
    match collected:
        case Err(e):
            console.warning(f"changelog not collected: {e.message}")
        case Ok(None):
            console.print("No changelog fragments to collect", Style.DIM)
        case Ok(report):
            console.success(f"Collected {len(report.deleted)} fragment(s) into {paths.changelog}")

    staged = repo.add_all()
    if isinstance(staged, Err):
        return _git_err(staged.error)

    dirty = repo.has_staged_changes()
    if isinstance(dirty, Err):
        return _git_err(dirty.error)

    committed = False
    if dirty.value:
        commit = repo.commit(release_commit_message(str(new)))
        if isinstance(commit, Err):
            return _git_err(commit.error)
        committed = True
        console.success(f"Committed release v{new}")
    else:
        console.print("No changes to commit", Style.DIM)

    tagged = repo.tag_annotated(tag, release_title(tag))
    if isinstance(tagged, Err):
        return _git_err(tagged.error)
    console.success(f"Tagged {tag}")

    for tags in (False, True):
        pushed = repo.push(tags=tags)
        if isinstance(pushed, Err):
            return _git_err(pushed.error, kind="push_failed")
    console.success(f"Successfully released version {new}")

    return Ok(
        ReleaseOutcome(
            previous=str(current.value),
            version=str(new),
            tag=tag,
            bump=kind,
            committed=committed,
            pushed=True,
        )
    )
