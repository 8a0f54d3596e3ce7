from __future__ import annotations

import typer

from relkit.cli.commands._helpers import exit_on_error, exit_usage
from relkit.cli.context import build_context
from relkit.services.release.gh import create_release as gh_create_release
from relkit.services.release.gh import ensure_gh_available
from relkit.services.release.notes import read_release_notes
from relkit.services.release.semver import SemVer


def create_release(
    version: str | None = typer.Option(None, "--version", help="Version to release (X.Y.Z)."),
    repository: str | None = typer.Option(
        None, "--repository", help="Target repository as owner/repo (defaults to gh's)."
    ),
) -> None:
    """Create a GitHub release with notes taken from CHANGELOG.md."""
    ctx = build_context()

    if not version:
        exit_usage("--version is required", ctx)
    version = version.removeprefix("v")
    if SemVer.parse(version) is None:
        exit_usage(f"invalid --version (expected MAJOR.MINOR.PATCH): {version}", ctx)

    ctx.console.print(f"Creating GitHub release for version {version}...")

    notes = exit_on_error(
        read_release_notes(changelog_path=ctx.project.changelog_path(ctx.config), version=version),
        ctx,
    )
    if notes:
        ctx.console.print("Found release notes in CHANGELOG.md")
    else:
        ctx.console.print("No release notes found, using default message")

    exit_on_error(ensure_gh_available(), ctx)
    release = exit_on_error(
        gh_create_release(
            project_root=ctx.project.root,
            version=version,
            notes=notes,
            repository=repository,
        ),
        ctx,
    )
    if release.status == "exists":
        ctx.console.print(f"Release {release.tag} already exists, skipping.")
    else:
        ctx.console.success(f"Created release: {release.tag}")
