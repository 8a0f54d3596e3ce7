from __future__ import annotations

import typer

from relkit.cli.commands._helpers import emit_github_output, exit_on_error, exit_usage
from relkit.cli.context import build_context
from relkit.services.release.ci import is_ci
from relkit.services.release.model import ReleaseBump, parse_bump, parse_mode
from relkit.services.release.workflow import ReleasePaths, ReleaseRequest
from relkit.services.release.workflow import version_and_commit as run_workflow


def version_and_commit(
    bump_type: str | None = typer.Option(
        None, "--bump-type", help="major, minor or patch (fallback in changeset mode)."
    ),
    mode: str = typer.Option(
        "instant",
        "--mode",
        help="instant: use --bump-type; changeset: derive the bump from pending fragments.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the plan without changing anything."),
) -> None:
    """Bump the version, collect the changelog, commit, tag and push."""
    ctx = build_context()

    release_mode = parse_mode(mode)
    if release_mode is None:
        exit_usage("--mode must be changeset or instant", ctx)

    bump: ReleaseBump | None = None
    if bump_type:
        bump = parse_bump(bump_type)
        if bump is None:
            exit_usage("--bump-type must be major, minor, or patch", ctx)

    project, config = ctx.project, ctx.config
    outcome = exit_on_error(
        run_workflow(
            paths=ReleasePaths(
                root=project.root,
                version_file=project.version_file(config),
                version_pattern=config.version.pattern,
                changelog=project.changelog_path(config),
                fragments_dir=project.fragments_dir(config),
            ),
            request=ReleaseRequest(mode=release_mode, bump=bump, dry_run=dry_run, ci=is_ci()),
            console=ctx.console,
        ),
        ctx,
    )
    if outcome is None or dry_run:
        return

    emit_github_output({"new_version": outcome.version, "tag": outcome.tag}, ctx)
