from __future__ import annotations

import typer

from relkit.cli.commands._helpers import emit_github_output, exit_on_error, require_bump
from relkit.cli.context import build_context
from relkit.services.release.version_file import bump_version_file


def bump_version(
    bump_type: str | None = typer.Option(
        None, "--bump-type", help="Which component to bump: major, minor or patch."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the new version without writing it."),
) -> None:
    """Bump the version in the version-bearing source file."""
    ctx = build_context()
    kind = require_bump(bump_type, ctx)

    path = ctx.project.version_file(ctx.config)
    bump = exit_on_error(
        bump_version_file(
            path=path,
            pattern=ctx.config.version.pattern,
            kind=kind,
            dry_run=dry_run,
        ),
        ctx,
    )

    ctx.console.print(f"Current version: {bump.current}")
    ctx.console.print(f"New version: {bump.new}")
    if bump.written:
        ctx.console.success(f"Updated {path}")
    else:
        ctx.console.print("Dry run - no changes made")

    emit_github_output({"new_version": str(bump.new)}, ctx)
