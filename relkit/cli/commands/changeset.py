from __future__ import annotations

import typer

from relkit.cli.context import build_context
from relkit.core.errors import ErrorCode
from relkit.git.repository import Repository
from relkit.output.console import Style
from relkit.services.release.ci import base_branch_from_env
from relkit.services.release.config import FRAGMENT_FILENAME_FORMAT
from relkit.services.release.changeset import validate_changeset as validate


def validate_changeset() -> None:
    """Fail when source code changed without a new changelog fragment.

    The base branch comes from $GITHUB_BASE_REF, falling back to the
    configured default.
    """
    ctx = build_context()
    console = ctx.console
    fragments_dir = ctx.config.changelog.fragments_dir

    console.print("Validating changelog fragment...")
    report = validate(
        repo=Repository(ctx.project.root),
        fragments_dir=fragments_dir,
        base_branch=base_branch_from_env(ctx.config.git.base_branch),
        remote=ctx.config.git.remote,
    )

    if report.added_fragments:
        console.header("Found changelog fragment(s):")
        for fragment in report.added_fragments:
            console.print(f"  - {fragment}")
        console.success("Validation passed!")
        return

    if not report.source_changed:
        console.print("No source code changes detected.")
        console.print("Changelog fragment not required for non-source changes.")
        console.success("Validation passed!")
        return

    console.error("Source code was changed but no changelog fragment was added.")
    console.print(f"Please create a changelog fragment in {fragments_dir}/", Style.HINT)
    console.print(f"Filename format: {FRAGMENT_FILENAME_FORMAT}", Style.HINT)
    console.print("Example content:", Style.HINT)
    console.print("### Added", Style.HINT)
    console.print("- New feature description", Style.HINT)
    console.print(f"See {fragments_dir}/README.md for more details.", Style.HINT)
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))
