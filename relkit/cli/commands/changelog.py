from __future__ import annotations

import typer

from relkit.cli.commands._helpers import exit_on_error, exit_usage
from relkit.cli.context import build_context
from relkit.output.console import Style
from relkit.services.release.changelog import collect_changelog as collect
from relkit.services.release.semver import SemVer
from relkit.services.release.version_file import read_version


def collect_changelog(
    version: str | None = typer.Option(
        None, "--version", help="Version heading to use (defaults to the version file)."
    ),
) -> None:
    """Fold changelog.d fragments into CHANGELOG.md and delete them."""
    ctx = build_context()

    if version is None:
        current = exit_on_error(
            read_version(
                path=ctx.project.version_file(ctx.config),
                pattern=ctx.config.version.pattern,
            ),
            ctx,
        )
        version = str(current)
    elif SemVer.parse(version) is None:
        exit_usage(f"invalid --version (expected MAJOR.MINOR.PATCH): {version}", ctx)

    ctx.console.print(f"Collecting changelog for version {version}...")

    report = exit_on_error(
        collect(
            fragments_dir=ctx.project.fragments_dir(ctx.config),
            changelog_path=ctx.project.changelog_path(ctx.config),
            version=version,
        ),
        ctx,
    )
    if report is None:
        ctx.console.print("No changelog fragments found.")
        return

    ctx.console.print(f"Found {len(report.deleted)} fragment(s)")
    ctx.console.success(f"Updated {report.changelog_path}")
    for name in report.deleted:
        ctx.console.print(f"Deleted: {name}", Style.DIM)
    ctx.console.success("Changelog collection complete.")
