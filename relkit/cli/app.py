from __future__ import annotations

import os
from pathlib import Path

import typer

from relkit import __version__
from relkit.cli.commands.bump import bump_version
from relkit.cli.commands.changelog import collect_changelog
from relkit.cli.commands.changeset import validate_changeset
from relkit.cli.commands.release import create_release
from relkit.cli.commands.size import check_file_size
from relkit.cli.commands.version_commit import version_and_commit
from relkit.core.errors import ErrorCode
from relkit.core.project import ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command("bump-version")(bump_version)
app.command("collect-changelog")(collect_changelog)
app.command("validate-changeset")(validate_changeset)
app.command("create-release")(create_release)
app.command("check-file-size")(check_file_size)
app.command("version-and-commit")(version_and_commit)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Project root (overrides auto detection)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    if root is not None:
        try:
            resolved = root.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --root: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not resolved.is_dir():
            typer.echo(f"error: --root '{resolved}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[ENV_VAR] = str(resolved)


def main() -> None:
    app()
