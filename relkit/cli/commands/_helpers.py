"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from relkit.core.errors import ErrorCode
from relkit.core.result import Err, Result
from relkit.output.console import Style
from relkit.services.release.ci import write_github_output
from relkit.services.release.errors import ReleaseError
from relkit.services.release.model import ReleaseBump, parse_bump

if TYPE_CHECKING:
    from relkit.cli.context import CLIContext


def release_error_code(kind: str) -> ErrorCode:
    if kind in {"gh_missing", "git_failed"}:
        return ErrorCode.ENV_ERROR
    if kind in {"gh_failed", "push_failed"}:
        return ErrorCode.NETWORK_ERROR
    if kind in {"io_failed"}:
        return ErrorCode.IO_ERROR
    return ErrorCode.USER_ERROR


def exit_release(error: ReleaseError, ctx: CLIContext) -> NoReturn:
    ctx.console.error(error.message)
    if error.hint:
        ctx.console.print(f"hint: {error.hint}", Style.HINT)
    raise typer.Exit(code=int(release_error_code(error.kind)))


def exit_on_error[T](result: Result[T, ReleaseError], ctx: CLIContext) -> T:
    """Return the Ok value, or report the ReleaseError and exit."""
    if isinstance(result, Err):
        exit_release(result.error, ctx)
    return result.value


def exit_usage(message: str, ctx: CLIContext) -> NoReturn:
    ctx.console.error(message)
    raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def require_bump(bump_type: str | None, ctx: CLIContext) -> ReleaseBump:
    if not bump_type:
        exit_usage("--bump-type is required (major, minor, or patch)", ctx)
    bump = parse_bump(bump_type)
    if bump is None:
        exit_usage("--bump-type must be major, minor, or patch", ctx)
    return bump


def emit_github_output(values: dict[str, str], ctx: CLIContext) -> None:
    exit_on_error(write_github_output(values), ctx)
