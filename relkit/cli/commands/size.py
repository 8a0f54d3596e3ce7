from __future__ import annotations

import typer

from relkit.cli.context import build_context
from relkit.core.errors import ErrorCode
from relkit.core.result import Err
from relkit.output.console import Style
from relkit.services.size_check import check_file_sizes


def check_file_size(
    max_lines: int | None = typer.Option(
        None, "--max-lines", help="Maximum lines per file (default from relkit.toml, else 1000)."
    ),
) -> None:
    """Fail when a source file exceeds the line limit."""
    ctx = build_context()
    limit = max_lines if max_lines is not None else ctx.config.size.max_lines
    extension = ctx.config.size.extension

    ctx.console.print(f"Checking {extension} files for max {limit} lines...")
    result = check_file_sizes(ctx.project.root, max_lines=limit, extension=extension)
    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    report = result.value
    if not report.ok:
        ctx.console.error("File size violations found:")
        for v in report.violations:
            ctx.console.print(f"  {v.path}: {v.lines} lines (max: {limit})", Style.HINT)
        ctx.console.print(f"Total violations: {len(report.violations)}", Style.HINT)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.success(f"All {report.checked} files are within the limit.")
