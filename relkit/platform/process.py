"""Subprocess execution for git and gh.

Nothing else in relkit starts processes. Output is captured as text and a
non-zero exit, a timeout or a missing executable all come back as a
ProcessError value.

Usage:
    match run(["git", "diff", "--name-only", "origin/main...HEAD"], cwd=root):
        case Ok(stdout):
            paths = stdout.splitlines()
        case Err(error):
            console.error(str(error))
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]

# returncode used when the process never ran or was killed on timeout
NOT_RUN = -1


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that failed, with whatever it printed.

    Attributes:
        command: argv of the command.
        returncode: exit status, or NOT_RUN.
        stdout: captured standard output.
        stderr: captured standard error, or a description of why it never ran.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        shown = " ".join(self.command[:3])
        if len(self.command) > 3:
            shown += " ..."
        return f"{shown} failed (exit {self.returncode})"


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
    input: str | None = None,
) -> Result[str, ProcessError]:
    """Run ``cmd`` in ``cwd`` and return its stdout.

    Args:
        cmd: argv to execute.
        cwd: working directory.
        env: full environment, or None to inherit ours.
        timeout: seconds before the process is killed.
        input: text written to the process's stdin.
    """
    argv = tuple(cmd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            input=input,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        partial = e.stdout if isinstance(e.stdout, str) else ""
        return Err(ProcessError(argv, NOT_RUN, partial, f"Command timed out after {timeout}s"))
    except OSError as e:
        return Err(ProcessError(argv, NOT_RUN, "", str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(argv, proc.returncode, proc.stdout, proc.stderr))
    return Ok(proc.stdout)
