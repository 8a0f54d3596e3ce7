"""Git repository abstraction.

Repository wraps the handful of git commands the release workflow needs.
All operations return Result types.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.diff_names("origin/main...HEAD", diff_filter="A"):
        case Ok(paths):
            print(paths)
        case Err(e):
            print(f"diff failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import ProcessError
from relkit.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A single git working tree.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def diff_names(
        self, revisions: str, *, diff_filter: str | None = None
    ) -> Result[list[str], GitError]:
        """List paths changed between revisions (e.g. ``origin/main...HEAD``).

        Args:
            revisions: Revision range passed to git diff.
            diff_filter: Optional --diff-filter letters (``A`` for added files).
        """
        args = ["diff", "--name-only"]
        if diff_filter:
            args.append(f"--diff-filter={diff_filter}")
        args.append(revisions)

        result = self._run(args)
        match result:
            case Err(e):
                return Err(self._error(f"diff {revisions}", e, "git diff failed"))
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

    def set_config(self, key: str, value: str) -> Result[None, GitError]:
        return self._run_checked(["config", key, value], command=f"config {key}")

    def add_all(self) -> Result[None, GitError]:
        return self._run_checked(["add", "-A"], command="add -A")

    def has_staged_changes(self) -> Result[bool, GitError]:
        """Return whether the index differs from HEAD.

        ``git diff --cached --quiet`` exits 1 when there are differences;
        any other non-zero exit is a real failure.
        """
        result = self._run(["diff", "--cached", "--quiet"])
        match result:
            case Ok(_):
                return Ok(False)
            case Err(e) if e.returncode == 1:
                return Ok(True)
            case Err(e):
                return Err(self._error("diff --cached", e, "git diff --cached failed"))

    def commit(self, message: str) -> Result[None, GitError]:
        return self._run_checked(["commit", "-m", message], command="commit")

    def tag_annotated(self, tag: str, message: str) -> Result[None, GitError]:
        return self._run_checked(["tag", "-a", tag, "-m", message], command=f"tag {tag}")

    def push(self, *, tags: bool = False) -> Result[None, GitError]:
        args = ["push", "--tags"] if tags else ["push"]
        return self._run_checked(args, command=" ".join(args))

    def _run_checked(self, args: list[str], *, command: str) -> Result[None, GitError]:
        result = self._run(args)
        if isinstance(result, Err):
            return Err(self._error(command, result.error, f"git {command} failed"))
        return Ok(None)

    def _error(self, command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or fallback,
            returncode=e.returncode,
        )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        command = args[0] if args else ""
        timeout = (
            _GIT_NETWORK_TIMEOUT_SECONDS
            if command in {"fetch", "pull", "push"}
            else _GIT_TIMEOUT_SECONDS
        )
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, timeout=timeout)
