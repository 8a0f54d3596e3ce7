"""Git operations used by the release workflow.

Usage:
    from relkit.git import Repository

    repo = Repository(Path("/path/to/repo"))
    added = repo.diff_names("origin/main...HEAD", diff_filter="A")
"""

from relkit.git.repository import (
    GitError,
    Repository,
)

__all__ = [
    "GitError",
    "Repository",
]
