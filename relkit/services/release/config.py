from __future__ import annotations

from relkit.services.release.model import ReleaseBump


CHANGELOG_HEADER = (
    "# Changelog\n\nAll notable changes to this project will be documented in this file.\n\n"
)
CHANGELOG_INSERT_MARKER = "<!-- changelog-insert-here -->"

FRAGMENT_SUFFIX = ".md"
FRAGMENT_README = "README.md"
FRAGMENT_FILENAME_FORMAT = "YYYYMMDD_HHMMSS_description.md"

DEFAULT_BUMP: ReleaseBump = "patch"

# Paths that count as source changes requiring a changelog fragment.
SOURCE_PATTERNS: tuple[str, ...] = (
    r"^relkit/",
    r"\.py$",
)

# Matches win over SOURCE_PATTERNS. The fragment directory is added at runtime.
EXCLUDE_PATTERNS: tuple[str, ...] = (
    r"(^|/)tests?/",
    r"(^|/)test_[^/]*\.py$",
    r"_test\.py$",
    r"(^|/)conftest\.py$",
    r"^examples/",
    r"^scripts/",
    r"^\.github/",
    r"\.md$",
    r"\.ya?ml$",
    r"\.json$",
    r"\.toml$",
)

CI_GIT_USER_NAME = "github-actions[bot]"
CI_GIT_USER_EMAIL = "github-actions[bot]@users.noreply.github.com"


def release_commit_message(version: str) -> str:
    return f"chore: release v{version}"


def release_title(tag: str) -> str:
    return f"Release {tag}"
