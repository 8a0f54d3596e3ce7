"""Error codes for CLI exit status.

Every command maps its failure onto one of these codes so that CI jobs can
tell a bad invocation apart from a broken environment or a failed push.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: User error (bad flag, missing changelog fragment, oversized file)
    - 2: Environment error (missing gh/git, malformed relkit.toml)
    - 3: Network error (push or release creation failed)
    - 4: I/O error (version file or changelog unreadable/unwritable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 3
    IO_ERROR = 4
