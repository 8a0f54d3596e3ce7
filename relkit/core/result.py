"""Result type for explicit error handling.

Release steps fail in ordinary ways (a missing version file, a rejected push)
and callers need to decide per step whether to stop, warn or continue. Every
fallible operation therefore returns ``Ok(value)`` or ``Err(error)`` instead of
raising.

Usage:
    def read_version(path: Path) -> Result[str, ReleaseError]:
        ...

    match read_version(path):
        case Ok(version):
            console.print(f"Current version: {version}")
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error payload (usually a frozen dataclass with a message).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
