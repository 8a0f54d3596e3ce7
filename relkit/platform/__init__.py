"""Platform abstraction layer."""

from .files import append_line, atomic_write_text
from .process import ProcessError, run

__all__ = [
    # files
    "append_line",
    "atomic_write_text",
    # process
    "ProcessError",
    "run",
]
