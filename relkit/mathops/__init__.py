"""Placeholder library code: arithmetic and delays.

``VERSION`` mirrors the package version that the release tooling bumps.
"""

from relkit import __version__ as VERSION

from .arithmetic import add, add_float, multiply, multiply_float
from .delay import DelayCancelled, cancel_after, delay, delay_simple

__all__ = [
    "VERSION",
    # arithmetic
    "add",
    "add_float",
    "multiply",
    "multiply_float",
    # delay
    "DelayCancelled",
    "cancel_after",
    "delay",
    "delay_simple",
]
