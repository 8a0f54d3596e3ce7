"""Integer and float arithmetic."""

from __future__ import annotations

__all__ = ["add", "add_float", "multiply", "multiply_float"]


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def add_float(a: float, b: float) -> float:
    """Return the sum of two floats."""
    return a + b


def multiply(a: int, b: int) -> int:
    """Return the product of two integers."""
    return a * b


def multiply_float(a: float, b: float) -> float:
    """Return the product of two floats."""
    return a * b
