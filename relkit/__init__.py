"""Release automation toolkit with a small placeholder library."""

__version__ = "0.1.0"
