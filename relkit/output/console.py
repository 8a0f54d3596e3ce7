"""Console output abstraction.

Release commands report progress through ConsoleProtocol rather than printing
directly. RichConsole is used by the CLI; MockConsole records everything so
tests can assert on what a command said.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    BOLD = auto()
    HEADER = auto()
    # dimmed detail belonging to an error (guidance, offending items)
    HINT = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Styled console output.

    ``error`` output and lines printed with ``Style.ERROR`` or ``Style.HINT``
    are meant for standard error; everything else goes to standard output.
    """

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def newline(self) -> None: ...


_RICH_STYLES: dict[Style, str] = {
    Style.DEFAULT: "",
    Style.SUCCESS: "green",
    Style.ERROR: "red bold",
    Style.WARNING: "yellow",
    Style.INFO: "cyan",
    Style.DIM: "dim",
    Style.BOLD: "bold",
    Style.HEADER: "blue bold",
    Style.HINT: "dim",
}

_STDERR_STYLES = frozenset({Style.ERROR, Style.HINT})

# Label printed before success/error/warning/info messages.
_PREFIXES: dict[Style, str] = {
    Style.SUCCESS: "OK",
    Style.ERROR: "error:",
    Style.WARNING: "warning:",
    Style.INFO: "info:",
}


class RichConsole:
    """ConsoleProtocol backed by rich; errors are written to stderr."""

    def __init__(self) -> None:
        # rich stays out of the relkit.mathops import path
        from rich.console import Console

        self._out = Console(highlight=False)
        self._err = Console(stderr=True, highlight=False)

    def _target(self, style: Style) -> Any:
        return self._err if style in _STDERR_STYLES else self._out

    def _labelled(self, style: Style, message: str) -> None:
        target = self._target(style)
        target.print(_PREFIXES[style], style=_RICH_STYLES[style], end=" ", markup=False)
        target.print(message, markup=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._target(style).print(message, style=_RICH_STYLES[style] or None, markup=False)

    def success(self, message: str) -> None:
        self._labelled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labelled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labelled(Style.INFO, message)

    def header(self, message: str) -> None:
        self._out.print()
        self._out.print(message, style=_RICH_STYLES[Style.HEADER], markup=False)

    def newline(self) -> None:
        self._out.print()


@dataclass
class OutputRecord:
    """One line captured by MockConsole."""

    message: str
    style: Style


@dataclass
class MockConsole:
    """ConsoleProtocol that records every line instead of printing it.

    Labelled lines keep their prefix (``OK done``, ``error: broken``) so tests
    read like the terminal would.
    """

    outputs: list[OutputRecord] = field(default_factory=lambda: list[OutputRecord]())

    def _labelled(self, style: Style, message: str) -> None:
        self.outputs.append(OutputRecord(f"{_PREFIXES[style]} {message}", style))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self._labelled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled(Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._labelled(Style.WARNING, message)

    def info(self, message: str) -> None:
        self._labelled(Style.INFO, message)

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    @property
    def stderr_messages(self) -> list[str]:
        """Messages RichConsole would have written to standard error."""
        return [o.message for o in self.outputs if o.style in _STDERR_STYLES]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Records whose message contains ``substring``."""
        return [o for o in self.outputs if substring in o.message]
