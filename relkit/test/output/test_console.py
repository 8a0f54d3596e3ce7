"""Tests for relkit.output.console module."""

from __future__ import annotations

import pytest

from relkit.output.console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"
        assert str(Style.DEFAULT) == "default"


class TestMockConsole:
    """MockConsole records what commands say."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs == [OutputRecord("hello", Style.DEFAULT)]

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("broken")
        console.warning("careful")
        console.info("fyi")
        assert console.messages == ["OK done", "error: broken", "warning: careful", "info: fyi"]
        assert [o.style for o in console.outputs] == [
            Style.SUCCESS,
            Style.ERROR,
            Style.WARNING,
            Style.INFO,
        ]

    def test_header_and_newline(self) -> None:
        console = MockConsole()
        console.header("Section")
        console.newline()
        assert console.outputs == [
            OutputRecord("Section", Style.HEADER),
            OutputRecord("", Style.DEFAULT),
        ]

    def test_text_and_clear(self) -> None:
        console = MockConsole()
        console.print("line1")
        console.print("line2")
        assert console.text == "line1\nline2"
        console.clear()
        assert console.outputs == []

    def test_has_error_and_warning(self) -> None:
        console = MockConsole()
        assert console.has_error() is False
        assert console.has_warning() is False
        console.warning("hmm")
        assert console.has_warning() is True
        assert console.has_error() is False
        console.error("oops")
        assert console.has_error() is True

    def test_find(self) -> None:
        console = MockConsole()
        console.print("hello world")
        console.success("hello there")
        console.print("goodbye")
        matches = console.find("hello")
        assert [m.message for m in matches] == ["hello world", "OK hello there"]

    def test_stderr_messages(self) -> None:
        console = MockConsole()
        console.print("checking")
        console.error("broken")
        console.print("  a.py: 12 lines", Style.HINT)
        console.print("dimmed", Style.DIM)
        assert console.stderr_messages == ["error: broken", "  a.py: 12 lines"]


class TestRichConsole:
    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("bad thing")
        console.print("fine")
        captured = capsys.readouterr()
        assert "bad thing" in captured.err
        assert "fine" in captured.out
        assert "bad thing" not in captured.out

    def test_hint_lines_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("Filename format: YYYYMMDD_HHMMSS_description.md", Style.HINT)
        console.print("progress", Style.DIM)
        captured = capsys.readouterr()
        assert "Filename format" in captured.err
        assert "Filename format" not in captured.out
        assert "progress" in captured.out

    def test_markup_in_messages_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print("[bold]not markup[/bold]")
        assert "[bold]not markup[/bold]" in capsys.readouterr().out


def test_mock_satisfies_protocol() -> None:
    def use_console(c: ConsoleProtocol) -> None:
        c.print("test")
        c.success("ok")
        c.error("err")
        c.warning("warn")
        c.info("info")
        c.header("hdr")
        c.newline()

    mock = MockConsole()
    use_console(mock)
    assert len(mock.outputs) == 7
