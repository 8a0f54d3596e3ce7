from __future__ import annotations

import threading
import time

from relkit.core.result import Err, Ok
from relkit.mathops import DelayCancelled, cancel_after, delay, delay_simple


def test_delay_completes_after_duration() -> None:
    start = time.monotonic()
    result = delay(0.05)
    elapsed = time.monotonic() - start

    assert result == Ok(None)
    assert elapsed >= 0.045


def test_delay_with_unset_event_completes() -> None:
    cancel = threading.Event()
    start = time.monotonic()
    result = delay(0.05, cancel=cancel)

    assert result == Ok(None)
    assert time.monotonic() - start >= 0.045


def test_delay_respects_cancellation() -> None:
    cancel = threading.Event()
    timer = threading.Timer(0.01, cancel.set)
    timer.start()

    start = time.monotonic()
    result = delay(1.0, cancel=cancel)
    elapsed = time.monotonic() - start
    timer.cancel()

    assert isinstance(result, Err)
    assert isinstance(result.error, DelayCancelled)
    assert result.error.requested == 1.0
    assert elapsed < 1.0


def test_delay_already_cancelled_returns_immediately() -> None:
    cancel = threading.Event()
    cancel.set()

    result = delay(5.0, cancel=cancel)

    assert isinstance(result, Err)
    assert result.error.elapsed < 1.0
    assert "cancelled" in result.error.message


def test_cancel_after_acts_as_deadline() -> None:
    start = time.monotonic()
    result = delay(1.0, cancel=cancel_after(0.02))

    assert isinstance(result, Err)
    assert time.monotonic() - start < 1.0


def test_negative_delay_is_zero() -> None:
    start = time.monotonic()
    assert delay(-1.0) == Ok(None)
    delay_simple(-1.0)
    assert time.monotonic() - start < 0.5


def test_delay_simple() -> None:
    start = time.monotonic()
    delay_simple(0.05)
    assert time.monotonic() - start >= 0.045
