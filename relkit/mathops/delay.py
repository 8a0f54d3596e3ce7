"""Blocking delays, optionally cancellable.

Cancellation uses a threading.Event: whoever owns the event sets it to cut a
pending delay short.

Usage:
    cancel = cancel_after(0.05)
    match delay(1.0, cancel=cancel):
        case Ok(_):
            print("finished")
        case Err(cancelled):
            print(f"cancelled after {cancelled.elapsed:.3f}s")
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from relkit.core.result import Err, Ok, Result

__all__ = ["DelayCancelled", "cancel_after", "delay", "delay_simple"]


@dataclass(frozen=True, slots=True)
class DelayCancelled:
    """A delay that was interrupted before its duration elapsed."""

    requested: float
    elapsed: float

    @property
    def message(self) -> str:
        return f"delay cancelled after {self.elapsed:.3f}s (requested {self.requested:.3f}s)"


def delay(seconds: float, *, cancel: threading.Event | None = None) -> Result[None, DelayCancelled]:
    """Wait for ``seconds`` unless ``cancel`` is set first.

    A negative duration is treated as zero. An event that is already set
    cancels immediately.
    """
    seconds = max(0.0, seconds)
    if cancel is None:
        time.sleep(seconds)
        return Ok(None)

    start = time.monotonic()
    if cancel.wait(seconds):
        return Err(DelayCancelled(requested=seconds, elapsed=time.monotonic() - start))
    return Ok(None)


def delay_simple(seconds: float) -> None:
    """Sleep for ``seconds`` with no way to cancel."""
    time.sleep(max(0.0, seconds))


def cancel_after(seconds: float) -> threading.Event:
    """Return an event that sets itself after ``seconds`` (a deadline)."""
    event = threading.Event()
    timer = threading.Timer(max(0.0, seconds), event.set)
    timer.daemon = True
    timer.start()
    return event
