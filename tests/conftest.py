"""Mini README: Shared pytest fixtures.

Structure:
    * ManualLoop - stand-in for an asyncio loop with a hand-driven clock.
    * manual_loop - fixture returning a fresh ManualLoop.

Highlight timers only need ``time`` and ``call_later`` from the loop, so
tests drive expiry by advancing the clock instead of sleeping.
"""

from __future__ import annotations

from typing import Callable, List

import pytest


class ManualHandle:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualLoop:
    """Minimal event loop clock advanced explicitly by tests."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: List[ManualHandle] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def pending(self) -> List[ManualHandle]:
        return [handle for handle in self.handles if not handle.cancelled()]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running callbacks that fall due in order."""

        target = self.now + seconds
        while True:
            due = sorted(
                (h for h in self.pending() if h.when <= target), key=lambda h: h.when
            )
            if not due:
                break
            handle = due[0]
            self.now = handle.when
            self.handles.remove(handle)
            handle.callback()
        self.now = target


@pytest.fixture()
def manual_loop() -> ManualLoop:
    return ManualLoop()
