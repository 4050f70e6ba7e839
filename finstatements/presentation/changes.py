"""Mini README: Transient change highlighting for displayed values.

Structure:
    * FlashingValue - per-field Stable/Flashing state machine owning one
      cancellable dwell timer.
    * FieldChange - read-only view of a field for renderers.
    * ChangeBoard - owns one FlashingValue per displayed path and diffs a
      freshly published FinancialState against them.

When a displayed value moves away from its last settled value the field
starts flashing: it reports ``delta = new - baseline`` and schedules a
callback ``dwell_seconds`` later on the event loop. Another change before
expiry cancels that callback, recomputes the delta against the same
baseline and schedules a fresh one. On expiry the delta clears and the
current value becomes the baseline.

Timers run on an asyncio event loop. A loop may be injected (tests use a
manual clock); otherwise the running loop is used each time a timer is
scheduled. Queries also settle lazily so a delta is never reported at or after
its expiry time, even if the loop has not yet run the callback.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from ..statements import FinancialState, displayed_paths
from .formatting import Tone, tone_for

LOGGER = get_logger(__name__)

DEFAULT_DWELL_SECONDS = 2.0


class FlashingValue:
    """Track one displayed value and its transient delta."""

    def __init__(
        self,
        initial: float,
        *,
        dwell_seconds: float = DEFAULT_DWELL_SECONDS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        if dwell_seconds < 0:
            raise ValueError("Dwell time cannot be negative")
        self._dwell_seconds = dwell_seconds
        self._loop = loop
        self._timer_loop: Optional[asyncio.AbstractEventLoop] = None
        self._baseline = initial
        self._value = initial
        self._delta: Optional[float] = None
        self._expires_at: Optional[float] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    def __enter__(self) -> "FlashingValue":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def value(self) -> float:
        return self._value

    @property
    def baseline(self) -> float:
        """Last settled value that deltas are measured against."""

        self._settle_if_expired()
        return self._baseline

    @property
    def delta(self) -> Optional[float]:
        self._settle_if_expired()
        return self._delta

    @property
    def is_flashing(self) -> bool:
        return self.delta is not None

    @property
    def expires_at(self) -> Optional[float]:
        self._settle_if_expired()
        return self._expires_at

    @property
    def has_pending_timer(self) -> bool:
        return self._handle is not None

    @property
    def tone(self) -> Tone:
        return tone_for(self.delta)

    def update(self, new_value: float) -> bool:
        """Record a newly rendered value; return ``True`` when a flash starts."""

        self._settle_if_expired()
        if new_value == self._value:
            return False
        self._value = new_value
        if new_value == self._baseline:
            # Moved back to where it started; nothing left to highlight.
            self._settle()
            return False

        loop = self._loop or asyncio.get_running_loop()
        self._cancel_timer()
        self._timer_loop = loop
        self._delta = new_value - self._baseline
        self._expires_at = loop.time() + self._dwell_seconds
        self._handle = loop.call_later(self._dwell_seconds, self._settle)
        return True

    def close(self) -> None:
        """Cancel any pending timer and settle on the current value."""

        self._settle()

    def _settle_if_expired(self) -> None:
        if self._expires_at is not None and self._timer_loop is not None:
            if self._timer_loop.time() >= self._expires_at:
                self._settle()

    def _settle(self) -> None:
        self._cancel_timer()
        self._delta = None
        self._expires_at = None
        self._baseline = self._value

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


@dataclass(frozen=True, slots=True)
class FieldChange:
    """Renderable view of a displayed field at query time."""

    path: str
    value: float
    delta: Optional[float]
    tone: Tone


class ChangeBoard:
    """Own the change trackers for every displayed field."""

    def __init__(
        self,
        state: FinancialState,
        paths: Optional[Iterable[str]] = None,
        *,
        dwell_seconds: float = DEFAULT_DWELL_SECONDS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        selected = list(paths) if paths is not None else displayed_paths()
        self._trackers: Dict[str, FlashingValue] = {
            path: FlashingValue(state.value_at(path), dwell_seconds=dwell_seconds, loop=loop)
            for path in selected
        }
        LOGGER.debug("Change board tracking %s fields", len(self._trackers))

    def __enter__(self) -> "ChangeBoard":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def paths(self) -> List[str]:
        return list(self._trackers)

    def tracker(self, path: str) -> FlashingValue:
        if path not in self._trackers:
            raise KeyError(f"Field '{path}' is not being displayed")
        return self._trackers[path]

    def observe(self, state: FinancialState) -> List[str]:
        """Diff every tracked field against ``state``; return the paths that flashed."""

        flashed = [
            path
            for path, tracker in self._trackers.items()
            if tracker.update(state.value_at(path))
        ]
        if flashed:
            LOGGER.debug("Fields flashing: %s", ", ".join(flashed))
        return flashed

    def snapshot(self) -> Dict[str, FieldChange]:
        return {
            path: FieldChange(path=path, value=tracker.value, delta=tracker.delta, tone=tracker.tone)
            for path, tracker in self._trackers.items()
        }

    def pending_timers(self) -> int:
        return sum(1 for tracker in self._trackers.values() if tracker.has_pending_timer)

    def release(self, path: str) -> None:
        """Stop displaying ``path`` and cancel its timer."""

        tracker = self._trackers.pop(path, None)
        if tracker is not None:
            tracker.close()

    def close(self) -> None:
        for path in list(self._trackers):
            self.release(path)
        LOGGER.debug("Change board closed")
