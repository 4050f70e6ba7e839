"""Mini README: Session controller for the statements visualizer.

Structure:
    * parse_amount - turn user text into a finite float or ``None``.
    * VisualizerSession - owns the current FinancialState, the pending user
      input and the ChangeBoard for the displayed fields.

A session is created when an interface starts and closed when it shuts
down. It is the only writer of the financial state: ``execute`` computes
the next snapshot with ``apply_action``, publishes it, and only then lets
the change board diff the displayed fields, so every field sees the same
snapshot. Invalid input never raises; ``can_execute`` reports whether the
execute control should be enabled and ``execute`` does nothing otherwise.
"""

from __future__ import annotations

import asyncio
import math
from typing import Dict, Optional

from .configuration import get_settings
from .logging_utils import get_logger
from .presentation import ChangeBoard, FieldChange
from .statements import Action, FinancialState, apply_action

LOGGER = get_logger(__name__)


def parse_amount(raw_text: Optional[str]) -> Optional[float]:
    """Return the finite number in ``raw_text`` or ``None`` when there is none."""

    if raw_text is None:
        return None
    text = str(raw_text).strip()
    if not text:
        return None
    try:
        amount = float(text)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


class VisualizerSession:
    """Hold the financial snapshot and pending input for one visualizer session."""

    def __init__(
        self,
        initial_state: Optional[FinancialState] = None,
        *,
        dwell_seconds: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        if dwell_seconds is None:
            dwell_seconds = get_settings().flash_duration_seconds
        self._state = initial_state or FinancialState.initial()
        self._pending_action = ""
        self._pending_amount = ""
        self._board = ChangeBoard(self._state, dwell_seconds=dwell_seconds, loop=loop)
        self._closed = False
        LOGGER.debug("Visualizer session started (dwell %.3fs)", dwell_seconds)

    def __enter__(self) -> "VisualizerSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def state(self) -> FinancialState:
        return self._state

    @property
    def pending_action(self) -> str:
        return self._pending_action

    @property
    def pending_amount(self) -> str:
        return self._pending_amount

    @property
    def cash_flow_total(self) -> float:
        return self._state.cash_flow.total

    @property
    def board(self) -> ChangeBoard:
        return self._board

    def value(self, path: str) -> float:
        return self._state.value_at(path)

    def changes(self) -> Dict[str, FieldChange]:
        return self._board.snapshot()

    def select_action(self, action_id: Optional[str]) -> None:
        """Set the pending action; an empty value clears the selection."""

        self._pending_action = (action_id or "").strip()

    def set_amount(self, raw_text: Optional[str]) -> None:
        self._pending_amount = raw_text or ""

    def can_execute(self) -> bool:
        return bool(self._pending_action) and parse_amount(self._pending_amount) is not None

    def execute(self) -> bool:
        """Apply the pending action; return ``False`` when input is incomplete."""

        if self._closed:
            LOGGER.warning("Execute ignored on a closed session")
            return False
        if not self.can_execute():
            LOGGER.debug(
                "Execute ignored: action=%r amount=%r", self._pending_action, self._pending_amount
            )
            return False

        action = Action(action_id=self._pending_action, amount=parse_amount(self._pending_amount))
        if action.action_type is None:
            LOGGER.debug("Unrecognised action '%s' leaves statements unchanged", action.action_id)

        self._state = apply_action(self._state, action)
        flashed = self._board.observe(self._state)
        LOGGER.info(
            "Applied %s of %s; %s fields changed", action.action_id, action.amount, len(flashed)
        )

        self._pending_action = ""
        self._pending_amount = ""
        return True

    def close(self) -> None:
        """Cancel outstanding highlight timers; the session stays readable."""

        if self._closed:
            return
        self._board.close()
        self._closed = True
        LOGGER.debug("Visualizer session closed")
