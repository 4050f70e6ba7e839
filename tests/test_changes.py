"""Mini README: Tests for flash highlighting and dwell timers.

Structure:
    * FlashingValue tests - decay window, supersession against the settled
      baseline, return to baseline, teardown.
    * ChangeBoard tests - atomic diffing of a published snapshot and timer
      ownership per field.
    * asyncio test - timers scheduled on a real running loop.
"""

from __future__ import annotations

import asyncio

import pytest

from finstatements.presentation import ChangeBoard, FlashingValue, Tone
from finstatements.statements import Action, ActionType, FinancialState, apply_action


def test_delta_reported_until_dwell_expires(manual_loop) -> None:
    tracker = FlashingValue(100.0, dwell_seconds=2.0, loop=manual_loop)

    assert tracker.update(150.0) is True
    assert tracker.delta == 50.0
    assert tracker.tone is Tone.POSITIVE

    manual_loop.advance(1.5)
    assert tracker.delta == 50.0

    manual_loop.advance(0.5)
    assert tracker.delta is None
    assert tracker.baseline == 150.0
    assert tracker.tone is Tone.NEUTRAL
    assert not tracker.has_pending_timer


def test_lazy_expiry_without_callback(manual_loop) -> None:
    tracker = FlashingValue(10.0, dwell_seconds=2.0, loop=manual_loop)
    tracker.update(4.0)

    manual_loop.now = 2.0  # clock moved but the callback has not run yet
    assert tracker.delta is None
    assert tracker.baseline == 4.0


def test_second_change_restarts_timer_against_settled_baseline(manual_loop) -> None:
    tracker = FlashingValue(1_000.0, dwell_seconds=2.0, loop=manual_loop)
    tracker.update(1_200.0)

    manual_loop.advance(0.5)
    tracker.update(900.0)

    assert tracker.delta == -100.0
    assert tracker.tone is Tone.NEGATIVE
    assert tracker.expires_at == pytest.approx(2.5)
    assert len(manual_loop.pending()) == 1

    manual_loop.advance(1.9)  # t = 2.4, past the first change's expiry
    assert tracker.delta == -100.0

    manual_loop.advance(0.25)
    assert tracker.delta is None
    assert tracker.baseline == 900.0


def test_return_to_baseline_settles_immediately(manual_loop) -> None:
    tracker = FlashingValue(5.0, dwell_seconds=2.0, loop=manual_loop)
    tracker.update(8.0)

    assert tracker.update(5.0) is False
    assert tracker.delta is None
    assert manual_loop.pending() == []


def test_repeated_value_does_not_restart_flash(manual_loop) -> None:
    tracker = FlashingValue(5.0, dwell_seconds=2.0, loop=manual_loop)
    tracker.update(7.0)
    manual_loop.advance(1.0)

    assert tracker.update(7.0) is False
    assert tracker.expires_at == pytest.approx(2.0)


def test_close_cancels_pending_timer(manual_loop) -> None:
    with FlashingValue(0.0, loop=manual_loop) as tracker:
        tracker.update(3.0)
        assert tracker.has_pending_timer

    assert not tracker.has_pending_timer
    assert manual_loop.pending() == []
    assert tracker.delta is None


def test_negative_dwell_is_rejected() -> None:
    with pytest.raises(ValueError):
        FlashingValue(0.0, dwell_seconds=-1.0)


def test_board_flashes_only_changed_fields(manual_loop) -> None:
    state = FinancialState.initial()
    board = ChangeBoard(state, dwell_seconds=2.0, loop=manual_loop)

    new_state = apply_action(state, Action.of(ActionType.SELL_EQUIPMENT, 50_000.0))
    flashed = board.observe(new_state)

    assert set(flashed) == {
        "balance_sheet.assets.cash",
        "balance_sheet.assets.equipment",
        "cash_flow.investing",
        "cash_flow.total",
    }
    snapshot = board.snapshot()
    assert snapshot["balance_sheet.assets.equipment"].delta == -50_000
    assert snapshot["cash_flow.total"].value == 50_000
    assert snapshot["balance_sheet.assets.inventory"].delta is None
    assert board.pending_timers() == 4


def test_board_keeps_one_timer_per_field(manual_loop) -> None:
    state = FinancialState.initial()
    board = ChangeBoard(state, ["balance_sheet.assets.cash"], loop=manual_loop)

    for _ in range(3):
        state = apply_action(state, Action.of(ActionType.TAKE_LOAN, 10.0))
        board.observe(state)

    assert board.pending_timers() == 1
    assert len(manual_loop.pending()) == 1
    assert board.tracker("balance_sheet.assets.cash").delta == 30.0


def test_release_and_close_cancel_timers(manual_loop) -> None:
    state = FinancialState.initial()
    board = ChangeBoard(state, loop=manual_loop)
    board.observe(apply_action(state, Action.of(ActionType.MAKE_REVENUE, 1.0)))

    board.release("balance_sheet.assets.cash")
    assert "balance_sheet.assets.cash" not in board.paths
    with pytest.raises(KeyError):
        board.tracker("balance_sheet.assets.cash")

    board.close()
    assert manual_loop.pending() == []
    assert board.paths == []


def test_timers_run_on_running_asyncio_loop() -> None:
    async def scenario() -> tuple:
        tracker = FlashingValue(1.0, dwell_seconds=0.01)
        tracker.update(2.0)
        during = tracker.delta
        await asyncio.sleep(0.05)
        return during, tracker.delta, tracker.has_pending_timer

    during, after, pending = asyncio.run(scenario())

    assert during == 1.0
    assert after is None
    assert pending is False
