"""Mini README: Business actions and the pure state transition.

Structure:
    * ActionType - closed catalogue of supported actions with display labels.
    * Action - an action identifier paired with its amount.
    * ACTION_EFFECTS - per action, the signed fields the amount moves.
    * apply_action - pure ``(state, action) -> state`` transition.

Amounts are applied exactly as given: no clamping and no sign checks. An
identifier outside the catalogue leaves the state untouched and is not an
error. Nothing in this module logs or keeps state of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .state import FinancialState

CASH = "balance_sheet.assets.cash"


class ActionType(str, Enum):
    """Enumerate the actions a user can apply to the statements."""

    SELL_EQUIPMENT = "sellAsset"
    TAKE_LOAN = "takeLoan"
    PAY_DIVIDEND = "payDividend"
    BUY_INVENTORY = "buyInventory"
    MAKE_REVENUE = "makeRevenue"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["ActionType"]:
        """Resolve an identifier, returning ``None`` when it is not recognised."""

        if not value:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


_LABELS: Dict[ActionType, str] = {
    ActionType.SELL_EQUIPMENT: "Sell Equipment",
    ActionType.TAKE_LOAN: "Take on Loan",
    ActionType.PAY_DIVIDEND: "Pay Dividend",
    ActionType.BUY_INVENTORY: "Purchase Inventory",
    ActionType.MAKE_REVENUE: "Record Revenue (Cash)",
}

ACTION_EFFECTS: Dict[ActionType, Dict[str, int]] = {
    ActionType.SELL_EQUIPMENT: {
        CASH: 1,
        "balance_sheet.assets.equipment": -1,
        "cash_flow.investing": 1,
    },
    ActionType.TAKE_LOAN: {
        CASH: 1,
        "balance_sheet.liabilities.long_term_debt": 1,
        "cash_flow.financing": 1,
    },
    ActionType.PAY_DIVIDEND: {
        CASH: -1,
        "balance_sheet.equity.retained_earnings": -1,
        "cash_flow.financing": -1,
    },
    ActionType.BUY_INVENTORY: {
        CASH: -1,
        "balance_sheet.assets.inventory": 1,
        "cash_flow.operating": -1,
    },
    ActionType.MAKE_REVENUE: {
        CASH: 1,
        "balance_sheet.equity.retained_earnings": 1,
        "income_statement.revenue": 1,
        "income_statement.net_income": 1,
        "cash_flow.operating": 1,
    },
}

# Display order for selection widgets.
ACTION_CATALOGUE: List[Tuple[str, str]] = [(item.value, item.label) for item in ActionType]


@dataclass(frozen=True, slots=True)
class Action:
    """A requested action. ``action_id`` may name an unknown action."""

    action_id: str
    amount: float

    @property
    def action_type(self) -> Optional[ActionType]:
        return ActionType.lookup(self.action_id)

    @classmethod
    def of(cls, action_type: ActionType, amount: float) -> "Action":
        return cls(action_id=action_type.value, amount=amount)


def apply_action(state: FinancialState, action: Action) -> FinancialState:
    """Return the snapshot produced by applying ``action`` to ``state``.

    ``state`` is never modified. Unrecognised actions return ``state``
    itself.
    """

    action_type = action.action_type
    if action_type is None:
        return state
    effects = ACTION_EFFECTS[action_type]
    return state.adjusted({path: sign * action.amount for path, sign in effects.items()})
