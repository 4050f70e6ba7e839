"""Mini README: Financial statement model and transitions.

This package holds the immutable statement snapshot, the closed catalogue
of business actions with the pure transition that applies them, and the
display layout shared by the web dashboard and the command line.
"""

from .actions import ACTION_CATALOGUE, ACTION_EFFECTS, Action, ActionType, apply_action
from .layout import STATEMENTS, LineItem, Statement, StatementSection, displayed_paths
from .state import (
    CASH_FLOW_TOTAL_PATH,
    Assets,
    BalanceSheet,
    CashFlow,
    Equity,
    FinancialState,
    IncomeStatement,
    Liabilities,
)

__all__ = [
    "ACTION_CATALOGUE",
    "ACTION_EFFECTS",
    "Action",
    "ActionType",
    "Assets",
    "BalanceSheet",
    "CASH_FLOW_TOTAL_PATH",
    "CashFlow",
    "Equity",
    "FinancialState",
    "IncomeStatement",
    "Liabilities",
    "LineItem",
    "STATEMENTS",
    "Statement",
    "StatementSection",
    "apply_action",
    "displayed_paths",
]
