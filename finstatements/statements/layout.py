"""Mini README: Display catalogue for the three statements.

Structure:
    * LineItem - a labelled field path shown on screen.
    * StatementSection - optional heading plus its line items.
    * Statement - a titled card made of sections.
    * STATEMENTS / displayed_paths - the fixed layout used by every interface.

The layout only names what is shown and in which order; values are read
from a ``FinancialState`` when an interface renders it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .state import CASH_FLOW_TOTAL_PATH


@dataclass(frozen=True, slots=True)
class LineItem:
    label: str
    path: str


@dataclass(frozen=True, slots=True)
class StatementSection:
    title: Optional[str]
    items: Tuple[LineItem, ...]


@dataclass(frozen=True, slots=True)
class Statement:
    title: str
    sections: Tuple[StatementSection, ...]

    def line_items(self) -> Iterator[LineItem]:
        for section in self.sections:
            yield from section.items


STATEMENTS: Tuple[Statement, ...] = (
    Statement(
        title="Balance Sheet",
        sections=(
            StatementSection(
                title="Assets",
                items=(
                    LineItem("Cash", "balance_sheet.assets.cash"),
                    LineItem("Equipment", "balance_sheet.assets.equipment"),
                    LineItem("Inventory", "balance_sheet.assets.inventory"),
                ),
            ),
            StatementSection(
                title="Liabilities",
                items=(
                    LineItem("Short-term Debt", "balance_sheet.liabilities.short_term_debt"),
                    LineItem("Long-term Debt", "balance_sheet.liabilities.long_term_debt"),
                ),
            ),
            StatementSection(
                title="Equity",
                items=(
                    LineItem("Common Stock", "balance_sheet.equity.common_stock"),
                    LineItem("Retained Earnings", "balance_sheet.equity.retained_earnings"),
                ),
            ),
        ),
    ),
    Statement(
        title="Income Statement",
        sections=(
            StatementSection(
                title=None,
                items=(
                    LineItem("Revenue", "income_statement.revenue"),
                    LineItem("Expenses", "income_statement.expenses"),
                    LineItem("Net Income", "income_statement.net_income"),
                ),
            ),
        ),
    ),
    Statement(
        title="Cash Flow Statement",
        sections=(
            StatementSection(
                title=None,
                items=(
                    LineItem("Operating", "cash_flow.operating"),
                    LineItem("Investing", "cash_flow.investing"),
                    LineItem("Financing", "cash_flow.financing"),
                    LineItem("Net Cash Flow", CASH_FLOW_TOTAL_PATH),
                ),
            ),
        ),
    ),
)


def displayed_paths() -> List[str]:
    """Return every displayed field path in screen order."""

    return [item.path for statement in STATEMENTS for item in statement.line_items()]
