"""Mini README: Immutable snapshot of the three linked financial statements.

Structure:
    * Assets, Liabilities, Equity - balance sheet groups.
    * BalanceSheet, IncomeStatement, CashFlow - statement records.
    * FinancialState - the full snapshot with path based access helpers.

Every record is a frozen dataclass. Changes go through
``FinancialState.adjusted`` which builds a brand-new snapshot, so callers
holding an older snapshot always see the values they were given. Fields
are addressed with dotted paths such as ``balance_sheet.assets.cash``; the
net cash flow is exposed as the read-only path ``cash_flow.total`` and is
recomputed from its components on every access.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Dict, Iterator, Mapping, Tuple

CASH_FLOW_TOTAL_PATH = "cash_flow.total"


@dataclass(frozen=True, slots=True)
class Assets:
    """Asset balances."""

    cash: float
    equipment: float
    inventory: float


@dataclass(frozen=True, slots=True)
class Liabilities:
    """Debt balances."""

    short_term_debt: float
    long_term_debt: float


@dataclass(frozen=True, slots=True)
class Equity:
    """Owner equity balances."""

    common_stock: float
    retained_earnings: float


@dataclass(frozen=True, slots=True)
class BalanceSheet:
    assets: Assets
    liabilities: Liabilities
    equity: Equity


@dataclass(frozen=True, slots=True)
class IncomeStatement:
    """Income statement figures.

    ``net_income`` is stored rather than derived and is moved by actions
    independently of ``revenue`` and ``expenses``.
    """

    revenue: float
    expenses: float
    net_income: float


@dataclass(frozen=True, slots=True)
class CashFlow:
    """Cash flow statement split by activity."""

    operating: float
    investing: float
    financing: float

    @property
    def total(self) -> float:
        """Net cash flow across all three activities."""

        return self.operating + self.investing + self.financing


@dataclass(frozen=True, slots=True)
class FinancialState:
    """Complete snapshot of the balance sheet, income and cash flow statements."""

    balance_sheet: BalanceSheet
    income_statement: IncomeStatement
    cash_flow: CashFlow

    @classmethod
    def initial(cls) -> "FinancialState":
        """Return the opening snapshot every session starts from."""

        return cls(
            balance_sheet=BalanceSheet(
                assets=Assets(cash=1_000_000.0, equipment=500_000.0, inventory=300_000.0),
                liabilities=Liabilities(short_term_debt=200_000.0, long_term_debt=400_000.0),
                equity=Equity(common_stock=1_000_000.0, retained_earnings=200_000.0),
            ),
            income_statement=IncomeStatement(revenue=0.0, expenses=0.0, net_income=0.0),
            cash_flow=CashFlow(operating=0.0, investing=0.0, financing=0.0),
        )

    def value_at(self, path: str) -> float:
        """Read a stored or derived field by its dotted path."""

        if path == CASH_FLOW_TOTAL_PATH:
            return self.cash_flow.total
        node: object = self
        for part in path.split("."):
            if not is_dataclass(node) or part not in _field_names(node):
                raise KeyError(f"Unknown field path '{path}'")
            node = getattr(node, part)
        if is_dataclass(node):
            raise KeyError(f"Path '{path}' names a group, not a value")
        return node  # type: ignore[return-value]

    def adjusted(self, deltas: Mapping[str, float]) -> "FinancialState":
        """Return a new snapshot with each delta added to its field."""

        updated: FinancialState = self
        for path, delta in deltas.items():
            if path == CASH_FLOW_TOTAL_PATH:
                raise KeyError(f"Path '{path}' is derived and cannot be adjusted")
            current = updated.value_at(path)
            updated = _replace_path(updated, path.split("."), current + delta)
        return updated

    def iter_values(self, *, include_derived: bool = True) -> Iterator[Tuple[str, float]]:
        """Yield ``(path, value)`` pairs for every leaf field."""

        yield from _walk(self, "")
        if include_derived:
            yield CASH_FLOW_TOTAL_PATH, self.cash_flow.total

    def as_dict(self) -> Dict[str, Dict[str, object]]:
        """Export the snapshot as nested dictionaries for JSON responses."""

        bs = self.balance_sheet
        return {
            "balance_sheet": {
                "assets": _record_dict(bs.assets),
                "liabilities": _record_dict(bs.liabilities),
                "equity": _record_dict(bs.equity),
            },
            "income_statement": _record_dict(self.income_statement),
            "cash_flow": {**_record_dict(self.cash_flow), "total": self.cash_flow.total},
        }


def _field_names(record: object) -> Tuple[str, ...]:
    return tuple(item.name for item in fields(record))


def _record_dict(record: object) -> Dict[str, object]:
    return {name: getattr(record, name) for name in _field_names(record)}


def _replace_path(node, parts, value):
    """Rebuild ``node`` along ``parts`` with the leaf set to ``value``."""

    head, *rest = parts
    if not rest:
        return replace(node, **{head: value})
    return replace(node, **{head: _replace_path(getattr(node, head), rest, value)})


def _walk(node: object, prefix: str) -> Iterator[Tuple[str, float]]:
    for name in _field_names(node):
        child = getattr(node, name)
        path = f"{prefix}{name}"
        if is_dataclass(child):
            yield from _walk(child, f"{path}.")
        else:
            yield path, child
