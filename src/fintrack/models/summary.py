"""Cashflow and net-worth summaries and the plain records they are built from."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class IncomeItem:
    amount_monthly: float
    name: str = ""


@dataclass(frozen=True, slots=True)
class ExpenseItem:
    amount_monthly: float
    category: str = "other"
    name: str = ""


@dataclass(frozen=True, slots=True)
class CashAccount:
    balance: float
    name: str = ""


@dataclass(frozen=True, slots=True)
class AssetItem:
    """A holding valued at current price; ``type`` is the asset class."""

    type: str
    value: float
    name: str = ""


@dataclass(frozen=True, slots=True)
class LiabilityItem:
    """An outstanding debt; ``type`` is home, auto, personal, education or cc."""

    type: str
    balance: float
    apr: float = 0.0
    emi: float = 0.0
    name: str = ""


@dataclass(frozen=True, slots=True)
class CashflowSummary:
    total_income: float
    total_expenses: float
    total_emi: float
    free_cashflow: float
    savings_rate: float
    runway_months: float


@dataclass(frozen=True, slots=True)
class NetWorthSummary:
    total_assets: float
    total_liabilities: float
    net_worth: float
    liquid_assets: float
    short_term_liabilities: float
    liquid_net_worth: float
    asset_allocation: dict[str, float] = field(default_factory=dict)
    liability_mix: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class MonthlyProjection:
    """One row of the forward cashflow projection used by charts."""

    month: str
    income: float
    expenses: float
    emi: float
    savings: float
