"""Net worth, liquidity and allocation aggregation."""

from __future__ import annotations

from typing import Iterable

from ..models.summary import AssetItem, CashAccount, LiabilityItem, NetWorthSummary

# Asset classes that can be converted to cash quickly
LIQUID_ASSET_TYPES = frozenset({"equity", "mf", "crypto", "gold"})

# Revolving or due within a year
SHORT_TERM_DEBT_TYPES = frozenset({"cc", "personal"})

CASH_ALLOCATION_KEY = "cash"


def _to_percentages(totals: dict[str, float]) -> dict[str, float]:
    grand_total = sum(totals.values())
    if grand_total == 0:
        return {}
    return {key: round(value / grand_total * 100, 1) for key, value in totals.items()}


def calculate_total_assets(cash_accounts: Iterable[CashAccount], holdings: Iterable[AssetItem]) -> float:
    return sum(a.balance for a in cash_accounts) + sum(h.value for h in holdings)


def calculate_total_liabilities(liabilities: Iterable[LiabilityItem]) -> float:
    return sum(item.balance for item in liabilities)


def calculate_net_worth(total_assets: float, total_liabilities: float) -> float:
    return total_assets - total_liabilities


def calculate_liquid_assets(cash_accounts: Iterable[CashAccount], holdings: Iterable[AssetItem]) -> float:
    """Cash plus holdings in liquid asset classes."""

    cash_total = sum(a.balance for a in cash_accounts)
    return cash_total + sum(h.value for h in holdings if h.type in LIQUID_ASSET_TYPES)


def calculate_short_term_liabilities(liabilities: Iterable[LiabilityItem]) -> float:
    return sum(item.balance for item in liabilities if item.type in SHORT_TERM_DEBT_TYPES)


def calculate_liquid_net_worth(liquid_assets: float, short_term_liabilities: float) -> float:
    return liquid_assets - short_term_liabilities


def calculate_asset_allocation(
    cash_accounts: Iterable[CashAccount], holdings: Iterable[AssetItem]
) -> dict[str, float]:
    """Percentage of total assets per asset class, 1 decimal; cash included when positive."""

    totals: dict[str, float] = {}
    cash_total = sum(a.balance for a in cash_accounts)
    if cash_total > 0:
        totals[CASH_ALLOCATION_KEY] = cash_total
    for holding in holdings:
        totals[holding.type] = totals.get(holding.type, 0.0) + holding.value
    return _to_percentages(totals)


def calculate_liability_mix(liabilities: Iterable[LiabilityItem]) -> dict[str, float]:
    """Percentage of total debt per liability type."""

    totals: dict[str, float] = {}
    for item in liabilities:
        totals[item.type] = totals.get(item.type, 0.0) + item.balance
    return _to_percentages(totals)


def calculate_net_worth_summary(
    cash_accounts: Iterable[CashAccount],
    holdings: Iterable[AssetItem],
    liabilities: Iterable[LiabilityItem],
) -> NetWorthSummary:
    cash_accounts = list(cash_accounts)
    holdings = list(holdings)
    liabilities = list(liabilities)

    total_assets = calculate_total_assets(cash_accounts, holdings)
    total_liabilities = calculate_total_liabilities(liabilities)
    liquid_assets = calculate_liquid_assets(cash_accounts, holdings)
    short_term = calculate_short_term_liabilities(liabilities)

    return NetWorthSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=calculate_net_worth(total_assets, total_liabilities),
        liquid_assets=liquid_assets,
        short_term_liabilities=short_term,
        liquid_net_worth=calculate_liquid_net_worth(liquid_assets, short_term),
        asset_allocation=calculate_asset_allocation(cash_accounts, holdings),
        liability_mix=calculate_liability_mix(liabilities),
    )


__all__ = [
    "LIQUID_ASSET_TYPES",
    "SHORT_TERM_DEBT_TYPES",
    "calculate_asset_allocation",
    "calculate_liability_mix",
    "calculate_liquid_assets",
    "calculate_liquid_net_worth",
    "calculate_net_worth",
    "calculate_net_worth_summary",
    "calculate_short_term_liabilities",
    "calculate_total_assets",
    "calculate_total_liabilities",
]
