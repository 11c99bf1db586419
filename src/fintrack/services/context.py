"""Assemble the rule engine's FinancialContext from collaborator aggregates."""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Protocol

from ..config import HIGH_APR_THRESHOLD
from ..logging_config import get_logger
from ..models.context import FinancialContext
from ..models.settings import UserSettings
from ..models.summary import AssetItem, CashAccount, ExpenseItem, IncomeItem, LiabilityItem
from .cashflow import calculate_total_emi, calculate_total_expenses, calculate_total_income
from .networth import calculate_net_worth_summary

logger = get_logger(__name__)

CREDIT_CARD_TYPE = "cc"


class FinancialDataSource(Protocol):
    """Supplies the plain records a context is aggregated from."""

    def cash_accounts(self) -> Iterable[CashAccount]:  # pragma: no cover - interface
        ...

    def holdings(self) -> Iterable[AssetItem]:  # pragma: no cover - interface
        ...

    def liabilities(self) -> Iterable[LiabilityItem]:  # pragma: no cover - interface
        ...

    def incomes(self) -> Iterable[IncomeItem]:  # pragma: no cover - interface
        ...

    def expenses(self) -> Iterable[ExpenseItem]:  # pragma: no cover - interface
        ...

    def settings(self) -> UserSettings:  # pragma: no cover - interface
        ...


def build_context(
    *,
    income: float,
    expenses: float,
    emi: float,
    liquid_assets: float,
    total_assets: float,
    total_liabilities: float,
    cc_balance: float,
    highest_apr: float,
    asset_allocation: Mapping[str, float],
    settings: UserSettings,
    short_term_liabilities: float = 0.0,
) -> FinancialContext:
    """Derive runway, cashflow and ratios from monthly aggregates.

    Zero burn yields an infinite runway; zero income yields a 0% savings rate
    and debt-to-income ratio.
    """

    monthly_burn = expenses + emi
    runway_months = liquid_assets / monthly_burn if monthly_burn > 0 else math.inf
    free_cashflow = income - expenses - emi
    savings_rate = free_cashflow / income * 100 if income > 0 else 0.0
    debt_to_income = emi / income * 100 if income > 0 else 0.0

    return FinancialContext(
        total_monthly_income=income,
        total_monthly_expenses=expenses,
        total_monthly_emi=emi,
        free_cashflow=free_cashflow,
        savings_rate=savings_rate,
        liquid_assets=liquid_assets,
        total_assets=total_assets,
        asset_allocation=asset_allocation,
        total_liabilities=total_liabilities,
        short_term_liabilities=short_term_liabilities,
        highest_debt_apr=highest_apr,
        cc_balance=cc_balance,
        has_high_apr_debt=highest_apr > HIGH_APR_THRESHOLD,
        emergency_fund_months_target=settings.emergency_fund_months_target,
        emi_to_income_max_percent=settings.emi_to_income_max_percent,
        cc_utilization_max_percent=settings.cc_utilization_max_percent,
        allocation_targets=settings.allocation_targets,
        runway_months=runway_months,
        debt_to_income_ratio=debt_to_income,
    )


class ContextBuilder:
    """Pull records from a data source and aggregate them into a context."""

    def __init__(self, source: FinancialDataSource):
        self.source = source

    def build(self) -> FinancialContext:
        liabilities = list(self.source.liabilities())
        net_worth = calculate_net_worth_summary(
            self.source.cash_accounts(), self.source.holdings(), liabilities
        )
        open_debts = [item for item in liabilities if item.balance > 0]

        context = build_context(
            income=calculate_total_income(self.source.incomes()),
            expenses=calculate_total_expenses(self.source.expenses()),
            emi=calculate_total_emi(liabilities),
            liquid_assets=net_worth.liquid_assets,
            total_assets=net_worth.total_assets,
            total_liabilities=net_worth.total_liabilities,
            short_term_liabilities=net_worth.short_term_liabilities,
            cc_balance=sum(item.balance for item in liabilities if item.type == CREDIT_CARD_TYPE),
            highest_apr=max((item.apr for item in open_debts), default=0.0),
            asset_allocation=net_worth.asset_allocation,
            settings=self.source.settings(),
        )
        logger.debug(
            "Financial context built",
            extra={
                "income": context.total_monthly_income,
                "free_cashflow": context.free_cashflow,
                "runway_months": context.runway_months,
            },
        )
        return context


__all__ = ["ContextBuilder", "FinancialDataSource", "build_context"]
