"""Monthly cashflow aggregation: income, expenses, savings rate and runway."""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable

from ..models.summary import (
    CashflowSummary,
    ExpenseItem,
    IncomeItem,
    LiabilityItem,
    MonthlyProjection,
)

# EMIs are tracked on debts; an "emi" expense line would double count them.
EMI_CATEGORY = "emi"


def calculate_total_income(incomes: Iterable[IncomeItem]) -> float:
    return sum(i.amount_monthly for i in incomes)


def calculate_total_expenses(expenses: Iterable[ExpenseItem]) -> float:
    """Total monthly expenses, excluding EMI lines."""
    return sum(e.amount_monthly for e in expenses if e.category != EMI_CATEGORY)


def calculate_total_emi(debts: Iterable[LiabilityItem]) -> float:
    return sum(d.emi for d in debts)


def calculate_free_cashflow(total_income: float, total_expenses: float, total_emi: float) -> float:
    return total_income - total_expenses - total_emi


def calculate_savings_rate(free_cashflow: float, total_income: float) -> float:
    """Free cashflow as a percentage of income, 1 decimal; 0 without income."""

    if total_income == 0:
        return 0.0
    return round(free_cashflow / total_income * 100, 1)


def calculate_runway(liquid_assets: float, monthly_expenses: float, monthly_emi: float) -> float:
    """Months of burn (expenses + EMIs) covered by liquid assets if income stops.

    Returns ``math.inf`` when there is nothing to burn.
    """

    monthly_burn = monthly_expenses + monthly_emi
    if monthly_burn == 0:
        return math.inf
    return round(liquid_assets / monthly_burn, 1)


def calculate_debt_to_income_ratio(total_emi: float, total_income: float) -> float:
    if total_income == 0:
        return 0.0
    return round(total_emi / total_income * 100, 1)


def calculate_expense_breakdown(expenses: Iterable[ExpenseItem]) -> dict[str, float]:
    """Sum monthly expenses per category."""

    breakdown: dict[str, float] = {}
    for expense in expenses:
        breakdown[expense.category] = breakdown.get(expense.category, 0.0) + expense.amount_monthly
    return breakdown


def _add_months(value: date, months: int) -> date:
    month = value.month - 1 + months
    return value.replace(year=value.year + month // 12, month=month % 12 + 1, day=1)


def generate_monthly_projection(
    current_income: float,
    current_expenses: float,
    current_emi: float,
    months: int = 12,
    *,
    today: date | None = None,
) -> list[MonthlyProjection]:
    """Project flat monthly figures forward for charting, labelled like ``Jan 25``."""

    start = (today or date.today()).replace(day=1)
    savings = current_income - current_expenses - current_emi
    return [
        MonthlyProjection(
            month=_add_months(start, offset).strftime("%b %y"),
            income=current_income,
            expenses=current_expenses,
            emi=current_emi,
            savings=savings,
        )
        for offset in range(max(months, 0))
    ]


def calculate_cashflow_summary(
    incomes: Iterable[IncomeItem],
    expenses: Iterable[ExpenseItem],
    debts: Iterable[LiabilityItem],
    liquid_assets: float,
) -> CashflowSummary:
    total_income = calculate_total_income(incomes)
    total_expenses = calculate_total_expenses(expenses)
    total_emi = calculate_total_emi(debts)
    free_cashflow = calculate_free_cashflow(total_income, total_expenses, total_emi)

    return CashflowSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        total_emi=total_emi,
        free_cashflow=free_cashflow,
        savings_rate=calculate_savings_rate(free_cashflow, total_income),
        runway_months=calculate_runway(liquid_assets, total_expenses, total_emi),
    )


__all__ = [
    "calculate_cashflow_summary",
    "calculate_debt_to_income_ratio",
    "calculate_expense_breakdown",
    "calculate_free_cashflow",
    "calculate_runway",
    "calculate_savings_rate",
    "calculate_total_emi",
    "calculate_total_expenses",
    "calculate_total_income",
    "generate_monthly_projection",
]
