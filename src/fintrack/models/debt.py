"""Debt inputs and payoff projection records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Strategy = Literal["avalanche", "snowball"]
STRATEGIES: tuple[str, ...] = ("avalanche", "snowball")


@dataclass(frozen=True, slots=True)
class DebtForPayoff:
    """Represents a liability input for payoff projections.

    ``apr`` is an annual decimal fraction (0.12 == 12%) and ``min_payment`` is
    the monthly EMI. Snapshots are never mutated by the simulator.
    """

    id: str
    name: str
    balance: float
    apr: float
    min_payment: float


@dataclass(frozen=True, slots=True)
class PayoffMonth:
    """One simulated month for a single debt."""

    month: int
    balance: float
    principal: float
    interest: float
    payment: float

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "balance": self.balance,
            "principal": self.principal,
            "interest": self.interest,
            "payment": self.payment,
        }


@dataclass(frozen=True, slots=True)
class PayoffDebtResult:
    """Payoff outcome and month-by-month breakdown for one debt."""

    debt_id: str
    debt_name: str
    payoff_month: int
    total_paid: float
    total_interest: float
    monthly_breakdown: tuple[PayoffMonth, ...] = ()

    @property
    def final_balance(self) -> float:
        if not self.monthly_breakdown:
            return 0.0
        return self.monthly_breakdown[-1].balance

    def to_dict(self) -> dict:
        return {
            "debtId": self.debt_id,
            "debtName": self.debt_name,
            "payoffMonth": self.payoff_month,
            "totalPaid": self.total_paid,
            "totalInterest": self.total_interest,
            "monthlyBreakdown": [row.to_dict() for row in self.monthly_breakdown],
        }


@dataclass(frozen=True, slots=True)
class PayoffSimulation:
    """Aggregate result of a payoff run under one strategy."""

    strategy: str
    extra_payment: float
    debts: tuple[PayoffDebtResult, ...]
    total_months: int
    total_interest_paid: float
    months_saved: int = 0
    interest_saved: float = 0.0

    def to_dict(self, *, include_breakdown: bool = True) -> dict:
        debts = [d.to_dict() for d in self.debts]
        if not include_breakdown:
            for entry in debts:
                entry.pop("monthlyBreakdown")
        return {
            "strategy": self.strategy,
            "extraPayment": self.extra_payment,
            "debts": debts,
            "totalMonths": self.total_months,
            "totalInterestPaid": self.total_interest_paid,
            "monthsSaved": self.months_saved,
            "interestSaved": self.interest_saved,
        }


@dataclass(frozen=True, slots=True)
class BaselineResult:
    """Minimum-payment-only reference totals used for savings deltas."""

    total_months: int
    total_interest_paid: float


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Side-by-side avalanche and snowball outcomes with a recommendation."""

    avalanche: PayoffSimulation
    snowball: PayoffSimulation
    recommendation: str
    interest_difference: float

    def to_dict(self, *, include_breakdown: bool = False) -> dict:
        return {
            "avalanche": self.avalanche.to_dict(include_breakdown=include_breakdown),
            "snowball": self.snowball.to_dict(include_breakdown=include_breakdown),
            "recommendation": self.recommendation,
            "interestDifference": self.interest_difference,
        }


@dataclass(frozen=True, slots=True)
class DebtMetrics:
    """Aggregate figures across a debt set."""

    total_debt: float
    total_monthly_emi: float
    weighted_avg_apr: float
    highest_apr: float
    lowest_balance: float
