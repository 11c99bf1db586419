"""Single-debt amortization helpers."""

from __future__ import annotations

from typing import Iterable, Iterator

from ..config import MAX_SIMULATION_MONTHS, PAID_OFF_TOLERANCE
from ..models.debt import DebtForPayoff, DebtMetrics, PayoffDebtResult, PayoffMonth


def normalize_currency(amount: float) -> float:
    """Round to cents using half-up rounding."""

    return round(amount + 1e-9, 2)


def monthly_interest(balance: float, apr: float) -> float:
    """Return one month of interest on *balance* at annual rate *apr*."""

    return balance * apr / 12


def iter_amortization(
    *,
    balance: float,
    apr: float,
    monthly_payment: float,
    max_months: int = MAX_SIMULATION_MONTHS,
) -> Iterator[tuple[float, float, float, float]]:
    """Yield unrounded ``(balance, principal, interest, payment)`` per month.

    The payment is capped at balance plus interest, so the final step pays the
    debt off exactly. When the payment does not cover interest the balance
    grows and iteration stops after ``max_months`` steps.
    """

    months = 0
    while balance > PAID_OFF_TOLERANCE and months < max_months:
        interest = monthly_interest(balance, apr)
        payment = min(monthly_payment, balance + interest)
        principal = payment - interest
        balance = max(0.0, balance - principal)
        months += 1
        yield balance, principal, interest, payment


def simulate_debt_payoff(
    debt: DebtForPayoff,
    monthly_payment: float,
    *,
    start_month: int = 1,
    max_months: int = MAX_SIMULATION_MONTHS,
) -> PayoffDebtResult:
    """Replay a single debt in isolation at a fixed monthly payment."""

    total_paid = 0.0
    total_interest = 0.0
    rows: list[PayoffMonth] = []
    month = start_month

    for balance, principal, interest, payment in iter_amortization(
        balance=float(debt.balance),
        apr=debt.apr,
        monthly_payment=monthly_payment,
        max_months=max_months,
    ):
        total_paid += payment
        total_interest += interest
        rows.append(
            PayoffMonth(
                month=month,
                balance=normalize_currency(balance),
                principal=normalize_currency(principal),
                interest=normalize_currency(interest),
                payment=normalize_currency(payment),
            )
        )
        month += 1

    return PayoffDebtResult(
        debt_id=debt.id,
        debt_name=debt.name,
        payoff_month=month - 1,
        total_paid=normalize_currency(total_paid),
        total_interest=normalize_currency(total_interest),
        monthly_breakdown=tuple(rows),
    )


def calculate_debt_metrics(debts: Iterable[DebtForPayoff]) -> DebtMetrics:
    """Summarize total debt, EMI load and APR spread."""

    debts = list(debts)
    if not debts:
        return DebtMetrics(
            total_debt=0.0,
            total_monthly_emi=0.0,
            weighted_avg_apr=0.0,
            highest_apr=0.0,
            lowest_balance=0.0,
        )

    total_debt = sum(d.balance for d in debts)
    total_emi = sum(d.min_payment for d in debts)
    # Balance-weighted; a fully paid set has no meaningful weighting.
    weighted_apr = (
        sum(d.apr * d.balance for d in debts) / total_debt if total_debt > 0 else 0.0
    )

    return DebtMetrics(
        total_debt=normalize_currency(total_debt),
        total_monthly_emi=normalize_currency(total_emi),
        weighted_avg_apr=round(weighted_apr, 4),
        highest_apr=max(d.apr for d in debts),
        lowest_balance=min(d.balance for d in debts),
    )


def estimate_monthly_interest_burn(debts: Iterable[DebtForPayoff]) -> float:
    """Return the interest all debts accrue this month at current balances."""

    return sum(monthly_interest(d.balance, d.apr) for d in debts)


__all__ = [
    "calculate_debt_metrics",
    "estimate_monthly_interest_burn",
    "iter_amortization",
    "monthly_interest",
    "normalize_currency",
    "simulate_debt_payoff",
]
