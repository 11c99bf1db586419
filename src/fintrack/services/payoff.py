"""Debt payoff simulation (snowball and avalanche)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..config import MAX_SIMULATION_MONTHS, PAID_OFF_TOLERANCE, RECOMMENDATION_THRESHOLD
from ..logging_config import get_logger
from ..models.debt import (
    STRATEGIES,
    BaselineResult,
    DebtForPayoff,
    PayoffDebtResult,
    PayoffMonth,
    PayoffSimulation,
    StrategyComparison,
)
from .amortization import iter_amortization, monthly_interest, normalize_currency

logger = get_logger(__name__)


@dataclass(slots=True)
class _DebtLedger:
    """Running state for one debt inside the cascading loop."""

    debt: DebtForPayoff
    balance: float
    payoff_month: int = 0
    total_paid: float = 0.0
    total_interest: float = 0.0
    rows: list[PayoffMonth] = field(default_factory=list)

    @property
    def paid(self) -> bool:
        return self.balance <= PAID_OFF_TOLERANCE

    @property
    def freed_payment(self) -> float:
        # Only debts cleared during the simulation release their EMI.
        return self.debt.min_payment if self.paid and self.payoff_month > 0 else 0.0

    def result(self) -> PayoffDebtResult:
        return PayoffDebtResult(
            debt_id=self.debt.id,
            debt_name=self.debt.name,
            payoff_month=self.payoff_month,
            total_paid=normalize_currency(self.total_paid),
            total_interest=normalize_currency(self.total_interest),
            monthly_breakdown=tuple(self.rows),
        )


def sort_for_avalanche(debts: Iterable[DebtForPayoff]) -> list[DebtForPayoff]:
    """Return a copy ordered by APR, highest first."""
    return sorted(debts, key=lambda d: d.apr, reverse=True)


def sort_for_snowball(debts: Iterable[DebtForPayoff]) -> list[DebtForPayoff]:
    """Return a copy ordered by balance, smallest first."""
    return sorted(debts, key=lambda d: d.balance)


def order_debts(debts: Iterable[DebtForPayoff], strategy: str) -> list[DebtForPayoff]:
    """Order *debts* for the requested strategy."""

    if strategy == "avalanche":
        return sort_for_avalanche(debts)
    if strategy == "snowball":
        return sort_for_snowball(debts)
    raise ValueError("Invalid debt payoff strategy.")


def simulate_baseline(
    debts: Iterable[DebtForPayoff], *, max_months: int = MAX_SIMULATION_MONTHS
) -> BaselineResult:
    """Minimum-payment-only reference: every debt on its own EMI, no cascading."""

    total_interest = 0.0
    longest = 0
    for debt in debts:
        months = 0
        for _balance, _principal, interest, _payment in iter_amortization(
            balance=float(debt.balance),
            apr=debt.apr,
            monthly_payment=debt.min_payment,
            max_months=max_months,
        ):
            total_interest += interest
            months += 1
        longest = max(longest, months)

    return BaselineResult(
        total_months=longest, total_interest_paid=normalize_currency(total_interest)
    )


def _run_month(
    ledgers: Sequence[_DebtLedger], *, month: int, extra_payment: float
) -> float:
    """Apply one month of payments in priority order; return interest accrued."""

    freed = sum(ledger.freed_payment for ledger in ledgers)
    priority = next(ledger for ledger in ledgers if not ledger.paid)
    month_interest = 0.0

    for ledger in ledgers:
        if ledger.paid:
            continue

        interest = monthly_interest(ledger.balance, ledger.debt.apr)
        month_interest += interest

        budget = ledger.debt.min_payment
        if ledger is priority:
            budget += extra_payment + freed
        payment = min(budget, ledger.balance + interest)
        principal = payment - interest

        ledger.balance = max(0.0, ledger.balance - principal)
        ledger.total_paid += payment
        ledger.total_interest += interest
        if ledger.paid:
            ledger.balance = 0.0
            ledger.payoff_month = month

        ledger.rows.append(
            PayoffMonth(
                month=month,
                balance=normalize_currency(ledger.balance),
                principal=normalize_currency(principal),
                interest=normalize_currency(interest),
                payment=normalize_currency(payment),
            )
        )

    return month_interest


def simulate_payoff(
    debts: Iterable[DebtForPayoff],
    strategy: str,
    extra_monthly_payment: float = 0.0,
    *,
    max_months: int = MAX_SIMULATION_MONTHS,
) -> PayoffSimulation:
    """Simulate month-by-month payoff with cascading payments.

    Each month the first unpaid debt in strategy order receives its own
    minimum, the extra payment, and every minimum released by debts cleared in
    earlier months. All other debts receive their minimum. Per-debt breakdown
    rows are recorded in the same pass, so ``total_months`` is the month the
    last debt clears (or ``max_months`` when a debt never amortizes).
    """

    ordered = order_debts(debts, strategy)
    if not ordered:
        return PayoffSimulation(
            strategy=strategy,
            extra_payment=extra_monthly_payment,
            debts=(),
            total_months=0,
            total_interest_paid=0.0,
        )

    ledgers = [_DebtLedger(debt=debt, balance=float(debt.balance)) for debt in ordered]
    total_interest = 0.0
    month = 0

    while month < max_months and any(not ledger.paid for ledger in ledgers):
        month += 1
        total_interest += _run_month(ledgers, month=month, extra_payment=extra_monthly_payment)

    unpaid = [ledger for ledger in ledgers if not ledger.paid]
    for ledger in unpaid:
        ledger.payoff_month = month
    if unpaid:
        logger.warning(
            "Payoff simulation hit the month cap with balances outstanding",
            extra={
                "strategy": strategy,
                "max_months": max_months,
                "unpaid_debts": [ledger.debt.id for ledger in unpaid],
            },
        )

    results = tuple(ledger.result() for ledger in ledgers)
    total_months = max(result.payoff_month for result in results)
    baseline = simulate_baseline(ordered, max_months=max_months)
    total_interest_paid = normalize_currency(total_interest)

    simulation = PayoffSimulation(
        strategy=strategy,
        extra_payment=extra_monthly_payment,
        debts=results,
        total_months=total_months,
        total_interest_paid=total_interest_paid,
        months_saved=max(0, baseline.total_months - total_months),
        interest_saved=max(
            0.0, normalize_currency(baseline.total_interest_paid - total_interest_paid)
        ),
    )
    logger.debug(
        "Payoff simulated",
        extra={
            "strategy": strategy,
            "debt_count": len(results),
            "extra_payment": extra_monthly_payment,
            "total_months": total_months,
            "total_interest_paid": total_interest_paid,
        },
    )
    return simulation


def compare_strategies(
    debts: Iterable[DebtForPayoff], extra_monthly_payment: float = 0.0
) -> StrategyComparison:
    """Run both strategies and recommend one.

    Avalanche is recommended only when it saves more than
    ``RECOMMENDATION_THRESHOLD`` in interest; below that the quicker early
    wins of snowball are preferred.
    """

    debts = list(debts)
    avalanche = simulate_payoff(debts, "avalanche", extra_monthly_payment)
    snowball = simulate_payoff(debts, "snowball", extra_monthly_payment)

    interest_difference = snowball.total_interest_paid - avalanche.total_interest_paid
    recommendation = "avalanche" if interest_difference > RECOMMENDATION_THRESHOLD else "snowball"

    return StrategyComparison(
        avalanche=avalanche,
        snowball=snowball,
        recommendation=recommendation,
        interest_difference=normalize_currency(interest_difference),
    )


__all__ = [
    "STRATEGIES",
    "compare_strategies",
    "order_debts",
    "simulate_baseline",
    "simulate_payoff",
    "sort_for_avalanche",
    "sort_for_snowball",
]
