"""Pytest configuration and shared fixtures for fintrack tests.

Provides debt and context factories plus float helpers so payoff and rule
tests can build inputs without repeating every field.
"""

from __future__ import annotations

import logging

import pytest

from fintrack.models import DebtForPayoff, FinancialContext, UserSettings
from fintrack.services.context import build_context

# =============================================================================
# Debt Fixtures
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for DebtForPayoff snapshots with sensible defaults."""

    counter = {"next": 1}

    def _create_debt(
        *,
        balance: float = 1000.0,
        apr: float = 0.12,
        min_payment: float = 50.0,
        name: str | None = None,
        id: str | None = None,
    ) -> DebtForPayoff:
        index = counter["next"]
        counter["next"] += 1
        return DebtForPayoff(
            id=id or str(index),
            name=name or f"Debt {index}",
            balance=balance,
            apr=apr,
            min_payment=min_payment,
        )

    return _create_debt


@pytest.fixture
def sample_debts() -> list[DebtForPayoff]:
    """Credit card, personal loan and home loan in an Indian-rupee household."""

    return [
        DebtForPayoff(id="1", name="Credit Card", balance=50000, apr=0.42, min_payment=5000),
        DebtForPayoff(id="2", name="Personal Loan", balance=200000, apr=0.14, min_payment=8000),
        DebtForPayoff(id="3", name="Home Loan", balance=5000000, apr=0.085, min_payment=50000),
    ]


# =============================================================================
# Context Fixtures
# =============================================================================


@pytest.fixture
def healthy_allocation() -> dict[str, float]:
    """Actual allocation sitting exactly on the default targets."""

    return {"equity": 40.0, "mf": 25.0, "crypto": 10.0, "gold": 10.0, "realestate": 10.0, "other": 5.0}


@pytest.fixture
def context_factory(healthy_allocation):
    """Factory for FinancialContext built through build_context.

    Defaults describe a household that triggers no alerts: 25% savings rate,
    8 months of runway, modest EMIs and no credit-card balance.
    """

    def _create_context(
        *,
        income: float = 100000.0,
        expenses: float = 55000.0,
        emi: float = 20000.0,
        liquid_assets: float = 600000.0,
        total_assets: float | None = None,
        total_liabilities: float = 500000.0,
        cc_balance: float = 0.0,
        highest_apr: float = 0.09,
        asset_allocation: dict[str, float] | None = None,
        settings: UserSettings | None = None,
    ) -> FinancialContext:
        return build_context(
            income=income,
            expenses=expenses,
            emi=emi,
            liquid_assets=liquid_assets,
            total_assets=liquid_assets if total_assets is None else total_assets,
            total_liabilities=total_liabilities,
            cc_balance=cc_balance,
            highest_apr=highest_apr,
            asset_allocation=healthy_allocation if asset_allocation is None else asset_allocation,
            settings=settings or UserSettings(),
        )

    return _create_context


@pytest.fixture
def fintrack_caplog(caplog):
    """caplog capturing DEBUG records from the fintrack package logger."""

    caplog.set_level(logging.DEBUG, logger="fintrack")
    return caplog


# =============================================================================
# Helpers
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Financial calculations with floats can have small rounding differences.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
