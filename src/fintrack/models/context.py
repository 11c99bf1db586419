"""Aggregated financial snapshot evaluated by the rule engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .settings import AllocationTargets


@dataclass(frozen=True, slots=True)
class FinancialContext:
    """Monthly aggregates plus the user's thresholds.

    Percentages (savings rate, allocation, thresholds) are expressed 0-100;
    ``highest_debt_apr`` stays a decimal fraction. ``runway_months`` is
    ``math.inf`` when there is no monthly burn.
    """

    # Cashflow
    total_monthly_income: float
    total_monthly_expenses: float
    total_monthly_emi: float
    free_cashflow: float
    savings_rate: float

    # Assets
    liquid_assets: float
    total_assets: float

    # Liabilities
    total_liabilities: float
    highest_debt_apr: float
    cc_balance: float
    has_high_apr_debt: bool

    # Settings
    emergency_fund_months_target: float
    emi_to_income_max_percent: float
    cc_utilization_max_percent: float
    allocation_targets: AllocationTargets = field(default_factory=AllocationTargets)

    asset_allocation: Mapping[str, float] = field(default_factory=dict)
    short_term_liabilities: float = 0.0

    # Computed
    runway_months: float = math.inf
    debt_to_income_ratio: float = 0.0

    def __post_init__(self) -> None:
        # Freeze the allocation mapping so the snapshot stays read-only.
        object.__setattr__(
            self, "asset_allocation", MappingProxyType(dict(self.asset_allocation))
        )
