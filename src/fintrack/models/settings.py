"""User-configured thresholds consumed by the alert engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AllocationTargets:
    """Target portfolio allocation in percent; values sum to 100."""

    equity: float = 40.0
    mf: float = 25.0
    crypto: float = 10.0
    gold: float = 10.0
    realestate: float = 10.0
    other: float = 5.0

    def as_dict(self) -> dict[str, float]:
        return {
            "equity": self.equity,
            "mf": self.mf,
            "crypto": self.crypto,
            "gold": self.gold,
            "realestate": self.realestate,
            "other": self.other,
        }


@dataclass(frozen=True, slots=True)
class UserSettings:
    """Settings snapshot supplied by the settings collaborator."""

    emergency_fund_months_target: float = 6.0
    emi_to_income_max_percent: float = 35.0
    cc_utilization_max_percent: float = 30.0
    allocation_targets: AllocationTargets = field(default_factory=AllocationTargets)

    def to_dict(self) -> dict:
        return {
            "emergencyFundMonthsTarget": self.emergency_fund_months_target,
            "emiToIncomeMaxPercent": self.emi_to_income_max_percent,
            "ccUtilizationMaxPercent": self.cc_utilization_max_percent,
            "allocationTargets": self.allocation_targets.as_dict(),
        }
