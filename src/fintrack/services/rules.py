"""Rule engine: deterministic financial-health alerts.

Each rule inspects a :class:`FinancialContext` and returns at most one
:class:`Alert`. Rules are independent; a rule that raises is logged and
skipped so the rest of the catalogue still runs. Output is ordered by
severity (high, medium, low) and keeps catalogue order within a severity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..config import (
    ALLOCATION_DRIFT_THRESHOLD,
    CC_UTILIZATION_HIGH_PERCENT,
    CC_UTILIZATION_MEDIUM_PERCENT,
    EMERGENCY_FUND_HIGH_MONTHS,
    EMERGENCY_FUND_MEDIUM_MONTHS,
    EMI_INCOME_HIGH_PERCENT,
    EMI_INCOME_MEDIUM_PERCENT,
    SAVINGS_RATE_MEDIUM_PERCENT,
    SAVINGS_RATE_TARGET_PERCENT,
)
from ..logging_config import get_logger
from ..models.alert import SEVERITY_ORDER, Alert
from ..models.context import FinancialContext

logger = get_logger(__name__)

CURRENCY_SYMBOL = "₹"

RuleCheck = Callable[[FinancialContext], Optional[Alert]]


def check_emergency_fund(ctx: FinancialContext) -> Alert | None:
    """Runway below the user's emergency-fund target."""

    if ctx.runway_months >= ctx.emergency_fund_months_target:
        return None

    if ctx.runway_months < EMERGENCY_FUND_HIGH_MONTHS:
        severity = "high"
    elif ctx.runway_months < EMERGENCY_FUND_MEDIUM_MONTHS:
        severity = "medium"
    else:
        severity = "low"

    return Alert(
        id="emergency-fund",
        severity=severity,
        title="Emergency Fund Low",
        message=(
            f"Your emergency fund covers {ctx.runway_months:.1f} months. "
            f"Target is {ctx.emergency_fund_months_target:g} months."
        ),
        action=(
            "Prioritize building emergency fund before other investments"
            if severity == "high"
            else "Consider allocating more savings to your emergency fund"
        ),
    )


def check_credit_card_utilization(ctx: FinancialContext) -> Alert | None:
    """Credit-card balance large relative to monthly income."""

    if ctx.cc_balance <= 0 or ctx.total_monthly_income <= 0:
        return None

    utilization = ctx.cc_balance / ctx.total_monthly_income * 100
    if utilization <= ctx.cc_utilization_max_percent:
        return None

    if utilization > CC_UTILIZATION_HIGH_PERCENT:
        severity = "high"
    elif utilization > CC_UTILIZATION_MEDIUM_PERCENT:
        severity = "medium"
    else:
        severity = "low"

    return Alert(
        id="cc-utilization",
        severity=severity,
        title="High Credit Card Balance",
        message=(
            f"Credit card balance is {utilization:.0f}% of monthly income. "
            f"Consider paying down to below {ctx.cc_utilization_max_percent:g}%."
        ),
        action="Pay off credit card balance to avoid high interest charges",
    )


def check_emi_to_income(ctx: FinancialContext) -> Alert | None:
    """EMIs above the recommended share of income."""

    if ctx.total_monthly_income <= 0:
        return None

    emi_percent = ctx.total_monthly_emi / ctx.total_monthly_income * 100
    if emi_percent <= ctx.emi_to_income_max_percent:
        return None

    if emi_percent > EMI_INCOME_HIGH_PERCENT:
        severity = "high"
    elif emi_percent > EMI_INCOME_MEDIUM_PERCENT:
        severity = "medium"
    else:
        severity = "low"

    return Alert(
        id="emi-income-ratio",
        severity=severity,
        title="High EMI Burden",
        message=(
            f"EMIs consume {emi_percent:.1f}% of income "
            f"(recommended: <{ctx.emi_to_income_max_percent:g}%)."
        ),
        action=(
            "Consider debt consolidation or refinancing options"
            if severity == "high"
            else "Avoid taking on new debt until EMI ratio improves"
        ),
    )


def check_high_apr_debt_with_investments(ctx: FinancialContext) -> Alert | None:
    """High-interest debt held alongside liquid assets beyond the emergency reserve."""

    if not ctx.has_high_apr_debt:
        return None

    reserve = ctx.emergency_fund_months_target * (
        ctx.total_monthly_expenses + ctx.total_monthly_emi
    )
    if ctx.liquid_assets - reserve <= 0:
        return None

    return Alert(
        id="high-apr-with-investments",
        severity="medium",
        title="High Interest Debt Coexists with Investments",
        message=(
            f"You have debt at {ctx.highest_debt_apr * 100:.1f}% APR while holding "
            "investments. Debt interest likely exceeds investment returns."
        ),
        action="Consider using liquid investments to pay off high-interest debt first",
    )


def check_negative_cashflow(ctx: FinancialContext) -> Alert | None:
    if ctx.free_cashflow >= 0:
        return None

    return Alert(
        id="negative-cashflow",
        severity="high",
        title="Negative Monthly Cashflow",
        message=(
            f"You're spending {CURRENCY_SYMBOL}{abs(ctx.free_cashflow):,.0f} "
            "more than you earn each month."
        ),
        action="Review and reduce discretionary expenses immediately",
    )


def check_savings_rate(ctx: FinancialContext) -> Alert | None:
    """Savings rate under target; any shortfall belongs to the cashflow rule."""

    if ctx.savings_rate >= SAVINGS_RATE_TARGET_PERCENT:
        return None
    # Zero income reports a 0% rate even while cashflow is negative
    if ctx.savings_rate < 0 or ctx.free_cashflow < 0:
        return None

    severity = "medium" if ctx.savings_rate < SAVINGS_RATE_MEDIUM_PERCENT else "low"

    return Alert(
        id="low-savings-rate",
        severity=severity,
        title="Low Savings Rate",
        message=(
            f"Your savings rate is {ctx.savings_rate:.1f}%. "
            f"Target at least {SAVINGS_RATE_TARGET_PERCENT}% for long-term wealth building."
        ),
        action="Look for ways to increase income or reduce fixed expenses",
    )


def check_allocation_drift(ctx: FinancialContext) -> Alert | None:
    """Largest asset-class drift from target, when beyond the drift threshold."""

    drifts = []
    for asset_type, target in ctx.allocation_targets.as_dict().items():
        actual = ctx.asset_allocation.get(asset_type, 0.0)
        diff = actual - target
        if abs(diff) > ALLOCATION_DRIFT_THRESHOLD:
            drifts.append((asset_type, actual, target, diff))

    if not drifts:
        return None

    # max() keeps the first of equal drifts, matching catalogue key order
    asset_type, actual, target, diff = max(drifts, key=lambda d: abs(d[3]))
    direction = "overweight" if diff > 0 else "underweight"

    return Alert(
        id="allocation-drift",
        severity="low",
        title="Portfolio Allocation Drift",
        message=(
            f"{asset_type.upper()} is {direction} by {abs(diff):.1f}% "
            f"(actual: {actual:.1f}%, target: {target:g}%)."
        ),
        action=(
            f"Consider rebalancing: reduce {asset_type} allocation"
            if diff > 0
            else f"Consider rebalancing: increase {asset_type} allocation"
        ),
    )


def check_no_income(ctx: FinancialContext) -> Alert | None:
    if ctx.total_monthly_income > 0:
        return None

    return Alert(
        id="no-income",
        severity="medium",
        title="No Income Tracked",
        message=(
            "No income streams are recorded. "
            "Add your income sources for accurate financial tracking."
        ),
        action="Go to Cashflow page and add your income streams",
    )


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Result of running one rule: an alert, nothing, or a captured failure."""

    rule_id: str
    alert: Alert | None = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def triggered(self) -> bool:
        return self.alert is not None


@dataclass(frozen=True, slots=True)
class Rule:
    """A named predicate in the alert catalogue."""

    id: str
    check: RuleCheck

    def run(self, ctx: FinancialContext) -> RuleOutcome:
        try:
            alert = self.check(ctx)
            if alert is not None and alert.severity not in SEVERITY_ORDER:
                raise ValueError(f"Unknown alert severity {alert.severity!r}")
            return RuleOutcome(rule_id=self.id, alert=alert)
        except Exception as exc:  # one faulty rule must not abort the catalogue
            logger.error(
                "Error evaluating rule",
                exc_info=True,
                extra={"rule_id": self.id},
            )
            return RuleOutcome(rule_id=self.id, error=exc)


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("emergency-fund", check_emergency_fund),
    Rule("cc-utilization", check_credit_card_utilization),
    Rule("emi-income-ratio", check_emi_to_income),
    Rule("high-apr-with-investments", check_high_apr_debt_with_investments),
    Rule("negative-cashflow", check_negative_cashflow),
    Rule("low-savings-rate", check_savings_rate),
    Rule("allocation-drift", check_allocation_drift),
    Rule("no-income", check_no_income),
)


def sort_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Stable sort by severity, high first."""
    return sorted(alerts, key=lambda alert: alert.rank)


class RuleEngine:
    """Evaluates a fixed, ordered rule catalogue against a context."""

    def __init__(self, rules: Iterable[Rule] = DEFAULT_RULES):
        self.rules: tuple[Rule, ...] = tuple(rules)

    def run(self, ctx: FinancialContext) -> list[RuleOutcome]:
        """Run every rule in catalogue order and return the raw outcomes."""
        return [rule.run(ctx) for rule in self.rules]

    def evaluate(self, ctx: FinancialContext) -> list[Alert]:
        outcomes = self.run(ctx)
        alerts = sort_alerts(outcome.alert for outcome in outcomes if outcome.triggered)

        failed = [outcome.rule_id for outcome in outcomes if outcome.failed]
        logger.debug(
            "Rules evaluated",
            extra={
                "alert_ids": [alert.id for alert in alerts],
                "failed_rules": failed,
            },
        )
        return alerts


_default_engine = RuleEngine()


def evaluate_rules(ctx: FinancialContext) -> list[Alert]:
    """Evaluate the default catalogue."""
    return _default_engine.evaluate(ctx)


__all__ = [
    "DEFAULT_RULES",
    "Rule",
    "RuleEngine",
    "RuleOutcome",
    "evaluate_rules",
    "sort_alerts",
]
