"""Model exports for fintrack records."""

from .alert import SEVERITY_ORDER, Alert, AlertSeverity
from .context import FinancialContext
from .debt import (
    STRATEGIES,
    BaselineResult,
    DebtForPayoff,
    DebtMetrics,
    PayoffDebtResult,
    PayoffMonth,
    PayoffSimulation,
    Strategy,
    StrategyComparison,
)
from .settings import AllocationTargets, UserSettings
from .summary import (
    AssetItem,
    CashAccount,
    CashflowSummary,
    ExpenseItem,
    IncomeItem,
    LiabilityItem,
    MonthlyProjection,
    NetWorthSummary,
)

__all__ = [
    "Alert",
    "AlertSeverity",
    "AllocationTargets",
    "AssetItem",
    "BaselineResult",
    "CashAccount",
    "CashflowSummary",
    "DebtForPayoff",
    "DebtMetrics",
    "ExpenseItem",
    "FinancialContext",
    "IncomeItem",
    "LiabilityItem",
    "MonthlyProjection",
    "NetWorthSummary",
    "PayoffDebtResult",
    "PayoffMonth",
    "PayoffSimulation",
    "SEVERITY_ORDER",
    "STRATEGIES",
    "Strategy",
    "StrategyComparison",
    "UserSettings",
]
