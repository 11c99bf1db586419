"""fintrack: debt payoff simulation and financial-health alerts."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .services.context import ContextBuilder, build_context
from .services.payoff import compare_strategies, simulate_payoff
from .services.rules import RuleEngine, evaluate_rules

__all__ = [
    "BaseConfig",
    "ContextBuilder",
    "DevConfig",
    "RuleEngine",
    "build_context",
    "compare_strategies",
    "evaluate_rules",
    "simulate_payoff",
]
