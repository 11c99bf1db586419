"""Service module exports."""

from . import amortization, cashflow, context, networth, payoff, rules

__all__ = [
    "amortization",
    "cashflow",
    "context",
    "networth",
    "payoff",
    "rules",
]
