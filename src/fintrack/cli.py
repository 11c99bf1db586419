"""Command line entry point for payoff projections and alert checks."""

from __future__ import annotations

import json

import click

from .config import BaseConfig, DevConfig
from .logging_config import setup_logging
from .models.debt import STRATEGIES, DebtForPayoff
from .models.settings import UserSettings
from .services.context import build_context
from .services.payoff import compare_strategies, simulate_payoff
from .services.rules import evaluate_rules


def parse_debt(value: str, index: int) -> DebtForPayoff:
    """Parse ``NAME:BALANCE:APR:MIN_PAYMENT`` into a validated debt snapshot."""

    try:
        name, balance, apr, min_payment = value.rsplit(":", 3)
        debt = DebtForPayoff(
            id=str(index),
            name=name.strip() or f"Debt {index}",
            balance=float(balance),
            apr=float(apr),
            min_payment=float(min_payment),
        )
    except ValueError as exc:
        raise click.BadParameter(
            f"{value!r} is not NAME:BALANCE:APR:MIN_PAYMENT", param_hint="--debt"
        ) from exc

    if debt.balance < 0:
        raise click.BadParameter(f"balance must be >= 0 in {value!r}", param_hint="--debt")
    if not 0 <= debt.apr <= 1:
        raise click.BadParameter(
            f"apr must be a fraction between 0 and 1 in {value!r}", param_hint="--debt"
        )
    if debt.min_payment <= 0:
        raise click.BadParameter(f"minimum payment must be > 0 in {value!r}", param_hint="--debt")
    return debt


def _parse_debts(values: tuple[str, ...]) -> list[DebtForPayoff]:
    return [parse_debt(value, index) for index, value in enumerate(values, start=1)]


def _echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


debt_option = click.option(
    "--debt",
    "debts",
    multiple=True,
    required=True,
    help="Debt as NAME:BALANCE:APR:MIN_PAYMENT (APR as a fraction, e.g. 0.18).",
)
extra_option = click.option(
    "--extra",
    type=click.FloatRange(min=0),
    default=0.0,
    show_default=True,
    help="Extra amount paid toward debt each month.",
)


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable dev-mode logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Debt payoff projections and financial-health alerts."""

    config = DevConfig() if verbose else BaseConfig()
    if verbose:
        setup_logging(config)
    ctx.obj = config


@main.command()
@debt_option
@click.option(
    "--strategy",
    type=click.Choice(STRATEGIES),
    default="avalanche",
    show_default=True,
)
@extra_option
@click.option("--summary", is_flag=True, default=False, help="Omit monthly breakdown rows.")
def payoff(debts: tuple[str, ...], strategy: str, extra: float, summary: bool) -> None:
    """Simulate paying off debts with one strategy."""

    simulation = simulate_payoff(_parse_debts(debts), strategy, extra)
    _echo_json(simulation.to_dict(include_breakdown=not summary))


@main.command()
@debt_option
@extra_option
def compare(debts: tuple[str, ...], extra: float) -> None:
    """Compare avalanche and snowball and print a recommendation."""

    comparison = compare_strategies(_parse_debts(debts), extra)
    _echo_json(comparison.to_dict())


@main.command()
@click.option("--income", type=float, default=0.0, help="Total monthly income.")
@click.option("--expenses", type=float, default=0.0, help="Monthly expenses excluding EMIs.")
@click.option("--emi", type=float, default=0.0, help="Total monthly EMIs.")
@click.option("--liquid", type=float, default=0.0, help="Liquid assets.")
@click.option("--total-assets", type=float, default=None, help="Defaults to liquid assets.")
@click.option("--liabilities", type=float, default=0.0, help="Total outstanding debt.")
@click.option("--cc-balance", type=float, default=0.0, help="Credit card balance.")
@click.option("--highest-apr", type=float, default=0.0, help="Highest debt APR as a fraction.")
@click.option(
    "--allocation",
    multiple=True,
    help="Actual allocation as TYPE=PERCENT, e.g. equity=55.",
)
@click.pass_obj
def alerts(
    config: BaseConfig,
    income: float,
    expenses: float,
    emi: float,
    liquid: float,
    total_assets: float | None,
    liabilities: float,
    cc_balance: float,
    highest_apr: float,
    allocation: tuple[str, ...],
) -> None:
    """Evaluate financial-health alerts for monthly figures."""

    asset_allocation: dict[str, float] = {}
    for item in allocation:
        key, sep, percent = item.partition("=")
        try:
            if not sep:
                raise ValueError(item)
            asset_allocation[key.strip()] = float(percent)
        except ValueError as exc:
            raise click.BadParameter(
                f"{item!r} is not TYPE=PERCENT", param_hint="--allocation"
            ) from exc

    settings: UserSettings = config.default_settings()
    context = build_context(
        income=income,
        expenses=expenses,
        emi=emi,
        liquid_assets=liquid,
        total_assets=liquid if total_assets is None else total_assets,
        total_liabilities=liabilities,
        cc_balance=cc_balance,
        highest_apr=highest_apr,
        asset_allocation=asset_allocation,
        settings=settings,
    )
    _echo_json([alert.to_dict() for alert in evaluate_rules(context)])


if __name__ == "__main__":  # pragma: no cover
    main()
