"""Command-line interface for the annuity calculator.

This module uses the ``click`` library to implement a multi-command
interface. Users can compute the level payment for a single loan or compare
two scenarios. Results are printed to the terminal or exported to JSON.
"""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Any, Dict, Optional

import click

from . import config
from .data_models import MonetaryAmount, Rate
from .engine import AnnuityPayment
from .errors import AnnuityCalcError
from .formatter import print_comparison, print_summary
from .logging_config import configure_logging, get_logger
from .utils import parse_amount, parse_periods, parse_rate

logger = get_logger(__name__)

DEFAULT_CURRENCY = "USD"


def build_summary(amount: str, rate: str, periods: str, currency: str = DEFAULT_CURRENCY) -> Dict[str, Any]:
    """Parse raw option values, run the calculation and collect the results.

    Decimal values are returned as strings so the summary can be dumped to
    JSON without losing precision.
    """
    try:
        principal = MonetaryAmount.of(parse_amount(amount), currency)
        operator = AnnuityPayment.of(Rate.of(parse_rate(rate)), parse_periods(periods))
        ctx = config.calculation_context()
        payment = operator.apply(principal, ctx)
    except AnnuityCalcError as exc:
        raise click.BadParameter(str(exc)) from exc

    total_paid = ctx.multiply(payment.amount, operator.periods)
    logger.info("payment_computed", operator=str(operator), amount=str(principal), payment=str(payment))
    return {
        "currency": principal.currency,
        "amount": str(principal.amount),
        "rate": str(operator.rate.get()),
        "periods": operator.periods,
        "payment": str(payment.amount),
        "total_paid": str(total_paid),
        "total_interest": str(ctx.subtract(total_paid, principal.amount)),
    }


def export_to_json(path: Path, summary: Dict[str, Any]) -> None:
    """Export a payment summary to a JSON file."""
    with path.open("w", encoding="utf-8") as f:
        json.dump({"summary": summary}, f, indent=2)


def parse_scenario_opts(opts: str) -> Dict[str, Any]:
    """Convert a quoted scenario option string into ``build_summary`` kwargs."""
    tokens = shlex.split(opts)
    params: Dict[str, Any] = {"amount": None, "rate": None, "periods": None, "currency": DEFAULT_CURRENCY}
    names = {
        "-a": "amount",
        "--amount": "amount",
        "-r": "rate",
        "--rate": "rate",
        "-n": "periods",
        "--periods": "periods",
        "-c": "currency",
        "--currency": "currency",
    }
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token not in names:
            raise click.BadParameter(f"Unknown option in scenario: {token}")
        if i + 1 >= len(tokens):
            raise click.BadParameter(f"Option {token} requires a value")
        params[names[token]] = tokens[i + 1]
        i += 2
    for required in ("amount", "rate", "periods"):
        if params[required] is None:
            raise click.BadParameter(f"Scenario missing required option {required}")
    return params


@click.group()
@click.option("--log-level", "log_level", default=None, help="Log level (default: $ANNUITY_CALC_LOG_LEVEL or WARNING)")
@click.option("--log-json", "log_json", is_flag=True, default=False, help="Emit log lines as JSON")
def cli(log_level: Optional[str], log_json: bool) -> None:
    """Compute level annuity payments for amortizing loans."""
    try:
        configure_logging(
            level=log_level or config.get_log_level(),
            format_json=log_json or config.get_log_json(),
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc


@cli.command()
@click.option("--amount", "-a", "amount", required=True, help="Principal amount (supports k/m suffixes)")
@click.option("--rate", "-r", "rate", required=True, help="Rate per period, e.g. 0.01 or 1%")
@click.option("--periods", "-n", "periods", required=True, help="Number of payment periods")
@click.option("--currency", "-c", "currency", default=DEFAULT_CURRENCY, show_default=True, help="Currency code")
@click.option("--output", "output", type=str, help="Output file path (.json)")
def payment(amount: str, rate: str, periods: str, currency: str, output: Optional[str]) -> None:
    """Compute and print the level payment per period."""
    summary = build_summary(amount, rate, periods, currency)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Unsupported output format; use .json")
        export_to_json(path, summary)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(summary)


@cli.command()
@click.option("--scenario1", "scenario1", required=True, help="First scenario options quoted string")
@click.option("--scenario2", "scenario2", required=True, help="Second scenario options quoted string")
def compare(scenario1: str, scenario2: str) -> None:
    """Compare two payment scenarios.

    Scenarios are provided as quoted option strings, for example:

        annuity-calc compare --scenario1 "-a 200k -r 0.5% -n 360" --scenario2 "-a 200k -r 0.4% -n 300"
    """
    summary1 = build_summary(**parse_scenario_opts(scenario1))
    summary2 = build_summary(**parse_scenario_opts(scenario2))
    print_comparison(summary1, summary2)


if __name__ == "__main__":
    cli()
