"""Output helpers for the annuity calculator.

This module renders payment results in a plain tabular text format. Values
are printed exactly as computed; no rounding to the currency's minor unit is
applied here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict

PaymentSummary = Dict[str, object]


def print_summary(summary: PaymentSummary) -> None:
    """Print a single payment calculation in a human-readable format."""
    currency = summary["currency"]
    print("Annuity payment")
    print("-" * 72)
    print(f"Amount             : {currency} {summary['amount']}")
    print(f"Rate per period    : {summary['rate']}")
    print(f"Periods            : {summary['periods']}")
    print(f"Payment            : {currency} {summary['payment']}")
    print(f"Total paid         : {currency} {summary['total_paid']}")
    print(f"Total interest     : {currency} {summary['total_interest']}")
    print("-" * 72)


def print_comparison(s1: PaymentSummary, s2: PaymentSummary) -> None:
    """Print two payment summaries side by side.

    The last column is the difference (scenario2 - scenario1). A negative
    difference means the second scenario is cheaper.
    """
    print("Comparison")
    print("=" * 72)
    keys = ["payment", "total_paid", "total_interest"]
    print(f"{'Metric':16s} {'Scenario1':>18s} {'Scenario2':>18s} {'Difference':>16s}")
    for key in keys:
        v1 = Decimal(s1[key])
        v2 = Decimal(s2[key])
        diff = v2 - v1
        print(f"{key:16s} {v1:18.2f} {v2:18.2f} {diff:16.2f}")
    if s1["currency"] != s2["currency"]:
        print(f"Note: scenarios use different currencies ({s1['currency']} vs {s2['currency']})")
    print("=" * 72)
