"""Utility functions for the annuity calculator.

This module provides helpers for turning user input (command-line strings,
plain Python numbers) into ``Decimal`` values, the only numeric type used by
the calculation engine.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .config import calculation_context
from .errors import InvalidArgumentError

Number = Union[Decimal, int, float, str]

_SUFFIXES = {"k": Decimal(1_000), "m": Decimal(1_000_000)}


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips whitespace, thousands separators (commas and
    underscores) and rejects anything that is not a finite number.
    """
    cleaned = value.strip().replace(",", "").replace("_", "")
    try:
        result = Decimal(cleaned)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid numeric value: {value}") from exc
    if not result.is_finite():
        raise InvalidArgumentError(f"Invalid numeric value: {value}")
    return result


def to_decimal(value: Number) -> Decimal:
    """Coerce ``value`` to a finite ``Decimal``.

    Floats are converted through their shortest ``repr`` so that ``0.01``
    becomes ``Decimal("0.01")`` and not the exact binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(f"Invalid numeric value: {value}")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, (float, str)):
        return decimal_from_str(str(value))
    raise InvalidArgumentError(f"Expected a number, got {type(value).__name__}")


def parse_amount(value: str) -> Decimal:
    """Parse a monetary amount with optional shorthand suffixes.

    Accepts plain numbers ("1200.00") and shorthand with ``k``/``m`` suffixes
    (e.g. "500k" meaning 500 000).
    """
    cleaned = value.strip().lower()
    factor = Decimal(1)
    if cleaned and cleaned[-1] in _SUFFIXES:
        factor = _SUFFIXES[cleaned[-1]]
        cleaned = cleaned[:-1]
    return calculation_context().multiply(decimal_from_str(cleaned), factor)


def parse_rate(value: str) -> Decimal:
    """Parse a periodic rate.

    A trailing ``%`` marks a percentage ("1%" -> 0.01); anything else is
    taken as a decimal fraction ("0.01").
    """
    cleaned = value.strip()
    if cleaned.endswith("%"):
        return calculation_context().divide(decimal_from_str(cleaned[:-1]), Decimal(100))
    return decimal_from_str(cleaned)


def parse_periods(value: str) -> int:
    """Parse a non-negative whole number of periods."""
    try:
        periods = int(value.strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid number of periods: {value}") from exc
    if periods < 0:
        raise InvalidArgumentError(f"Periods must be >= 0; got {periods}")
    return periods
