"""Runtime configuration for the annuity calculator.

Settings are read from the process environment:

``ANNUITY_CALC_PRECISION``
    Number of significant digits used for every intermediate decimal
    operation (default ``64``).
``ANNUITY_CALC_ROUNDING``
    Name of a ``decimal`` rounding mode, e.g. ``ROUND_HALF_EVEN`` (default).
``ANNUITY_CALC_LOG_LEVEL``
    Log level used by the command-line interface (default ``WARNING``).
``ANNUITY_CALC_LOG_JSON``
    ``1``/``true``/``yes`` renders log lines as JSON.
"""

from __future__ import annotations

import decimal
import os
from decimal import Context
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_PRECISION = 64
DEFAULT_ROUNDING = decimal.ROUND_HALF_EVEN
DEFAULT_LOG_LEVEL = "WARNING"

ROUNDING_MODES = {
    name: getattr(decimal, name)
    for name in (
        "ROUND_UP",
        "ROUND_DOWN",
        "ROUND_CEILING",
        "ROUND_FLOOR",
        "ROUND_HALF_UP",
        "ROUND_HALF_DOWN",
        "ROUND_HALF_EVEN",
        "ROUND_05UP",
    )
}

_TRUTHY = {"1", "true", "yes", "on"}


def _environ(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def get_precision(env: Optional[Mapping[str, str]] = None) -> int:
    raw = _environ(env).get("ANNUITY_CALC_PRECISION", "").strip()
    if not raw:
        return DEFAULT_PRECISION
    try:
        precision = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid ANNUITY_CALC_PRECISION: {raw}") from exc
    if precision < 1:
        raise ConfigurationError(f"ANNUITY_CALC_PRECISION must be >= 1; got {precision}")
    return precision


def get_rounding(env: Optional[Mapping[str, str]] = None) -> str:
    raw = _environ(env).get("ANNUITY_CALC_ROUNDING", "").strip().upper()
    if not raw:
        return DEFAULT_ROUNDING
    if not raw.startswith("ROUND_"):
        raw = f"ROUND_{raw}"
    try:
        return ROUNDING_MODES[raw]
    except KeyError as exc:
        raise ConfigurationError(f"Unknown ANNUITY_CALC_ROUNDING: {raw}") from exc


def get_log_level(env: Optional[Mapping[str, str]] = None) -> str:
    return _environ(env).get("ANNUITY_CALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def get_log_json(env: Optional[Mapping[str, str]] = None) -> bool:
    return _environ(env).get("ANNUITY_CALC_LOG_JSON", "").strip().lower() in _TRUTHY


def calculation_context(env: Optional[Mapping[str, str]] = None) -> Context:
    """Return a fresh decimal context for a calculation.

    The context traps division by zero, invalid operations and overflow so
    that no infinity or NaN ever leaves a calculation. The process-wide
    ``decimal`` context is left untouched.
    """
    return Context(
        prec=get_precision(env),
        rounding=get_rounding(env),
        traps=[decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow],
    )
