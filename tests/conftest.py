from decimal import Decimal

import pytest

from annuity_calc.config import calculation_context
from annuity_calc.data_models import MonetaryAmount


@pytest.fixture
def ctx():
    """Default 64-digit calculation context, independent of the environment."""
    return calculation_context(env={})


@pytest.fixture
def usd():
    def make(value):
        return MonetaryAmount.of(value, "USD")

    return make


@pytest.fixture
def assert_close():
    """Compare decimals within an absolute tolerance given as a string."""

    def check(actual: Decimal, expected: Decimal, tolerance: str) -> None:
        assert abs(actual - expected) <= Decimal(tolerance), f"{actual} != {expected} (+/- {tolerance})"

    return check
