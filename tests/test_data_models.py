"""Tests for MonetaryAmount and Rate."""

import dataclasses
from decimal import Decimal

import pytest

from annuity_calc.data_models import MonetaryAmount, Rate
from annuity_calc.errors import DivisionByZeroError, InvalidArgumentError


class TestMonetaryAmount:
    def test_of_parses_strings_and_normalizes_currency(self):
        amount = MonetaryAmount.of("1,200.50", " usd ")
        assert amount.amount == Decimal("1200.50")
        assert amount.currency == "USD"

    def test_of_converts_floats_through_repr(self):
        assert MonetaryAmount.of(0.1, "EUR").amount == Decimal("0.1")

    def test_of_accepts_int_and_decimal(self):
        assert MonetaryAmount.of(5, "PLN").amount == Decimal(5)
        assert MonetaryAmount.of(Decimal("-3.25"), "PLN").amount == Decimal("-3.25")

    @pytest.mark.parametrize("currency", ["", "   ", None])
    def test_currency_required(self, currency):
        with pytest.raises(InvalidArgumentError, match="Currency required"):
            MonetaryAmount.of("10", currency)

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", Decimal("NaN"), True, None])
    def test_rejects_non_numeric_amounts(self, value):
        with pytest.raises(InvalidArgumentError):
            MonetaryAmount.of(value, "USD")

    def test_direct_construction_is_validated(self):
        amount = MonetaryAmount("1,200.50", "eur")
        assert amount == MonetaryAmount.of(Decimal("1200.50"), "EUR")
        with pytest.raises(InvalidArgumentError, match="Amount required"):
            MonetaryAmount(None, "USD")
        with pytest.raises(InvalidArgumentError, match="Currency required"):
            MonetaryAmount(Decimal(1), "")
        with pytest.raises(InvalidArgumentError):
            MonetaryAmount(Decimal("Infinity"), "USD")

    def test_multiply_and_divide_keep_currency(self, ctx):
        amount = MonetaryAmount.of("100", "GBP")
        assert amount.multiply("1.5", ctx) == MonetaryAmount(Decimal("150.0"), "GBP")
        divided = amount.divide(3, ctx)
        assert divided.currency == "GBP"
        assert divided.amount == ctx.divide(Decimal(100), Decimal(3))

    def test_divide_uses_configured_precision_by_default(self, monkeypatch):
        monkeypatch.setenv("ANNUITY_CALC_PRECISION", "5")
        assert MonetaryAmount.of("100", "USD").divide(3).amount == Decimal("33.333")

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            MonetaryAmount.of("100", "USD").divide(0)

    def test_str(self):
        assert str(MonetaryAmount.of("1200.00", "usd")) == "USD 1200.00"

    def test_immutable(self):
        amount = MonetaryAmount.of("1", "USD")
        with pytest.raises(dataclasses.FrozenInstanceError):
            amount.amount = Decimal(2)


class TestRate:
    def test_of_and_get(self):
        assert Rate.of("0.01").get() == Decimal("0.01")
        assert Rate.of(0.025).get() == Decimal("0.025")
        assert Rate.of(0).get() == Decimal(0)

    def test_missing_rate(self):
        with pytest.raises(InvalidArgumentError, match="Rate required"):
            Rate.of(None)

    def test_direct_construction_is_validated(self):
        assert Rate("0.01").get() == Decimal("0.01")
        with pytest.raises(InvalidArgumentError, match="Rate required"):
            Rate(None)
        with pytest.raises(InvalidArgumentError):
            Rate(Decimal("NaN"))

    def test_invalid_rate(self):
        with pytest.raises(InvalidArgumentError):
            Rate.of("one percent")

    def test_str(self):
        assert str(Rate.of("0.01")) == "Rate[0.01]"

    def test_equality_and_hash(self):
        assert Rate.of("0.01") == Rate.of(Decimal("0.01"))
        assert len({Rate.of("0.01"), Rate.of(0.01)}) == 1
