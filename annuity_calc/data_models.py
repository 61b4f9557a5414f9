"""Data models for the annuity calculator.

This module defines the immutable value objects the engine works with: a
monetary amount tied to a currency and a dimensionless periodic rate. Frozen
dataclasses keep them hashable and safe to share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import Optional

from .config import calculation_context
from .errors import DivisionByZeroError, InvalidArgumentError
from .utils import Number, to_decimal


@dataclass(frozen=True)
class MonetaryAmount:
    """An exact decimal quantity in a given currency.

    Attributes
    ----------
    amount: Decimal
        The numeric value. Any sign and magnitude is accepted.
    currency: str
        The currency code, e.g. ``"USD"``. Stored upper-case.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if self.amount is None:
            raise InvalidArgumentError("Amount required")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidArgumentError("Currency required")
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "currency", self.currency.strip().upper())

    @classmethod
    def of(cls, amount: Number, currency: str) -> "MonetaryAmount":
        return cls(amount=amount, currency=currency)

    def multiply(self, factor: Number, context: Optional[Context] = None) -> "MonetaryAmount":
        ctx = context or calculation_context()
        return MonetaryAmount(ctx.multiply(self.amount, to_decimal(factor)), self.currency)

    def divide(self, divisor: Number, context: Optional[Context] = None) -> "MonetaryAmount":
        divisor = to_decimal(divisor)
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero")
        ctx = context or calculation_context()
        return MonetaryAmount(ctx.divide(self.amount, divisor), self.currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"


@dataclass(frozen=True)
class Rate:
    """A dimensionless interest rate applied once per period (0.01 == 1 %)."""

    value: Decimal

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("Rate required")
        object.__setattr__(self, "value", to_decimal(self.value))

    @classmethod
    def of(cls, value: Number) -> "Rate":
        return cls(value=value)

    def get(self) -> Decimal:
        return self.value

    def __str__(self) -> str:
        return f"Rate[{self.value}]"
