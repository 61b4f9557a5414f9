"""Core calculation engine for the annuity calculator.

This module computes the level ("annuity") payment that fully amortizes a
principal over a fixed number of periods at a fixed periodic rate:

    payment = A * r / (1 - (1 + r)^(-n))

where ``A`` is the amount, ``r`` the periodic rate and ``n`` the number of
periods. When the rate is zero, the payment simplifies to ``A / n``.

The calculation is exposed both as a plain function,
:func:`calculate_annuity_payment`, and as :class:`AnnuityPayment`, an
immutable operator bound to a rate and period count that can be applied to
any number of amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, DecimalException
from typing import Optional, Union

from .config import calculation_context
from .data_models import MonetaryAmount, Rate
from .errors import DivisionByZeroError, InvalidArgumentError
from .logging_config import get_logger
from .utils import Number

logger = get_logger(__name__)

RateLike = Union[Rate, Number]


def _rate_value(rate: RateLike) -> Decimal:
    if rate is None:
        raise InvalidArgumentError("Rate required")
    if isinstance(rate, Rate):
        return rate.get()
    return Rate.of(rate).get()


def _check_periods(periods: int) -> int:
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise InvalidArgumentError(f"Periods must be an integer; got {periods!r}")
    if periods < 0:
        raise InvalidArgumentError("Periods < 0")
    return periods


def calculate_annuity_payment(
    amount: MonetaryAmount,
    rate: RateLike,
    periods: int,
    context: Optional[Context] = None,
) -> MonetaryAmount:
    """Return the level payment per period that amortizes ``amount``.

    Parameters
    ----------
    amount: MonetaryAmount
        The principal. Any sign and magnitude is accepted.
    rate: Rate or number
        The periodic interest rate, e.g. ``Decimal("0.01")`` for 1 % per period.
    periods: int
        The number of payments, ``>= 0``.
    context: decimal.Context, optional
        Context for every intermediate operation. Defaults to
        :func:`annuity_calc.config.calculation_context`.

    Returns
    -------
    MonetaryAmount
        The payment, in the currency of ``amount``. It is not rounded to the
        currency's minor unit.

    Raises
    ------
    InvalidArgumentError
        If ``amount`` or ``rate`` is missing, or ``periods`` is negative.
    DivisionByZeroError
        If the inputs make the formula divide by zero: ``periods == 0``, or a
        rate of exactly ``-1``.
    """
    if amount is None:
        raise InvalidArgumentError("Amount required")
    if not isinstance(amount, MonetaryAmount):
        raise InvalidArgumentError(f"Amount must be a MonetaryAmount; got {type(amount).__name__}")
    r = _rate_value(rate)
    n = _check_periods(periods)
    ctx = context or calculation_context()

    if r == 0:
        if n == 0:
            raise DivisionByZeroError("Cannot spread an amount over zero periods")
        payment = amount.divide(n, ctx)
    else:
        base = ctx.add(Decimal(1), r)
        if base == 0:
            raise DivisionByZeroError(f"Rate {r} makes (1 + rate) zero")
        try:
            discount = ctx.power(base, -n)
            denominator = ctx.subtract(Decimal(1), discount)
            if denominator == 0:
                raise DivisionByZeroError(f"Zero denominator for rate {r} over {n} periods")
            payment = amount.multiply(r, ctx).divide(denominator, ctx)
        except DecimalException as exc:
            raise InvalidArgumentError(f"Cannot compute payment for rate {r} over {n} periods: {exc!r}") from exc

    logger.debug(
        "annuity_payment_calculated",
        amount=str(amount),
        rate=str(r),
        periods=n,
        payment=str(payment),
    )
    return payment


@dataclass(frozen=True)
class AnnuityPayment:
    """An annuity payment operator bound to a fixed rate and period count.

    Build instances with :meth:`of`; construction validates that the rate is
    present and that ``periods >= 0``. The operator is callable, so
    ``AnnuityPayment.of(rate, 12)(amount)`` is the same as ``.apply(amount)``.
    """

    rate: Rate
    periods: int

    def __post_init__(self) -> None:
        if self.rate is None:
            raise InvalidArgumentError("Rate required")
        if not isinstance(self.rate, Rate):
            raise InvalidArgumentError(f"Rate must be a Rate; got {type(self.rate).__name__}")
        _check_periods(self.periods)

    @classmethod
    def of(cls, rate: RateLike, periods: int) -> "AnnuityPayment":
        if rate is None:
            raise InvalidArgumentError("Rate required")
        return cls(rate=rate if isinstance(rate, Rate) else Rate.of(rate), periods=periods)

    def apply(self, amount: MonetaryAmount, context: Optional[Context] = None) -> MonetaryAmount:
        return calculate_annuity_payment(amount, self.rate, self.periods, context)

    __call__ = apply

    def __str__(self) -> str:
        return f"AnnuityPayment{{rate={self.rate}, periods={self.periods}}}"
