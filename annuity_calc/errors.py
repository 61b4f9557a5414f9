"""Exceptions raised by the annuity calculator.

All errors are raised synchronously at the call boundary. They subclass the
built-in exception a caller would naturally catch (``ValueError`` for bad
input, ``ZeroDivisionError`` for a zero divisor), so code that does not know
about this module still handles them sensibly.
"""


class AnnuityCalcError(Exception):
    """Base class for all calculator errors."""


class InvalidArgumentError(AnnuityCalcError, ValueError):
    """A required input is missing or has an unusable value."""


class DivisionByZeroError(InvalidArgumentError, ZeroDivisionError):
    """The inputs lead to a division by zero (e.g. zero rate and zero periods)."""


class ConfigurationError(AnnuityCalcError, ValueError):
    """An environment setting cannot be interpreted."""
