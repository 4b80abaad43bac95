"""Exceptions raised by :mod:`bigratio`."""


class RationalError(Exception):
    """Base class for all errors raised by this package."""


class DivisionByZeroError(RationalError, ZeroDivisionError):
    """Raised when inverting or dividing by a zero value."""


class InvalidDenominatorError(DivisionByZeroError):
    """Raised when a value is constructed with a zero denominator."""


class InvalidArgumentError(RationalError, TypeError):
    """Raised when an operand cannot be interpreted as a rational value."""


__all__ = [
    "RationalError",
    "DivisionByZeroError",
    "InvalidDenominatorError",
    "InvalidArgumentError",
]
