"""Exact rational arithmetic over arbitrary-precision integers."""

from .errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidDenominatorError,
    RationalError,
)
from .rational import (
    DEFAULT_AUTO_REDUCE,
    MINUS_ONE,
    ONE,
    ZERO,
    RationalValue,
    compare,
    equals,
    rationalize,
)
from .arrays import as_rational_array, reduce_array, zeros, zeros_like

__all__ = [
    "RationalValue",
    "rationalize",
    "compare",
    "equals",
    "DEFAULT_AUTO_REDUCE",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "RationalError",
    "DivisionByZeroError",
    "InvalidDenominatorError",
    "InvalidArgumentError",
    "as_rational_array",
    "zeros",
    "zeros_like",
    "reduce_array",
]
