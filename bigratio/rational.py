"""Exact rational numbers over arbitrary-precision integers."""
from __future__ import annotations

import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

try:  # NumPy is optional but recommended for array workflows.
    import numpy as np  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - optional dependency may be absent.
    np = None  # type: ignore

from .errors import DivisionByZeroError, InvalidArgumentError, InvalidDenominatorError

logger = logging.getLogger(__name__)

NumberLike = Union["RationalValue", Fraction, numbers.Integral]

DEFAULT_AUTO_REDUCE = True


def _resolve_auto_reduce(auto_reduce: Optional[bool]) -> bool:
    if auto_reduce is None:
        return DEFAULT_AUTO_REDUCE
    return bool(auto_reduce)


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    logger.debug("rejecting %s of type %r", name, type(value))
    raise InvalidArgumentError(f"{name} must be an integer, got {type(value)!r}")


def _is_accepted(value: Any) -> bool:
    return isinstance(value, (RationalValue, Fraction, numbers.Integral))


class RationalValue:
    """Exact ratio of two integers with a positive denominator.

    Values are immutable. When ``auto_reduce`` is true the pair is kept in
    lowest terms; otherwise it is stored as given (apart from the sign, which
    always lives on the numerator) until :meth:`reduce` is called. Equality,
    ordering and hashing do not depend on the reduction state.
    """

    __slots__ = ("_numerator", "_denominator", "_auto_reduce")
    __array_priority__ = 1000.0  # Prefer RationalValue semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
        *,
        auto_reduce: Optional[bool] = None,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            logger.debug("rejecting zero denominator for numerator %d", num)
            raise InvalidDenominatorError("denominator must be non-zero")
        if den < 0:
            num, den = -num, -den

        auto_reduce = _resolve_auto_reduce(auto_reduce)
        if auto_reduce:
            num, den = self._lowest_terms(num, den)

        self._numerator = num
        self._denominator = den
        self._auto_reduce = auto_reduce

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_integer(
        cls, value: numbers.Integral, *, auto_reduce: Optional[bool] = None
    ) -> "RationalValue":
        """Create ``value/1`` from any signed or unsigned integer type."""
        return cls(_ensure_int(value, name="value"), 1, auto_reduce=auto_reduce)

    @classmethod
    def from_fraction(
        cls, value: Fraction, *, auto_reduce: Optional[bool] = None
    ) -> "RationalValue":
        """Create a :class:`RationalValue` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator, auto_reduce=auto_reduce)

    @classmethod
    def rationalize(
        cls, value: NumberLike, *, auto_reduce: Optional[bool] = None
    ) -> "RationalValue":
        """Coerce an integer-like or rational value into :class:`RationalValue`.

        An existing :class:`RationalValue` is returned unchanged unless a
        different ``auto_reduce`` flag is requested.
        """
        if isinstance(value, RationalValue):
            if auto_reduce is None or bool(auto_reduce) == value._auto_reduce:
                return value
            return value.with_auto_reduce(auto_reduce)
        if isinstance(value, Fraction):
            return cls.from_fraction(value, auto_reduce=auto_reduce)
        if isinstance(value, numbers.Integral):
            return cls.from_integer(value, auto_reduce=auto_reduce)
        logger.debug("cannot rationalize value of type %r", type(value))
        raise InvalidArgumentError(f"Cannot convert {type(value)!r} to RationalValue")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def auto_reduce(self) -> bool:
        return self._auto_reduce

    @property
    def sign(self) -> int:
        """-1, 0 or 1; the denominator is always positive."""
        return (self._numerator > 0) - (self._numerator < 0)

    @property
    def is_zero(self) -> bool:
        return self._numerator == 0

    @property
    def is_one(self) -> bool:
        num, den = self._lowest_terms(self._numerator, self._denominator)
        return num == 1 and den == 1

    @property
    def is_whole_number(self) -> bool:
        """True when the value is an integer once reduced to lowest terms."""
        return self._lowest_terms(self._numerator, self._denominator)[1] == 1

    def reduce(self) -> "RationalValue":
        """Return this value in lowest terms, keeping the ``auto_reduce`` flag."""
        num, den = self._lowest_terms(self._numerator, self._denominator)
        return RationalValue(num, den, auto_reduce=self._auto_reduce)

    def with_auto_reduce(self, auto_reduce: Optional[bool]) -> "RationalValue":
        """Return a copy carrying *auto_reduce*, reduced if the flag is set."""
        return RationalValue(self._numerator, self._denominator, auto_reduce=auto_reduce)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        if self._auto_reduce:
            return f"RationalValue({self._numerator}, {self._denominator})"
        return f"RationalValue({self._numerator}, {self._denominator}, auto_reduce=False)"

    def __str__(self) -> str:
        # Shown exactly as stored; unreduced values are not reduced here.
        if self._numerator == 0:
            return "0"
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _lowest_terms(num: int, den: int) -> Tuple[int, int]:
        # den > 0, so gcd >= 1 and zero becomes 0/1.
        gcd = math.gcd(num, den)
        return num // gcd, den // gcd

    def _coerce_scalar(self, value: Any) -> "RationalValue":
        if isinstance(value, RationalValue):
            return value
        if isinstance(value, Fraction):
            return RationalValue.from_fraction(value, auto_reduce=self._auto_reduce)
        if isinstance(value, numbers.Integral):
            return RationalValue(int(value), 1, auto_reduce=self._auto_reduce)
        logger.debug("unsupported operand of type %r", type(value))
        raise InvalidArgumentError(f"Cannot interpret {type(value)!r} as RationalValue")

    def _binary_operation(self, other: Any, op: Callable[["RationalValue", Any], Any]):
        if np is not None and isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self, x), otypes=[object])
            return vectorised(other)
        return op(self, other)

    def _reflected_operation(self, other: Any, op: Callable[["RationalValue", Any], Any]):
        if np is not None and isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        return op(self._coerce_scalar(other), self)

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: NumberLike) -> "RationalValue":
        b = self._coerce_scalar(other)
        return RationalValue(
            self._numerator * b._denominator + b._numerator * self._denominator,
            self._denominator * b._denominator,
            auto_reduce=self._auto_reduce,
        )

    def subtract(self, other: NumberLike) -> "RationalValue":
        b = self._coerce_scalar(other)
        return RationalValue(
            self._numerator * b._denominator - b._numerator * self._denominator,
            self._denominator * b._denominator,
            auto_reduce=self._auto_reduce,
        )

    def multiply(self, other: NumberLike) -> "RationalValue":
        b = self._coerce_scalar(other)
        return RationalValue(
            self._numerator * b._numerator,
            self._denominator * b._denominator,
            auto_reduce=self._auto_reduce,
        )

    def divide(self, other: NumberLike) -> "RationalValue":
        return self.multiply(self._coerce_scalar(other).inverse())

    def inverse(self) -> "RationalValue":
        """Return ``denominator/numerator``."""
        if self._numerator == 0:
            logger.debug("refusing to invert zero value %r", self)
            raise DivisionByZeroError("cannot invert a zero value")
        return RationalValue(self._denominator, self._numerator, auto_reduce=self._auto_reduce)

    def absolute(self) -> "RationalValue":
        return RationalValue(abs(self._numerator), self._denominator, auto_reduce=self._auto_reduce)

    def negate(self) -> "RationalValue":
        """Return ``-|numerator|/denominator``.

        The result is never positive: ``RationalValue(-3, 4).negate()`` is
        ``-3/4``, not ``3/4``.
        """
        return RationalValue(-abs(self._numerator), self._denominator, auto_reduce=self._auto_reduce)

    def positive(self) -> "RationalValue":
        """Unary plus, which is the absolute value."""
        return self.absolute()

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, RationalValue.add)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, RationalValue.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, RationalValue.subtract)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, RationalValue.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, RationalValue.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, RationalValue.divide)

    def __neg__(self) -> "RationalValue":
        return self.negate()

    def __pos__(self) -> "RationalValue":
        return self.positive()

    def __abs__(self) -> "RationalValue":
        return self.absolute()

    # ------------------------------------------------------------------
    # Comparisons
    def compare(self, other: NumberLike) -> int:
        """Return the sign of ``self - other``."""
        return self.subtract(other).sign

    def equals(self, other: Any) -> bool:
        """Value equality, independent of reduction state."""
        if not _is_accepted(other):
            return False
        other_rat = self._coerce_scalar(other)
        if self._numerator == 0 and other_rat._numerator == 0:
            return True
        return self._lowest_terms(self._numerator, self._denominator) == self._lowest_terms(
            other_rat._numerator, other_rat._denominator
        )

    def __eq__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return self._binary_operation(other, RationalValue.equals)
        if not _is_accepted(other):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> Any:
        if np is not None and isinstance(other, np.ndarray):
            return self._binary_operation(other, lambda a, b: not a.equals(b))
        if not _is_accepted(other):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.compare(b) < 0)

    def __le__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.compare(b) <= 0)

    def __gt__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.compare(b) > 0)

    def __ge__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.compare(b) >= 0)

    def __hash__(self) -> int:
        # Same hash as int / Fraction for equal values.
        num, den = self._lowest_terms(self._numerator, self._denominator)
        if den == 1:
            return hash(num)
        return hash(Fraction(num, den))

    # ------------------------------------------------------------------
    # NumPy interoperability
    if np is not None:
        _UFUNC_DISPATCH = {
            np.add: operator.add,
            np.subtract: operator.sub,
            np.multiply: operator.mul,
            np.divide: operator.truediv,
            np.true_divide: operator.truediv,
            np.negative: operator.neg,
            np.positive: operator.pos,
            np.absolute: abs,
            np.equal: operator.eq,
            np.not_equal: operator.ne,
            np.less: operator.lt,
            np.less_equal: operator.le,
            np.greater: operator.gt,
            np.greater_equal: operator.ge,
        }
    else:  # pragma: no cover - executed when NumPy unavailable
        _UFUNC_DISPATCH = {}

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if np is None:  # pragma: no cover
            return NotImplemented
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for RationalValue ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, RationalValue):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(lambda x: self._coerce_scalar(x), otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: NumberLike, *, auto_reduce: Optional[bool] = None) -> RationalValue:
    """Public helper to convert *value* into :class:`RationalValue`."""

    return RationalValue.rationalize(value, auto_reduce=auto_reduce)


def compare(left: NumberLike, right: NumberLike) -> int:
    """Return -1, 0 or 1 as *left* is less than, equal to or greater than *right*.

    Either side may be a :class:`RationalValue`, an integer or a
    :class:`fractions.Fraction`; anything else raises
    :class:`~bigratio.errors.InvalidArgumentError`.
    """

    return RationalValue.rationalize(left).compare(right)


def equals(left: Any, right: Any) -> bool:
    """Value equality between two rational-like operands."""

    if not _is_accepted(left):
        return False
    return RationalValue.rationalize(left).equals(right)


ZERO = RationalValue(0, 1)
ONE = RationalValue(1, 1)
MINUS_ONE = RationalValue(-1, 1)


__all__ = [
    "RationalValue",
    "rationalize",
    "compare",
    "equals",
    "DEFAULT_AUTO_REDUCE",
    "ZERO",
    "ONE",
    "MINUS_ONE",
]
