"""NumPy object-array helpers for :class:`~bigratio.rational.RationalValue`."""
from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np

from .rational import RationalValue

ShapeLike = Union[int, Tuple[int, ...]]


def as_rational_array(
    values: Any,
    *,
    auto_reduce: Optional[bool] = None,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`RationalValue` entries.

    ``values`` can be any iterable of integers, fractions or rational values,
    or an existing NumPy array. When ``copy`` is ``False`` and ``values`` is
    already an object array holding only :class:`RationalValue` entries, the
    original array is returned. Non-integral entries such as floats raise
    :class:`~bigratio.errors.InvalidArgumentError`.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype != object:
            array = array.astype(object, copy=False)
        if auto_reduce is None and all(isinstance(item, RationalValue) for item in array.flat):
            return array
        vectorised = np.vectorize(
            lambda item: RationalValue.rationalize(item, auto_reduce=auto_reduce),
            otypes=[object],
        )
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        array = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            array[index] = RationalValue.rationalize(item, auto_reduce=auto_reduce)
        return array

    return as_rational_array(list(values), auto_reduce=auto_reduce, copy=copy)


def zeros(shape: ShapeLike, *, auto_reduce: Optional[bool] = None) -> np.ndarray:
    """Return an object array of the given shape filled with ``0/1``."""

    array = np.empty(shape, dtype=object)
    for index in np.ndindex(array.shape):
        array[index] = RationalValue(0, 1, auto_reduce=auto_reduce)
    return array


def zeros_like(values: Any, *, auto_reduce: Optional[bool] = None) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    return zeros(np.shape(values), auto_reduce=auto_reduce)


def reduce_array(values: Any) -> np.ndarray:
    """Return a new array with every entry reduced to lowest terms."""

    array = as_rational_array(values)
    vectorised = np.vectorize(lambda item: item.reduce(), otypes=[object])
    return vectorised(array)


__all__ = ["as_rational_array", "zeros", "zeros_like", "reduce_array"]
