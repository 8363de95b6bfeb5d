"""Common helper functions for statistical routines."""

from collections.abc import Iterable
from typing import TypeAlias, cast

import numpy as np
import numpy.typing as npt

from moment_stats.errors import EmptyInput, OrderOverflow, SampleSizeOverflow

FloatArray: TypeAlias = npt.NDArray[np.floating]
NumericInput: TypeAlias = npt.ArrayLike | Iterable[float]

MAX_ORDER = 2**31 - 1


def to_numpy(values: NumericInput) -> FloatArray:
    """Coerce the input into a flat NumPy float array, keeping floating dtypes."""
    if not isinstance(values, np.ndarray) and not isinstance(values, (list, tuple)):
        if isinstance(values, Iterable) and not isinstance(values, (str, bytes)):
            values = list(values)
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return cast(FloatArray, arr.ravel())


def require_values(values: NumericInput) -> FloatArray:
    """Return the sample as an array, raising :class:`EmptyInput` when it has no elements."""
    arr = to_numpy(values)
    if arr.size == 0:
        raise EmptyInput()
    return arr


def count_as_scalar(count: int, dtype: np.dtype) -> np.floating:
    """Convert an element count to the scalar type of ``dtype``."""
    try:
        with np.errstate(over="ignore"):
            converted = dtype.type(count)
    except OverflowError:
        converted = dtype.type(np.inf)
    if not np.isfinite(converted):
        raise SampleSizeOverflow(f"Cannot represent a sample size of {count} as {dtype}.")
    return converted


def working_dtype(dtype: np.dtype) -> np.dtype:
    """Accumulation dtype for ``dtype``: at least float32, like NumPy's half-precision sums."""
    return np.promote_types(dtype, np.float32)


def validate_order(order: int) -> int:
    """Check that ``order`` is a usable moment order and return it as an int."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise TypeError(f"Moment order must be an integer, got {type(order).__name__}.")
    order = int(order)
    if order < 0:
        raise ValueError("Moment order must be non-negative.")
    if order > MAX_ORDER:
        raise OrderOverflow(f"Moment order {order} exceeds the supported maximum {MAX_ORDER}.")
    return order
