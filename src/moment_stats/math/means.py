"""Arithmetic, harmonic and geometric means."""

import numpy as np

from .utils import FloatArray, NumericInput, count_as_scalar, require_values, working_dtype


def _working_mean(arr: FloatArray) -> np.floating:
    """Single accumulating reduction over a non-empty array, in the working dtype.

    The count must still fit the sample's own dtype.
    """
    count_as_scalar(arr.size, arr.dtype)
    work = working_dtype(arr.dtype)
    total = np.add.reduce(arr, dtype=work)
    return total / count_as_scalar(arr.size, work)


def _mean_of(arr: FloatArray) -> np.floating:
    """Mean of a non-empty array as a scalar of its own dtype."""
    return arr.dtype.type(_working_mean(arr))


def mean(values: NumericInput) -> np.floating:
    """Return the arithmetic mean of all elements.

    Raises :class:`~moment_stats.errors.EmptyInput` for an empty sample.
    """
    return _mean_of(require_values(values))


def harmonic_mean(values: NumericInput) -> np.floating:
    """Return ``n / sum(1 / x)``, the reciprocal of the mean reciprocal.

    Zero elements are not rejected: the division follows IEEE semantics.
    """
    arr = require_values(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        reciprocals = np.reciprocal(arr)
        return np.reciprocal(_mean_of(reciprocals))


def geometric_mean(values: NumericInput) -> np.floating:
    """Return ``exp(mean(log(x)))``."""
    arr = require_values(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        logs = np.log(arr)
        return np.exp(_mean_of(logs))
