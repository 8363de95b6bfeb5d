"""Shape statistics derived from the central moment engine."""

from dataclasses import dataclass

import numpy as np

from .means import _mean_of, geometric_mean, harmonic_mean
from .moments import _corrected_moments
from .utils import FloatArray, NumericInput, require_values


def _skewness_from(moments: FloatArray) -> np.floating:
    """Combine the second and third central moments into Pearson's skewness."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return moments[2] / (moments[1] * np.sqrt(moments[1]))


def _kurtosis_from(moments: FloatArray, fisher: bool) -> np.floating:
    """Combine the second and fourth central moments into kurtosis."""
    with np.errstate(divide="ignore", invalid="ignore"):
        kurt = moments[3] / (moments[1] * moments[1])
    if fisher:
        kurt -= moments.dtype.type(3)
    return kurt


def variance(values: NumericInput) -> np.floating:
    """Return the population variance (the second central moment)."""
    arr = require_values(values)
    return _corrected_moments(arr, 2)[1]


def std(values: NumericInput) -> np.floating:
    """Return the population standard deviation."""
    return np.sqrt(variance(values))


def skewness(values: NumericInput) -> np.floating:
    """Return Pearson's moment coefficient of skewness ``mu3 / sigma**3``.

    A constant sample has zero variance, so the result is NaN.
    """
    arr = require_values(values)
    return _skewness_from(_corrected_moments(arr, 3))


def kurtosis(values: NumericInput, *, fisher: bool = False) -> np.floating:
    """Return Pearson's kurtosis ``mu4 / sigma**4``.

    Pass ``fisher=True`` for excess kurtosis (Pearson's minus 3).
    """
    arr = require_values(values)
    return _kurtosis_from(_corrected_moments(arr, 4), fisher)


@dataclass(frozen=True)
class StatSummary:
    """Bundle of descriptive statistics for one sample."""

    count: int
    mean: float
    harmonic_mean: float
    geometric_mean: float
    variance: float
    std: float
    skewness: float
    kurtosis: float


def compute_statistics(values: NumericInput) -> StatSummary:
    """Compute a consistent set of statistics, sharing one moment traversal."""
    arr = require_values(values)
    moments = _corrected_moments(arr, 4)
    return StatSummary(
        count=int(arr.size),
        mean=float(_mean_of(arr)),
        harmonic_mean=float(harmonic_mean(arr)),
        geometric_mean=float(geometric_mean(arr)),
        variance=float(moments[1]),
        std=float(np.sqrt(moments[1])),
        skewness=float(_skewness_from(moments)),
        kurtosis=float(_kurtosis_from(moments, fisher=False)),
    )
