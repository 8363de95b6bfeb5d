"""Summary statistics over dense numeric samples."""

from .means import geometric_mean, harmonic_mean, mean  # noqa: F401
from .moments import central_moment, central_moments  # noqa: F401
from .stats import (  # noqa: F401
    StatSummary,
    compute_statistics,
    kurtosis,
    skewness,
    std,
    variance,
)

__all__ = [
    "StatSummary",
    "compute_statistics",
    "mean",
    "harmonic_mean",
    "geometric_mean",
    "central_moment",
    "central_moments",
    "variance",
    "std",
    "skewness",
    "kurtosis",
]
