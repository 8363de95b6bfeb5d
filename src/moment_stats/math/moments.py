"""Central moments of arbitrary order computed in a single corrected pass.

The sample is first centred on its mean, then traversed once. For every
element the corrected central-moment sums of all orders ``2..p`` are updated
together, following the single-observation case of the pairwise update in
Pébay et al., *Numerically stable, scalable formulas for parallel and online
computation of higher-order multivariate central moments* (2016), §3.5.

With ``m`` elements already processed, ``n = m + 1`` and ``delta`` the
distance between the new element and the running prefix mean::

    M_q += sum_{k=1..q} C(q, k) * M_{q-k} * (-delta / n) ** k + (m * delta / n) ** q

where ``M_0 = m`` and ``M_1 = 0``. Orders are updated from ``p`` down to ``2``
so each one reads the previous prefix's lower-order sums. The binomial term
``C(q, k) * (-delta / n) ** k`` is built incrementally in ``k``, so only
``O(p)`` scalars are kept and very high orders overflow to inf rather than
raising.

Half-precision samples are accumulated in float32 and cast back, matching
what :func:`numpy.add.reduce` does for them.
"""

import numpy as np

from .means import _working_mean
from .utils import (
    FloatArray,
    NumericInput,
    count_as_scalar,
    require_values,
    validate_order,
    working_dtype,
)


def _corrected_moments(arr: FloatArray, order: int) -> FloatArray:
    """Return central moments of orders ``1..order`` (``order >= 2``) of a non-empty array."""
    work = working_dtype(arr.dtype)
    zero = work.type(0)
    one = work.type(1)

    deviations = arr.astype(work) - _working_mean(arr)
    sums = [zero] * (order + 1)
    own_powers = [one] * (order + 1)
    running_mean = zero
    processed = 0

    with np.errstate(over="ignore", under="ignore", invalid="ignore", divide="ignore"):
        for value in deviations:
            previous = sums[0]
            processed += 1
            count = count_as_scalar(processed, work)
            delta = value - running_mean
            shift = -delta / count
            own = previous * delta / count

            for k in range(1, order + 1):
                own_powers[k] = own_powers[k - 1] * own

            for q in range(order, 1, -1):
                term = one
                correction = zero
                for k in range(1, q + 1):
                    term = term * shift * work.type(q - k + 1) / work.type(k)
                    lower = sums[q - k]
                    if lower:
                        correction += term * lower
                sums[q] += correction + own_powers[q]

            sums[0] = count
            running_mean += delta / count

        size = count_as_scalar(arr.size, work)
        moments = np.zeros(order, dtype=work)
        for q in range(2, order + 1):
            moments[q - 1] = sums[q] / size
        return moments.astype(arr.dtype)


def central_moments(values: NumericInput, order: int) -> FloatArray:
    """Return the central moments of orders ``1..order`` of all elements.

    Index ``k`` of the result holds the moment of order ``k + 1``; index 0 is
    always zero. Every order comes from the same traversal, which makes this
    cheaper than repeated :func:`central_moment` calls. ``order == 0`` yields
    an empty array.

    Raises :class:`~moment_stats.errors.EmptyInput` for an empty sample and
    :class:`~moment_stats.errors.OrderOverflow` for orders beyond ``2**31 - 1``.
    """
    arr = require_values(values)
    order = validate_order(order)
    if order < 2:
        return np.zeros(order, dtype=arr.dtype)
    return _corrected_moments(arr, order)


def central_moment(values: NumericInput, order: int) -> np.floating:
    """Return the ``order``-th central moment of all elements.

    Order 0 is 1 and order 1 is 0 by definition. Higher orders still need
    every lower-order sum, so the cost matches :func:`central_moments`.
    """
    arr = require_values(values)
    order = validate_order(order)
    if order == 0:
        return arr.dtype.type(1)
    if order == 1:
        return arr.dtype.type(0)
    return _corrected_moments(arr, order)[order - 1]
