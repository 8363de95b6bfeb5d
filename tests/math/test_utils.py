"""Unit tests for the math utilities."""

import numpy as np
import pytest

from moment_stats.errors import EmptyInput, OrderOverflow, SampleSizeOverflow
from moment_stats.math.utils import (
    MAX_ORDER,
    count_as_scalar,
    require_values,
    to_numpy,
    validate_order,
)


def test_to_numpy_flattens_and_promotes():
    """Integers are promoted to float64 and n-d inputs are flattened."""
    arr = to_numpy([[1, 2], [3, 4]])
    assert arr.dtype == np.float64
    assert arr.shape == (4,)
    assert np.array_equal(arr, [1.0, 2.0, 3.0, 4.0])


def test_to_numpy_keeps_floating_dtype():
    arr = to_numpy(np.array([1.0, 2.0], dtype=np.float32))
    assert arr.dtype == np.float32


def test_to_numpy_consumes_generators():
    arr = to_numpy(x / 2 for x in range(4))
    assert np.array_equal(arr, [0.0, 0.5, 1.0, 1.5])


def test_require_values_rejects_empty():
    with pytest.raises(EmptyInput):
        require_values([])
    with pytest.raises(EmptyInput):
        require_values(np.empty((3, 0)))


def test_count_as_scalar():
    value = count_as_scalar(7, np.dtype(np.float32))
    assert value == 7
    assert value.dtype == np.float32


def test_count_as_scalar_overflow_is_fatal():
    """A count beyond float16's range cannot be converted."""
    with pytest.raises(SampleSizeOverflow):
        count_as_scalar(100_000, np.dtype(np.float16))


def test_sample_size_overflow_is_not_a_statistics_error():
    assert not issubclass(SampleSizeOverflow, ValueError)
    assert issubclass(SampleSizeOverflow, OverflowError)


@pytest.mark.parametrize("order", [0, 1, 4, np.int16(3), MAX_ORDER])
def test_validate_order_accepts(order):
    assert validate_order(order) == int(order)


def test_validate_order_rejects():
    with pytest.raises(OrderOverflow):
        validate_order(MAX_ORDER + 1)
    with pytest.raises(ValueError, match="non-negative"):
        validate_order(-1)
    with pytest.raises(TypeError):
        validate_order(2.0)
    with pytest.raises(TypeError):
        validate_order(True)
