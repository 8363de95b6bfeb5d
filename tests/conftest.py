"""Global test configuration and fixtures."""

import numpy as np
import pytest


@pytest.fixture
def sample_data():
    """Return a small asymmetric sample."""
    return np.array([1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def skewed_data():
    """Return a right-skewed sample with known moments."""
    return np.array([0.5, 1.0, 1.5, 2.0, 3.5, 7.0, 12.0])


@pytest.fixture
def constant_data():
    """Return a sample whose elements are all equal."""
    return np.array([2.0, 2.0, 2.0, 2.0])


@pytest.fixture
def empty_data():
    return np.array([], dtype=float)


@pytest.fixture
def write_input(tmp_path):
    """Write ``text`` to a file under ``tmp_path`` and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
