"""Unit tests for the data models and schemas."""

import math

import numpy as np

from moment_stats.data.models import MomentsSchema, Sample, SampleSchema, SummarySchema
from moment_stats.math import StatSummary, compute_statistics


def test_sample_promotes_integers():
    sample = Sample(name="ints", values=[[1, 2], [3, 4]])
    assert sample.dtype == "float64"
    assert sample.shape == (2, 2)
    assert sample.size == 4


def test_sample_keeps_float32():
    sample = Sample(name="f32", values=np.ones(3, dtype=np.float32))
    assert sample.dtype == "float32"


def test_sample_schema_omits_values():
    dumped = SampleSchema().dump(Sample(name="x", values=[1.0, 2.0]))
    assert dumped == {"name": "x", "size": 2, "shape": [2], "dtype": "float64"}


def test_summary_schema_maps_nan_to_null():
    summary = compute_statistics([2.0, 2.0, 2.0])
    dumped = SummarySchema().dump(summary)
    assert dumped["count"] == 3
    assert dumped["mean"] == 2.0
    assert dumped["skewness"] is None
    assert dumped["kurtosis"] is None


def test_summary_schema_load():
    payload = {
        "count": 4,
        "mean": 2.5,
        "harmonic_mean": 1.92,
        "geometric_mean": 2.21,
        "variance": 1.25,
        "std": 1.118,
        "skewness": None,
        "kurtosis": 1.64,
    }
    summary = SummarySchema().load(payload)
    assert isinstance(summary, StatSummary)
    assert summary.count == 4
    assert math.isnan(summary.skewness)


def test_moments_schema():
    dumped = MomentsSchema().dump({"order": 3, "moments": [0.0, 1.25, float("inf")]})
    assert dumped == {"order": 3, "moments": [0.0, 1.25, None]}
