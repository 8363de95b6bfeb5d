"""Sample container and JSON schemas for statistics reports."""

import math
from typing import Any

import marshmallow as ma
import numpy as np
from attrs import define, field

from moment_stats.math import StatSummary


def _as_array(values: Any) -> np.ndarray:
    """Store values as a NumPy array with a floating dtype."""
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


@define(slots=True, frozen=True)
class Sample:
    """Named numeric sample loaded from a file or stream."""

    name: str = field(converter=str)
    values: np.ndarray = field(converter=_as_array, eq=False, repr=False)

    @property
    def size(self) -> int:
        """Number of elements across all dimensions."""
        return int(self.values.size)

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.values.shape)

    @property
    def dtype(self) -> str:
        return str(self.values.dtype)


class FiniteFloat(ma.fields.Float):
    """Float field that serializes NaN and infinities as ``null``."""

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs: object) -> Any:
        if value is None:
            return None
        number = float(value)
        if not math.isfinite(number):
            return None
        return super()._serialize(number, attr, obj, **kwargs)


class SampleSchema(ma.Schema):
    """Marshmallow schema describing a :class:`Sample` without its values."""

    name = ma.fields.Str(required=True)
    size = ma.fields.Int(dump_only=True)
    shape = ma.fields.List(ma.fields.Int(), dump_only=True)
    dtype = ma.fields.Str(dump_only=True)


class SummarySchema(ma.Schema):
    """Marshmallow schema for :class:`~moment_stats.math.StatSummary`."""

    count = ma.fields.Int(required=True)
    mean = FiniteFloat(required=True, allow_none=True)
    harmonic_mean = FiniteFloat(required=True, allow_none=True)
    geometric_mean = FiniteFloat(required=True, allow_none=True)
    variance = FiniteFloat(required=True, allow_none=True)
    std = FiniteFloat(required=True, allow_none=True)
    skewness = FiniteFloat(required=True, allow_none=True)
    kurtosis = FiniteFloat(required=True, allow_none=True)

    @ma.post_load
    def make_summary(self, data: dict[str, Any], **kwargs: object) -> StatSummary:
        """Rebuild a summary, mapping ``null`` back to NaN."""
        restored = {
            key: (math.nan if value is None and key != "count" else value)
            for key, value in data.items()
        }
        return StatSummary(**restored)


class MomentsSchema(ma.Schema):
    """Marshmallow schema for a list of central moments of orders ``1..order``."""

    order = ma.fields.Int(required=True)
    moments = ma.fields.List(FiniteFloat(allow_none=True), required=True)


__all__ = ["FiniteFloat", "MomentsSchema", "Sample", "SampleSchema", "SummarySchema"]
