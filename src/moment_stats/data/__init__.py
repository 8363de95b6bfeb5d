"""Input handling and report schemas for numeric samples."""

from .loader import infer_format, load_sample, read_sample
from .models import MomentsSchema, Sample, SampleSchema, SummarySchema
from .parser import DTYPES, FORMATS, parse_values

__all__ = [
    "DTYPES",
    "FORMATS",
    "MomentsSchema",
    "Sample",
    "SampleSchema",
    "SummarySchema",
    "infer_format",
    "load_sample",
    "parse_values",
    "read_sample",
]
