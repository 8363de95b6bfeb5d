"""Load numeric samples from files or streams."""

from pathlib import Path

import structlog

from .models import Sample
from .parser import parse_values

logger = structlog.get_logger(__name__)

SUFFIX_FORMATS = {
    ".csv": "csv",
    ".json": "json",
    ".txt": "text",
    ".dat": "text",
}


def infer_format(path: str | Path) -> str:
    """Guess the input format from a file suffix, defaulting to plain text."""
    return SUFFIX_FORMATS.get(Path(path).suffix.lower(), "text")


def read_sample(
    text: str,
    *,
    name: str,
    fmt: str = "text",
    column: str | None = None,
    dtype: str | None = None,
) -> Sample:
    """Parse an in-memory payload into a :class:`Sample`."""
    values = parse_values(text, fmt, column=column, dtype=dtype)
    sample = Sample(name=name, values=values)
    logger.debug(
        "sample.loaded",
        name=sample.name,
        format=fmt,
        size=sample.size,
        shape=list(sample.shape),
        dtype=sample.dtype,
    )
    if sample.size == 0:
        logger.warning("sample.empty", name=sample.name)
    return sample


def load_sample(
    path: str | Path,
    *,
    fmt: str | None = None,
    column: str | None = None,
    dtype: str | None = None,
) -> Sample:
    """Read and parse the file at ``path``."""
    source = Path(path)
    resolved = fmt or infer_format(source)
    return read_sample(
        source.read_text(encoding="utf-8"),
        name=source.name,
        fmt=resolved,
        column=column,
        dtype=dtype,
    )
