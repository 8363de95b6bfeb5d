"""Parsers turning text payloads into numeric arrays."""

import csv
import io
import json
import re
from collections.abc import Iterable

import numpy as np

from moment_stats.errors import ParseError

FORMATS = ("text", "csv", "json")
DTYPES = ("float16", "float32", "float64", "longdouble")

_SEPARATORS = re.compile(r"[\s,;]+")


def _to_float(token: str, *, where: str) -> float:
    """Parse one numeric token, naming its location on failure."""
    try:
        return float(token)
    except ValueError:
        raise ParseError(f"Invalid number {token!r} {where}.") from None


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def parse_text(text: str) -> np.ndarray:
    """Parse numbers separated by whitespace, commas or semicolons.

    Anything after ``#`` on a line is ignored.
    """
    values: list[float] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        content = line.split("#", 1)[0].strip()
        if not content:
            continue
        values.extend(
            _to_float(token, where=f"on line {lineno}")
            for token in _SEPARATORS.split(content)
            if token
        )
    return np.asarray(values, dtype=float)


def _read_rows(text: str) -> Iterable[list[str]]:
    """Yield stripped CSV rows, skipping blank lines."""
    reader = csv.reader(io.StringIO(text))
    for row in reader:
        cells = [cell.strip() for cell in row]
        if not any(cells):
            continue
        yield cells


def _select_column(header: list[str] | None, column: str, width: int) -> int:
    """Resolve a column name or zero-based index to a position."""
    if header is not None and column in header:
        return header.index(column)
    if column.isdigit() and int(column) < width:
        return int(column)
    raise ParseError(f"Unknown column {column!r}.")


def parse_csv(text: str, *, column: str | None = None) -> np.ndarray:
    """Parse comma-separated numbers, optionally restricted to one column.

    A first row containing any non-numeric cell is treated as a header. Without
    ``column`` the result keeps the table's ``(rows, columns)`` shape.
    """
    rows = list(_read_rows(text))
    if not rows:
        return np.asarray([], dtype=float)

    header: list[str] | None = None
    if not all(_is_number(cell) for cell in rows[0]):
        header, rows = rows[0], rows[1:]

    width = len(header) if header is not None else len(rows[0]) if rows else 0
    offset = 2 if header is not None else 1

    if column is not None:
        index = _select_column(header, column, width)
        values = []
        for lineno, row in enumerate(rows, start=offset):
            if index >= len(row):
                raise ParseError(f"Row {lineno} has no column {column!r}.")
            values.append(_to_float(row[index], where=f"in row {lineno}"))
        return np.asarray(values, dtype=float)

    table: list[list[float]] = []
    for lineno, row in enumerate(rows, start=offset):
        if len(row) != width:
            raise ParseError(f"Row {lineno} has {len(row)} cells, expected {width}.")
        table.append([_to_float(cell, where=f"in row {lineno}") for cell in row])
    if not table:
        return np.asarray([], dtype=float)
    return np.asarray(table, dtype=float)


def _check_numbers(payload: object, path: str) -> None:
    """Reject anything but numbers and lists of numbers, naming the offending location."""
    if isinstance(payload, list):
        for index, item in enumerate(payload):
            _check_numbers(item, f"{path}[{index}]")
    elif isinstance(payload, bool) or not isinstance(payload, (int, float)):
        raise ParseError(f"Invalid number {payload!r} at {path}.")


def parse_json(text: str) -> np.ndarray:
    """Parse a JSON number, a (nested) list of numbers, or ``{"values": [...]}``."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc.msg} (line {exc.lineno}).") from exc
    if isinstance(payload, dict):
        if "values" not in payload:
            raise ParseError("JSON objects must carry a 'values' key.")
        payload = payload["values"]
    _check_numbers(payload, "$")
    try:
        return np.asarray(payload, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"JSON payload is not a rectangular array of numbers: {exc}") from exc


def parse_values(
    text: str,
    fmt: str = "text",
    *,
    column: str | None = None,
    dtype: str | None = None,
) -> np.ndarray:
    """Parse ``text`` in the given format and cast to ``dtype`` when requested."""
    fmt = fmt.lower()
    if column is not None and fmt != "csv":
        raise ParseError("A column can only be selected for CSV input.")
    if fmt == "text":
        values = parse_text(text)
    elif fmt == "csv":
        values = parse_csv(text, column=column)
    elif fmt == "json":
        values = parse_json(text)
    else:
        raise ParseError(f"Unsupported format {fmt!r}. Choose one of: {', '.join(FORMATS)}.")
    if dtype is not None:
        if dtype not in DTYPES:
            raise ParseError(f"Unsupported dtype {dtype!r}. Choose one of: {', '.join(DTYPES)}.")
        values = values.astype(np.dtype(dtype))
    return values


__all__ = ["DTYPES", "FORMATS", "parse_csv", "parse_json", "parse_text", "parse_values"]
