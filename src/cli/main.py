"""Command line entry point for the moment-stats application."""

from __future__ import annotations

import json
from pathlib import Path

import click
import structlog

from moment_stats.data import (
    DTYPES,
    FORMATS,
    MomentsSchema,
    Sample,
    SampleSchema,
    SummarySchema,
    load_sample,
    read_sample,
)
from moment_stats.errors import EmptyInput, ParseError
from moment_stats.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from moment_stats.math import central_moments, compute_statistics

FORMAT_HELP = "Input format. Inferred from the file suffix when omitted (text for stdin)."
COLUMN_HELP = "CSV column to read, by header name or zero-based index."
DTYPE_HELP = "Floating-point type used for the computation."
OUTPUT_HELP = "Optional path to write the JSON result instead of printing it."

logger = structlog.get_logger(__name__)


def _load(source: str, *, fmt: str | None, column: str | None, dtype: str | None) -> Sample:
    """Read a sample from a path, or from stdin when ``source`` is ``-``."""
    try:
        if source == "-":
            text = click.get_text_stream("stdin").read()
            return read_sample(text, name="<stdin>", fmt=fmt or "text", column=column, dtype=dtype)
        return load_sample(source, fmt=fmt, column=column, dtype=dtype)
    except ParseError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"Could not read {source}: {exc.strerror or exc}") from exc


def _emit(payload: dict[str, object], output: Path | None) -> None:
    """Print a JSON document or write it to ``output``."""
    document = json.dumps(payload, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document)
        click.echo(f"Wrote result to {output}")
        logger.debug("result.written", output=str(output))
    else:
        click.echo(document)


def input_options(func):
    """Attach the options shared by every command that reads a sample."""
    decorators = [
        click.argument("source", type=str),
        click.option(
            "--format",
            "fmt",
            type=click.Choice(FORMATS, case_sensitive=False),
            default=None,
            help=FORMAT_HELP,
        ),
        click.option("--column", default=None, help=COLUMN_HELP),
        click.option("--dtype", type=click.Choice(DTYPES), default=None, help=DTYPE_HELP),
        click.option(
            "--output",
            type=click.Path(dir_okay=False, path_type=Path),
            help=OUTPUT_HELP,
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(tuple(LOG_LEVELS), case_sensitive=False),
    envvar="MOMENT_STATS_LOG_LEVEL",
    default="warning",
    show_default=True,
    help="Verbosity for structured logs.",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    envvar="MOMENT_STATS_LOG_FORMAT",
    default="console",
    show_default=True,
    help="Render logs as console-friendly text or JSON.",
)
def cli(log_level: str, log_format: str) -> None:
    """Compute means, central moments and shape statistics of numeric samples."""
    configure_logging(level=log_level, json_output=log_format.lower() == "json")
    logger.debug("cli.initialized", log_level=log_level.lower(), log_format=log_format.lower())


@cli.command("describe")
@input_options
def describe(
    *,
    source: str,
    fmt: str | None,
    column: str | None,
    dtype: str | None,
    output: Path | None,
) -> None:
    """Print the mean, harmonic/geometric means, variance, skewness and kurtosis."""
    cmd_log = logger.bind(command="describe", source=source)
    cmd_log.info("command.start", format=fmt, column=column, dtype=dtype)
    sample = _load(source, fmt=fmt, column=column, dtype=dtype)
    try:
        summary = compute_statistics(sample.values)
    except EmptyInput as exc:
        raise click.ClickException(str(exc)) from exc
    payload = {
        "sample": SampleSchema().dump(sample),
        "statistics": SummarySchema().dump(summary),
    }
    _emit(payload, output)
    cmd_log.info("command.completed", count=summary.count)


@cli.command("moments")
@input_options
@click.option(
    "--order",
    type=click.IntRange(min=0, max=2**31 - 1),
    required=True,
    help="Highest central moment order to compute.",
)
def moments(
    *,
    source: str,
    fmt: str | None,
    column: str | None,
    dtype: str | None,
    output: Path | None,
    order: int,
) -> None:
    """Print the central moments of orders 1..ORDER from a single pass."""
    cmd_log = logger.bind(command="moments", source=source, order=order)
    cmd_log.info("command.start", format=fmt, column=column, dtype=dtype)
    sample = _load(source, fmt=fmt, column=column, dtype=dtype)
    try:
        values = central_moments(sample.values, order)
    except EmptyInput as exc:
        raise click.ClickException(str(exc)) from exc
    payload = {
        "sample": SampleSchema().dump(sample),
        **MomentsSchema().dump({"order": order, "moments": values.tolist()}),
    }
    _emit(payload, output)
    cmd_log.info("command.completed", count=sample.size)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
