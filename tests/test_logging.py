"""Unit tests for the logging configuration."""

import io
import logging
import sys

import pytest
import structlog

from moment_stats.logging import LOG_FORMATS, configure_logging, resolve_level


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_logs_default_to_stderr(mocker):
    """Statistics go to stdout, so log records must not."""
    basic_config = mocker.patch("logging.basicConfig")
    configure_logging()
    basic_config.assert_called_once_with(
        level=logging.WARNING, format="%(message)s", stream=sys.stderr
    )


def test_custom_stream_and_level(mocker):
    basic_config = mocker.patch("logging.basicConfig")
    sink = io.StringIO()
    configure_logging(level="DEBUG", stream=sink)
    basic_config.assert_called_once_with(level=logging.DEBUG, format="%(message)s", stream=sink)


@pytest.mark.parametrize(
    "json_output, renderer",
    [(True, structlog.processors.JSONRenderer), (False, structlog.dev.ConsoleRenderer)],
)
def test_renderer_matches_log_format(mocker, json_output, renderer):
    mocker.patch("logging.basicConfig")
    configure_logging(level="info", json_output=json_output)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)
    assert isinstance(processors[1], structlog.processors.TimeStamper)


def test_invalid_level_rejected_before_configuring(mocker):
    basic_config = mocker.patch("logging.basicConfig")
    with pytest.raises(ValueError, match="Unsupported log level 'verbose'"):
        configure_logging(level="verbose")
    basic_config.assert_not_called()


def test_resolve_level():
    assert resolve_level("Warning") == logging.WARNING
    assert resolve_level("critical") == logging.CRITICAL
    assert LOG_FORMATS == ("console", "json")
