"""Tests for logging configuration."""

import json
import logging
import sys

import pytest
import structlog

from pathway_graph.config import ObservabilityConfig
from pathway_graph.logging_config import configure_logging


@pytest.fixture
def basic_config_calls(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    return calls


def _record(msg, exc_info=None, **extra):
    record = logging.LogRecord(
        "pathway_graph.test", logging.WARNING, __file__, 1, msg, None, exc_info
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_output_inlines_extra_fields(basic_config_calls):
    configure_logging(ObservabilityConfig(structured=True))
    formatter = basic_config_calls["handlers"][0].formatter

    payload = json.loads(formatter.format(_record("Protein added", protein="EGFR", edges=2)))

    assert payload["event"] == "Protein added"
    assert payload["level"] == "warning"
    assert payload["logger"] == "pathway_graph.test"
    assert payload["protein"] == "EGFR"
    assert payload["edges"] == 2
    assert "timestamp" in payload
    assert not any(key.startswith("_") for key in payload)


def test_structured_output_renders_exceptions(basic_config_calls):
    configure_logging(ObservabilityConfig(structured=True))
    formatter = basic_config_calls["handlers"][0].formatter

    try:
        raise ValueError("bad weight")
    except ValueError:
        record = _record("Load failed", exc_info=sys.exc_info())

    payload = json.loads(formatter.format(record))

    assert "ValueError: bad weight" in payload["exception"]


def test_configure_logging_structured(basic_config_calls):
    configure_logging(ObservabilityConfig(structured=True, level="WARNING"))

    assert basic_config_calls["level"] == "WARNING"
    assert basic_config_calls["force"] is True
    handler = basic_config_calls["handlers"][0]
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)


def test_configure_logging_level_override(basic_config_calls):
    configure_logging(ObservabilityConfig(), level="debug")

    assert basic_config_calls["level"] == "DEBUG"
    handler = basic_config_calls["handlers"][0]
    assert not isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
    assert handler.formatter.format(_record("plain")).endswith("plain")
