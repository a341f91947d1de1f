"""Unit tests for logging filters."""

import json
import logging
from pathlib import Path

import pytest

from rainharvest.common.log_utils import EndpointFilter, ExtraFieldsFilter
from rainharvest.common.tracing import ctx_request, ctx_response, ctx_trace_id


LOGGING_CONFIG = Path(__file__).parents[2] / "logging.json"


def _record(message: str) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)


@pytest.fixture
def traced_request():
    tokens = [
        ctx_trace_id.set("trace-1"),
        ctx_request.set({"url": "http://testserver/assessment", "method": "POST"}),
        ctx_response.set({"status_code": 200}),
    ]
    yield
    for var, token in zip((ctx_trace_id, ctx_request, ctx_response), tokens, strict=True):
        var.reset(token)


def test_extra_fields_outside_request():
    record = _record("hello")

    assert ExtraFieldsFilter().filter(record)
    assert record.trace_id == "-"
    assert not hasattr(record, "http")


def test_extra_fields_inside_request(traced_request):
    record = _record("hello")

    ExtraFieldsFilter().filter(record)

    assert record.trace_id == "trace-1"
    assert record.trace == {"id": "trace-1"}
    assert record.url == {"full": "http://testserver/assessment"}
    assert record.http == {"request": {"method": "POST"}, "response": {"status_code": 200}}


def test_endpoint_filter():
    health_filter = EndpointFilter(path="/health")

    assert not health_filter.filter(_record('"GET /health HTTP/1.1" 200'))
    assert health_filter.filter(_record('"POST /assessment HTTP/1.1" 200'))


def _production_formatter() -> logging.Formatter:
    formatter_config = json.loads(LOGGING_CONFIG.read_text())["formatters"]["json"]
    return logging.Formatter(formatter_config["format"], formatter_config["datefmt"])


def test_production_format_renders_trace_id(traced_request):
    record = _record("Step 2: Resolving location")
    ExtraFieldsFilter().filter(record)

    line = json.loads(_production_formatter().format(record))

    assert line["trace.id"] == "trace-1"
    assert line["message"] == "Step 2: Resolving location"
    assert line["level"] == "INFO"


def test_production_format_without_filter_fails():
    record = _record("hello")

    with pytest.raises(ValueError):
        _production_formatter().format(record)


def test_production_format_outside_request():
    record = _record("hello")
    ExtraFieldsFilter().filter(record)

    assert json.loads(_production_formatter().format(record))["trace.id"] == "-"
