"""Unit tests for logging configuration."""

import json
import logging

import pytest

from app.core.logging_config import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_request_id,
    get_request_id,
    set_request_id,
)


def make_record(message: str = "Routes calculated: 3") -> logging.LogRecord:
    return logging.LogRecord(
        "app.services.route_planner", logging.INFO, __file__, 42, message, None, None
    )


@pytest.fixture(autouse=True)
def reset_request_id():
    clear_request_id()
    yield
    clear_request_id()


def test_request_id_round_trip():
    assert get_request_id() == ""

    assert set_request_id("req-123") == "req-123"
    assert get_request_id() == "req-123"

    clear_request_id()
    assert get_request_id() == ""


def test_set_request_id_generates_one():
    request_id = set_request_id()

    assert len(request_id) == 36
    assert get_request_id() == request_id


def test_structured_formatter_includes_request_id():
    set_request_id("req-123")

    data = json.loads(StructuredFormatter().format(make_record()))

    assert data["request_id"] == "req-123"
    assert data["level"] == "INFO"
    assert data["logger"] == "app.services.route_planner"
    assert data["message"] == "Routes calculated: 3"


def test_structured_formatter_without_request_id():
    data = json.loads(StructuredFormatter().format(make_record()))

    assert "request_id" not in data


def test_structured_formatter_extra_fields():
    record = make_record()
    record.extra_fields = {"weather": "rain"}

    data = json.loads(StructuredFormatter().format(record))

    assert data["weather"] == "rain"


def test_human_readable_formatter_shows_short_request_id():
    set_request_id("0123456789abcdef")

    line = HumanReadableFormatter().format(make_record())

    assert "[01234567]" in line
    assert "Routes calculated: 3" in line
