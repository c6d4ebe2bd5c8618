from __future__ import annotations

import json
import logging

import pytest
import structlog

from sudoku_backend.core.logging_setup import SERVICE_NAME, configure_logging, resolve_level


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    saved = structlog.get_config()
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.configure(**saved)


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("chatty", logging.INFO), ("", logging.INFO)],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_stdlib_records_are_json_lines(capsys, restore_logging):
    assert configure_logging("warning") == logging.WARNING

    logging.getLogger("uvicorn.error").info("hidden")
    logging.getLogger("uvicorn.error").warning("pool %s", "exhausted")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["message"] == "pool exhausted"
    assert record["level"] == "warning"
    assert record["service"] == SERVICE_NAME
    assert record["timestamp"]
