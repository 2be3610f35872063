"""Unit tests for logging configuration."""

import json
import logging

import pytest

from content_seeder.logging_config import (
    JsonFormatter,
    RunIdFilter,
    configure_logging,
    get_logger,
    get_run_id,
    new_run_id,
)


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("content_seeder.test", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_new_run_id_binds_context():
    run_id = new_run_id()
    assert len(run_id) == 8
    assert get_run_id() == run_id


def test_filter_adds_run_id():
    run_id = new_run_id()
    record = _record("hello")
    assert RunIdFilter().filter(record) is True
    assert record.run_id == run_id


def test_json_formatter_includes_extras():
    record = _record("Created point", point_id="p1", run_id="abc12345", counts={"points": 1})
    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "Created point"
    assert data["level"] == "INFO"
    assert data["run_id"] == "abc12345"
    assert data["point_id"] == "p1"
    assert data["counts"] == {"points": 1}


def test_json_formatter_stringifies_unserializable_extras():
    record = _record("x", blob=object())
    data = json.loads(JsonFormatter().format(record))
    assert isinstance(data["blob"], str)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if any(isinstance(f, RunIdFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


def test_production_logging_writes_json_lines(restore_root_logger, capsys):
    configure_logging(log_level="INFO", environment="production")
    run_id = new_run_id()

    get_logger("content_seeder.seeding").info("Created section", extra={"section_id": "s1"})
    get_logger("content_seeder.seeding").debug("hidden")

    lines = capsys.readouterr().err.strip().splitlines()
    assert len(restore_root_logger.handlers) == 1
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["message"] == "Created section"
    assert entry["run_id"] == run_id
    assert entry["section_id"] == "s1"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_debug_flag_overrides_level(restore_root_logger):
    configure_logging(log_level="ERROR", debug=True)
    assert restore_root_logger.level == logging.DEBUG
