"""Tests for logging configuration."""

import logging

from teacherapp.utils.logging import StructuredFormatter, setup_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("teacherapp.test", logging.INFO, "", 0, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_includes_extra():
    formatter = StructuredFormatter()

    line = formatter.format(_record("Teacher created", teacher_id=7))

    assert 'level="INFO"' in line
    assert 'logger="teacherapp.test"' in line
    assert 'message="Teacher created"' in line
    assert 'teacher_id="7"' in line


def test_structured_formatter_skips_standard_attributes():
    line = StructuredFormatter().format(_record("plain"))

    assert "lineno=" not in line
    assert "pathname=" not in line


def test_setup_logging_installs_single_handler(monkeypatch):
    """Repeated setup replaces the handler instead of stacking them."""
    from teacherapp.config import settings

    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    root_logger = logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", list(root_logger.handlers))

    setup_logging()
    setup_logging()

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, StructuredFormatter)
