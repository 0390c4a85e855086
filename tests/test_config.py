"""Tests for formatter settings and the ring buffer diagnostics logger."""
import logging

from gattprint.config import FormatterSettings, get_settings
from gattprint.logging import create_logger, ring_buffer_events, RingBufferHandler


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PRETTY_PRINT_FAILURE_TEXT", raising=False)
    settings = FormatterSettings()
    assert settings.failure_text == "Pretty-printing failed"
    assert settings.decimal_precision == 100


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PRETTY_PRINT_FAILURE_TEXT", "--")
    monkeypatch.setenv("PRETTY_PRINT_LOG_RING_SIZE", "5")
    settings = FormatterSettings()
    assert settings.failure_text == "--"
    assert settings.log_ring_size == 5


def test_ring_buffer_keeps_last_entries():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("tests.gattprint.ring")
    logger.addHandler(handler)
    logger.propagate = False
    try:
        for i in range(3):
            logger.warning("event %d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)
    events = handler.get_events()
    assert [e["event"] for e in events] == ["event 1", "event 2"]
    assert events[-1]["details"] == {"i": 2}


def test_create_logger_is_idempotent():
    first = create_logger("tests.gattprint.idempotent", ring_size=3)
    second = create_logger("tests.gattprint.idempotent", ring_size=3)
    assert first is second
    assert len(first.handlers) == 1
    first.info("hello")
    assert ring_buffer_events(first)[-1]["event"] == "hello"


def test_create_logger_ring_size_defaults_to_settings():
    logger = create_logger("tests.gattprint.default_ring")
    handler = next(h for h in logger.handlers if isinstance(h, RingBufferHandler))
    assert handler.max_entries == get_settings().log_ring_size
