"""
Diagnostics for pretty-printing.

Render failures are logged with a ``details`` extra holding the
``RenderFailure`` fields. A ``RingBufferHandler`` keeps the most recent
records so callers can inspect failures after the fact.
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, Union

from gattprint.config import get_settings

DiagnosticsSink = Union[logging.Logger, str, None]


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "logger": record.name,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def get_failures(self) -> List[Dict]:
        """Details of the recorded render failures, oldest first."""
        return [e["details"] for e in self.get_events() if e["details"]]


def create_logger(name: str, ring_size: Optional[int] = None) -> logging.Logger:
    """
    Return a diagnostics logger that records into a ``RingBufferHandler``.

    Args:
        name: Logger name; the same name always yields the same logger.
        ring_size: Records kept; defaults to the ``log_ring_size`` setting.
    """
    logger = logging.getLogger(name)
    if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
        return logger
    logger.setLevel(logging.INFO)
    size = ring_size if ring_size is not None else get_settings().log_ring_size
    handler = RingBufferHandler(max_entries=size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def resolve_diagnostics(sink: DiagnosticsSink) -> Optional[logging.Logger]:
    """Turn a diagnostics name into a ring-buffered logger; loggers pass through."""
    if isinstance(sink, str):
        return create_logger(sink)
    return sink


def ring_buffer_events(logger: logging.Logger) -> List[Dict]:
    events: List[Dict] = []
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            events.extend(handler.get_events())
    return events


def ring_buffer_failures(logger: logging.Logger) -> List[Dict]:
    failures: List[Dict] = []
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            failures.extend(handler.get_failures())
    return failures
