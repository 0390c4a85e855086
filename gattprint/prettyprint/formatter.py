from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import DecimalException
from functools import lru_cache
from typing import Any, Iterable, Optional, Sequence

from gattprint.config import get_settings
from gattprint.domain.fields import Characteristic, FieldSpec, FieldType
from gattprint.domain.holders import FieldHolder, ValueSet, as_holders
from gattprint.logging import DiagnosticsSink, resolve_diagnostics
from gattprint.prettyprint.segments import Segment, TextSegment, build_segment
from gattprint.prettyprint.specifier import LiteralText, Placeholder, resolve_field_names, tokenize

logger = logging.getLogger(__name__)


def describe_error(exc: Exception) -> str:
    # decimal signals carry the list of raised condition classes as their message
    if isinstance(exc, DecimalException) and exc.args and isinstance(exc.args[0], list):
        return ", ".join(signal.__name__ for signal in exc.args[0])
    return str(exc) or type(exc).__name__


@dataclass(frozen=True)
class RenderFailure:
    template: str
    segment_index: int
    field_name: Optional[str]
    error_type: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "segment_index": self.segment_index,
            "field_name": self.field_name,
            "error_type": self.error_type,
            "message": self.message,
        }


class Formatter:
    """
    Renders field values through a parsed pretty-print template.

    A formatter is immutable once built and can be shared between threads.
    Rendering never raises: any failure is logged to the diagnostics logger
    and the whole output is replaced by ``failure_text``.
    """

    def __init__(
        self,
        template: str,
        segments: Sequence[Segment],
        failure_text: Optional[str] = None,
        diagnostics: DiagnosticsSink = None,
    ) -> None:
        self.template = template
        self.segments: tuple[Segment, ...] = tuple(segments)
        self.failure_text = failure_text if failure_text is not None else get_settings().failure_text
        self.diagnostics = resolve_diagnostics(diagnostics)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(template={self.template!r}, segments={len(self.segments)})"

    def render(self, values: ValueSet, diagnostics: DiagnosticsSink = None) -> str:
        holders: list[FieldHolder] = as_holders(values)
        parts: list[str] = []
        for index, segment in enumerate(self.segments):
            try:
                parts.append(segment.render(holders))
            except Exception as exc:
                failure = RenderFailure(
                    template=self.template,
                    segment_index=index,
                    field_name=getattr(segment, "field_name", None),
                    error_type=type(exc).__name__,
                    message=describe_error(exc),
                )
                sink = resolve_diagnostics(diagnostics) or self.diagnostics or logger
                sink.error("Error pretty-printing characteristic: %s", failure.message,
                           extra={"details": failure.as_dict()})
                return self.failure_text
        return "".join(parts)

    def decompose(self, pretty_printed: str) -> list[FieldHolder]:
        raise NotImplementedError("Decomposing pretty-printed text is not implemented")


def build_segments(template: str, fields: Iterable[FieldSpec], decimal_precision: int = 100) -> list[Segment]:
    """
    Parse a template and bind its placeholders to the given fields.

    Raises:
        TemplateError: If the template cannot be bound to the fields.
    """
    fields = list(fields)
    types: dict[str, FieldType] = {f.name: f.type for f in fields}
    tokens = resolve_field_names(tokenize(template), [f.name for f in fields])

    segments: list[Segment] = []
    for token in tokens:
        if isinstance(token, LiteralText):
            segments.append(TextSegment(token.text))
        elif isinstance(token, Placeholder):
            segments.append(
                build_segment(token.field_name, types.get(token.field_name), token.specifier, decimal_precision)
            )
    return segments


def _build_formatter(template: str, fields: tuple[FieldSpec, ...]) -> Formatter:
    settings = get_settings()
    segments = build_segments(template, fields, settings.decimal_precision)
    logger.debug("Built pretty-print formatter for %r with %d segments", template, len(segments))
    return Formatter(template, segments, failure_text=settings.failure_text)


_cached_build_formatter = lru_cache(maxsize=get_settings().formatter_cache_size)(_build_formatter)


def build_formatter(template: str, fields: Iterable[FieldSpec]) -> Formatter:
    """
    Build (or fetch from cache) the formatter for a template and field list.

    Raises:
        TemplateError: If the template is malformed or cannot be bound to the fields.
    """
    return _cached_build_formatter(template, tuple(fields))


class FormatterFactory:
    """
    Creates formatters for catalog characteristics.

    ``diagnostics`` (a logger, or a name for a ring-buffered logger from
    ``gattprint.logging.create_logger``) and ``failure_text`` are applied to
    every formatter the factory returns; formatters built without them share
    the module cache.
    """

    def __init__(self, diagnostics: DiagnosticsSink = None, failure_text: Optional[str] = None) -> None:
        self.diagnostics = resolve_diagnostics(diagnostics)
        self.failure_text = failure_text

    def create(self, template: str, fields: Iterable[FieldSpec]) -> Formatter:
        formatter = build_formatter(template, fields)
        if self.diagnostics is None and self.failure_text is None:
            return formatter
        return Formatter(
            formatter.template,
            formatter.segments,
            failure_text=self.failure_text if self.failure_text is not None else formatter.failure_text,
            diagnostics=self.diagnostics,
        )

    def pretty_print(self, characteristic: Characteristic) -> Optional[Formatter]:
        """
        Return the formatter for a characteristic, or ``None`` when the
        characteristic does not provide a pretty-print template.
        """
        if characteristic.pretty_print is None:
            return None
        return self.create(characteristic.pretty_print, characteristic.fields)
