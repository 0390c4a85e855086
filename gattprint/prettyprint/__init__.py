"""
Pretty-printing of decoded characteristic values.

Templates are parsed once into segments (``specifier``), bound to the
characteristic's declared fields (``segments``) and rendered by a
``Formatter`` against any number of value sets (``formatter``).
"""
from gattprint.prettyprint.formatter import (
    build_formatter,
    build_segments,
    Formatter,
    FormatterFactory,
    RenderFailure,
)
from gattprint.prettyprint.segments import NumericSegment, Segment, StringSegment, TextSegment
from gattprint.prettyprint.specifier import ConversionKind, Operator, Specifier, tokenize

__all__ = [
    "build_formatter",
    "build_segments",
    "Formatter",
    "FormatterFactory",
    "RenderFailure",
    "NumericSegment",
    "Segment",
    "StringSegment",
    "TextSegment",
    "ConversionKind",
    "Operator",
    "Specifier",
    "tokenize",
]
