"""
Template grammar for pretty-print specifications.

A template is literal text interleaved with specifiers of the form::

    %[(field)][<op><operand>:][0][width][.precision]<d|s>

``field`` starts with a letter; when omitted, the first declared field not
referenced explicitly anywhere in the template is used. ``op`` is ``/``
(division) or ``%`` (modulo) and must be followed by a decimal operand and a
colon. ``%%`` prints a single ``%``.

Example::

    %(starttime)/60:02d:%(starttime)%60:02d - %(endtime)/60:02d:%(endtime)%60:02d

prints ``"07:00 - 21:40"`` for ``starttime=420`` and ``endtime=1300``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Union

from gattprint.errors import TemplateError

SPEC_PATTERN = re.compile(
    r"%"
    r"(?:\((?P<field>[a-zA-Z][^)]*)\))?"
    r"(?:(?P<operator>[/%])(?P<operand>\d+(?:\.\d+)?|\.\d+):)?"
    r"(?P<flags>0)?"
    r"(?P<width>[1-9]\d*)?"
    r"(?:\.(?P<precision>[1-9]\d*))?"
    r"(?P<conversion>[ds])"
)


class ConversionKind(Enum):
    NUMERIC = "d"
    STRING = "s"


class Operator(Enum):
    DIVIDE = "/"
    MODULO = "%"


@dataclass(frozen=True)
class Specifier:
    """
    One parsed ``%...`` directive.

    Attributes:
        token: The directive as written in the template.
        conversion: Whether the field renders as a number or a string.
        field_name: The explicitly referenced field, if any.
        operator: ``/`` or ``%`` applied to numeric values before formatting.
        operand: The operand text, present exactly when ``operator`` is.
        zero_pad: Pad with zeroes instead of spaces.
        width: Minimum rendered width.
        precision: Truncation length for strings, decimal places for decimals.
    """
    token: str
    conversion: ConversionKind
    field_name: Optional[str] = None
    operator: Optional[Operator] = None
    operand: Optional[str] = None
    zero_pad: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.operator is None) != (self.operand is None):
            raise TemplateError(
                f"Invalid pretty-print specification {self.token!r}: operator and operand must be given together"
            )

    @classmethod
    def create(
        cls,
        token: str,
        conversion: str,
        field_name: Optional[str] = None,
        operator: Optional[str] = None,
        operand: Optional[str] = None,
        zero_pad: bool = False,
        width: Optional[int] = None,
        precision: Optional[int] = None,
    ) -> "Specifier":
        """Build a specifier from raw directive parts, validating the conversion and operator."""
        try:
            kind = ConversionKind(conversion)
        except ValueError:
            raise TemplateError(f"Unknown conversion {conversion!r} in pretty-print specification {token!r}") from None
        try:
            op = Operator(operator) if operator is not None else None
        except ValueError:
            raise TemplateError(f"Unknown operator {operator!r} in pretty-print specification {token!r}") from None
        return cls(
            token=token,
            conversion=kind,
            field_name=field_name,
            operator=op,
            operand=operand,
            zero_pad=zero_pad,
            width=width,
            precision=precision,
        )

    @classmethod
    def from_match(cls, match: re.Match) -> "Specifier":
        width = match.group("width")
        precision = match.group("precision")
        return cls.create(
            token=match.group(0),
            conversion=match.group("conversion"),
            field_name=match.group("field"),
            operator=match.group("operator"),
            operand=match.group("operand"),
            zero_pad=match.group("flags") is not None,
            width=int(width) if width is not None else None,
            precision=int(precision) if precision is not None else None,
        )


@dataclass(frozen=True)
class LiteralText:
    text: str


@dataclass(frozen=True)
class Placeholder:
    """A specifier waiting for its field name (and later its field type) to be resolved."""
    specifier: Specifier
    field_name: Optional[str] = None


Token = Union[LiteralText, Placeholder]


def _literal_prefix(leftover: str) -> tuple[str, str]:
    # A leading '%' is either the '%%' escape or unmatched syntax; skip past it.
    start = 2 if leftover.startswith("%") else 0
    next_pos = leftover.find("%", start)
    if next_pos < 0:
        text, rest = leftover, ""
    else:
        text, rest = leftover[:next_pos], leftover[next_pos:]
    if text.startswith("%%"):
        text = "%" + text[2:]
    return text, rest


def tokenize(template: str) -> list[Token]:
    """
    Split a template into literal text and unresolved placeholders.

    Unmatched ``%`` syntax is kept as literal text.
    """
    tokens: list[Token] = []
    leftover = template
    while leftover:
        match = SPEC_PATTERN.match(leftover)
        if match is None:
            text, leftover = _literal_prefix(leftover)
            tokens.append(LiteralText(text))
        else:
            specifier = Specifier.from_match(match)
            tokens.append(Placeholder(specifier=specifier, field_name=specifier.field_name))
            leftover = leftover[match.end():]
    return tokens


def resolve_field_names(tokens: Iterable[Token], declared_names: Iterable[str]) -> list[Token]:
    """
    Assign implicit field names to placeholders that do not name a field.

    Unnamed placeholders take, in order, the declared fields that no
    placeholder references explicitly.
    """
    tokens = list(tokens)
    used = {t.field_name for t in tokens if isinstance(t, Placeholder) and t.field_name is not None}
    available = iter([name for name in declared_names if name not in used])

    resolved: list[Token] = []
    for token in tokens:
        if isinstance(token, Placeholder) and token.field_name is None:
            name = next(available, None)
            if name is None:
                raise TemplateError(
                    f"Cannot guess pretty-print field name for {token.specifier.token!r}: "
                    "more positional fields requested than available"
                )
            token = replace(token, field_name=name)
        resolved.append(token)
    return resolved
