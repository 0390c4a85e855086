"""
Renderable pieces of a pretty-print template.

``TextSegment`` holds literal text, ``StringSegment`` and ``NumericSegment``
render one named field from the value set passed to ``render``.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Callable, Iterable, Optional, Union

from gattprint.domain.fields import FieldType, NumericDomain
from gattprint.domain.holders import FieldHolder, find_holder
from gattprint.errors import FieldLookupError, TemplateError
from gattprint.prettyprint.printf import format_decimal, format_integer, format_string
from gattprint.prettyprint.specifier import ConversionKind, Operator, Specifier

IntegerOperation = Callable[[int], int]
DecimalOperation = Callable[[Decimal], Decimal]


def truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def truncating_remainder(dividend: int, divisor: int) -> int:
    return dividend - divisor * truncating_divide(dividend, divisor)


def exact_divide(dividend: Decimal, divisor: Decimal, precision: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = precision
        ctx.traps[Inexact] = True
        return dividend / divisor


def exact_remainder(dividend: Decimal, divisor: Decimal, precision: int) -> Decimal:
    with localcontext() as ctx:
        # the integer quotient must fit in the working precision
        ctx.prec = precision + max(0, dividend.adjusted() - divisor.adjusted())
        ctx.traps[Inexact] = True
        return dividend % divisor


@dataclass(frozen=True)
class TextSegment:
    text: str

    def render(self, holders: Iterable[FieldHolder]) -> str:
        return self.text


@dataclass(frozen=True)
class StringSegment:
    field_name: str
    width: Optional[int] = None
    precision: Optional[int] = None

    def render(self, holders: Iterable[FieldHolder]) -> str:
        holder = find_holder(holders, self.field_name)
        value = holder.get_string() if holder is not None else ""
        return format_string(value, width=self.width, precision=self.precision)


@dataclass(frozen=True)
class NumericSegment:
    """
    A field rendered as a number after an optional division or modulo.

    ``operation`` is selected at build time for the field's numeric domain:
    integer fields use truncating integer arithmetic, float fields use exact
    decimal arithmetic.
    """
    field_name: str
    field_type: FieldType
    domain: NumericDomain
    operation: Union[IntegerOperation, DecimalOperation]
    zero_pad: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None

    def render(self, holders: Iterable[FieldHolder]) -> str:
        holder = find_holder(holders, self.field_name)
        if holder is None:
            raise FieldLookupError(self.field_name)
        if self.domain is NumericDomain.INTEGER:
            value = self.operation(holder.get_integer(0))
            return format_integer(value, zero_pad=self.zero_pad, width=self.width)
        value = self.operation(holder.get_decimal(Decimal(0)))
        return format_decimal(value, zero_pad=self.zero_pad, width=self.width, precision=self.precision)


Segment = Union[TextSegment, StringSegment, NumericSegment]


def _integer_operation(specifier: Specifier) -> IntegerOperation:
    if specifier.operator is None:
        return lambda value: value
    try:
        operand = int(specifier.operand, 10)
    except ValueError:
        raise TemplateError(
            f"Invalid specifier {specifier.token!r}: integer fields need an integer operand"
        ) from None
    if specifier.operator is Operator.DIVIDE:
        return lambda value: truncating_divide(value, operand)
    return lambda value: truncating_remainder(value, operand)


def _decimal_operation(specifier: Specifier, precision: int) -> DecimalOperation:
    if specifier.operator is None:
        return lambda value: value
    try:
        operand = Decimal(specifier.operand)
    except InvalidOperation:
        raise TemplateError(f"Invalid specifier {specifier.token!r}: bad operand") from None
    if specifier.operator is Operator.DIVIDE:
        return lambda value: exact_divide(value, operand, precision)
    return lambda value: exact_remainder(value, operand, precision)


def build_string_segment(field_name: str, specifier: Specifier) -> StringSegment:
    return StringSegment(field_name=field_name, width=specifier.width, precision=specifier.precision)


def build_numeric_segment(
    field_name: str,
    field_type: Optional[FieldType],
    specifier: Specifier,
    decimal_precision: int = 100,
) -> NumericSegment:
    """
    Build a numeric segment for a field of the given type.

    Raises:
        TemplateError: If the field has no numeric domain or the operand
            does not suit it.
    """
    domain = field_type.numeric_domain if field_type is not None else None
    if domain is NumericDomain.INTEGER:
        operation = _integer_operation(specifier)
    elif domain is NumericDomain.DECIMAL:
        operation = _decimal_operation(specifier, decimal_precision)
    else:
        raise TemplateError(
            f"Invalid specifier {specifier.token!r}: field '{field_name}' of type "
            f"{field_type.value if field_type else 'unknown'} is not numeric"
        )
    return NumericSegment(
        field_name=field_name,
        field_type=field_type,
        domain=domain,
        operation=operation,
        zero_pad=specifier.zero_pad,
        width=specifier.width,
        precision=specifier.precision,
    )


def build_segment(
    field_name: str,
    field_type: Optional[FieldType],
    specifier: Specifier,
    decimal_precision: int = 100,
) -> Segment:
    if specifier.conversion is ConversionKind.STRING:
        return build_string_segment(field_name, specifier)
    if specifier.conversion is ConversionKind.NUMERIC:
        return build_numeric_segment(field_name, field_type, specifier, decimal_precision)
    raise TemplateError(f"Unknown conversion in pretty-print specification {specifier.token!r}")
