"""
printf-style rendering of the values produced by template segments.

Supports the subset of printf the template grammar can express: the ``0``
flag, a minimum width and a precision.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional


def format_string(value: str, width: Optional[int] = None, precision: Optional[int] = None) -> str:
    """
    Format text like ``%[width][.precision]s``.

    Precision truncates, width right-aligns with spaces.
    """
    if precision is not None:
        value = value[:precision]
    if width is not None:
        value = value.rjust(width)
    return value


def format_integer(value: int, zero_pad: bool = False, width: Optional[int] = None) -> str:
    spec = ("0" if zero_pad else "") + (str(width) if width is not None else "") + "d"
    return format(value, spec)


def format_decimal(
    value: Decimal,
    zero_pad: bool = False,
    width: Optional[int] = None,
    precision: Optional[int] = None,
) -> str:
    """
    Format a decimal in fixed-point notation.

    A precision rounds half-up (``2.345`` with precision 2 renders as
    ``"2.35"``). Without a precision the value keeps its own exponent
    (``Decimal("1.50")`` renders as ``"1.50"``).
    """
    if precision is not None:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
            value = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    spec = ("0" if zero_pad else "") + (str(width) if width is not None else "") + "f"
    return format(value, spec)
