"""
Decoder for IEEE-11073 SFLOAT (16-bit) and FLOAT (32-bit) values.

Only the NaN and infinity sentinels are recognised. The NRes and reserved
mantissas decode through the generic ``mantissa * 10 ** exponent`` formula.
Encoding is not supported and the ``encode_*`` functions return ``None``.
"""
from __future__ import annotations

import math
from typing import Optional, Union

from gattprint.core.binary import BitSequence
from gattprint.errors import UnsupportedOperationError
from gattprint.parsing.integers import decode_twos_complement

# Reserved SFLOAT mantissas (12-bit patterns, valid only with a zero exponent).
SFLOAT_NAN = 0x07FF
SFLOAT_NRES = 0x0800
SFLOAT_POSITIVE_INFINITY = 0x07FE
SFLOAT_NEGATIVE_INFINITY = 0x0802
SFLOAT_RESERVED = 0x0801

# Reserved FLOAT mantissas (24-bit patterns).
FLOAT_NAN = 0x007FFFFF
FLOAT_NRES = 0x00800000
FLOAT_POSITIVE_INFINITY = 0x007FFFFE
FLOAT_NEGATIVE_INFINITY = 0x00800002
FLOAT_RESERVED = 0x00800001

# Negative infinity as the decoded (signed) mantissa.
_SFLOAT_NEGATIVE_INFINITY_SIGNED = SFLOAT_NEGATIVE_INFINITY - (1 << 12)
_FLOAT_NEGATIVE_INFINITY_SIGNED = FLOAT_NEGATIVE_INFINITY - (1 << 24)

BitsLike = Union[BitSequence, bytes, bytearray, int]


def _as_bits(data: BitsLike, width: int) -> BitSequence:
    if isinstance(data, BitSequence):
        if len(data) < width:
            raise ValueError(f"expected at least {width} bits, got {len(data)}")
        return data
    if isinstance(data, (bytes, bytearray)):
        return BitSequence.from_bytes(bytes(data[: width // 8]), width)
    return BitSequence.from_int(int(data), width)


def _decode(
    bits: BitSequence,
    mantissa_width: int,
    exponent_width: int,
    nan: int,
    positive_infinity: int,
    negative_infinity: int,
) -> float:
    exponent_bits = bits.get(mantissa_width, mantissa_width + exponent_width)
    mantissa_bits = bits.get(0, mantissa_width)
    exponent = decode_twos_complement(exponent_bits, exponent_width, True)
    mantissa = decode_twos_complement(mantissa_bits, mantissa_width, True)
    if exponent == 0:
        if mantissa == nan:
            return math.nan
        elif mantissa == positive_infinity:
            return math.inf
        elif mantissa == negative_infinity:
            return -math.inf
    return float(mantissa) * math.pow(10, exponent)


def decode_sfloat(data: BitsLike) -> float:
    """
    Decode a 16-bit IEEE-11073 SFLOAT.

    Args:
        data: A ``BitSequence``, two little-endian bytes, or the raw 16-bit integer.

    Returns:
        The decoded value, ``math.nan`` or ``±math.inf``.
    """
    return _decode(
        _as_bits(data, 16),
        mantissa_width=12,
        exponent_width=4,
        nan=SFLOAT_NAN,
        positive_infinity=SFLOAT_POSITIVE_INFINITY,
        negative_infinity=_SFLOAT_NEGATIVE_INFINITY_SIGNED,
    )


def decode_float(data: BitsLike) -> float:
    """
    Decode a 32-bit IEEE-11073 FLOAT.

    Args:
        data: A ``BitSequence``, four little-endian bytes, or the raw 32-bit integer.

    Returns:
        The decoded value, ``math.nan`` or ``±math.inf``.
    """
    return _decode(
        _as_bits(data, 32),
        mantissa_width=24,
        exponent_width=8,
        nan=FLOAT_NAN,
        positive_infinity=FLOAT_POSITIVE_INFINITY,
        negative_infinity=_FLOAT_NEGATIVE_INFINITY_SIGNED,
    )


def decode_double(data: BitsLike) -> float:
    raise UnsupportedOperationError("IEEE-11073 double precision decoding is not supported")


def encode_sfloat(value: float) -> Optional[BitSequence]:
    return None


def encode_float(value: float) -> Optional[BitSequence]:
    return None


def encode_double(value: float) -> Optional[BitSequence]:
    return None
