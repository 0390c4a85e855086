"""
IEEE-11073 floating point codec for medical device characteristics.

SFLOAT is a 16-bit value with a 4-bit exponent and a 12-bit mantissa; FLOAT is
a 32-bit value with an 8-bit exponent and a 24-bit mantissa. Both encode
``mantissa * 10 ** exponent`` and reserve a handful of mantissa values, when
the exponent is zero, for NaN and infinities.
"""
from gattprint.parsing.ieee11073.decode import (
    decode_double,
    decode_float,
    decode_sfloat,
    encode_double,
    encode_float,
    encode_sfloat,
    FLOAT_NAN,
    FLOAT_NEGATIVE_INFINITY,
    FLOAT_NRES,
    FLOAT_POSITIVE_INFINITY,
    FLOAT_RESERVED,
    SFLOAT_NAN,
    SFLOAT_NEGATIVE_INFINITY,
    SFLOAT_NRES,
    SFLOAT_POSITIVE_INFINITY,
    SFLOAT_RESERVED,
)

__all__ = [
    "decode_double",
    "decode_float",
    "decode_sfloat",
    "encode_double",
    "encode_float",
    "encode_sfloat",
    "FLOAT_NAN",
    "FLOAT_NEGATIVE_INFINITY",
    "FLOAT_NRES",
    "FLOAT_POSITIVE_INFINITY",
    "FLOAT_RESERVED",
    "SFLOAT_NAN",
    "SFLOAT_NEGATIVE_INFINITY",
    "SFLOAT_NRES",
    "SFLOAT_POSITIVE_INFINITY",
    "SFLOAT_RESERVED",
]
