from __future__ import annotations

from gattprint.core.binary import BitSequence


def decode_twos_complement(bits: BitSequence, width: int, signed: bool) -> int:
    """
    Read the low ``width`` bits of a sequence as an integer.

    Args:
        bits: The source bit sequence.
        width: Number of bits to read, at most ``len(bits)``.
        signed: Treat bit ``width - 1`` as a two's-complement sign bit.

    Returns:
        The decoded integer. Every bit pattern is a valid value.
    """
    if width < 0 or width > len(bits):
        raise ValueError(f"cannot read {width} bits from a sequence of width {len(bits)}")
    magnitude = bits.value & ((1 << width) - 1)
    if signed and width and magnitude >> (width - 1):
        return magnitude - (1 << width)
    return magnitude
