from __future__ import annotations

from dataclasses import dataclass


def get_bit(value: int, bit_index: int, width: int = 8) -> bool:
    if bit_index < 0 or bit_index >= width:
        raise ValueError(f"bit_index must be between 0 and {width - 1}")
    return bool(value & (1 << bit_index))


@dataclass(frozen=True)
class BitSequence:
    """
    Fixed-width, immutable sequence of bits. Index 0 is the least significant bit.

    Attributes:
        value: The bits packed into a non-negative integer.
        width: The number of bits in the sequence.
    """
    value: int
    width: int

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("width must be non-negative")
        if self.value < 0 or self.value >> self.width:
            raise ValueError(f"value 0x{self.value:x} does not fit in {self.width} bits")

    @classmethod
    def from_int(cls, value: int, width: int) -> "BitSequence":
        return cls(value=value & ((1 << width) - 1), width=width)

    @classmethod
    def from_bytes(cls, data: bytes, width: int | None = None) -> "BitSequence":
        """
        Build a sequence from little-endian bytes, the byte order of GATT payloads.

        Args:
            data: Raw bytes; the first byte holds bits 0-7.
            width: Overall width; defaults to ``8 * len(data)``.
        """
        bit_width = 8 * len(data) if width is None else width
        if bit_width > 8 * len(data):
            raise ValueError(f"{len(data)} bytes cannot hold {bit_width} bits")
        return cls.from_int(int.from_bytes(data, byteorder="little"), bit_width)

    def __len__(self) -> int:
        return self.width

    def __getitem__(self, index: int) -> bool:
        if index < 0:
            index += self.width
        return get_bit(self.value, index, self.width)

    def get(self, start: int, end: int) -> "BitSequence":
        """Extract the half-open bit range ``[start, end)`` as a new sequence."""
        if start < 0 or end > self.width or start > end:
            raise ValueError(f"bit range [{start}, {end}) outside sequence of width {self.width}")
        return BitSequence.from_int(self.value >> start, end - start)
