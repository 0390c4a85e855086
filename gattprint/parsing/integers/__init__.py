"""
Two's-complement integer decoding over fixed-width bit sequences.
"""
from gattprint.parsing.integers.decode import decode_twos_complement

__all__ = ["decode_twos_complement"]
