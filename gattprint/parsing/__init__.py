"""
This package contains the numeric decoders used to turn raw characteristic
bits into typed values.

Sub-packages handle specific number formats:

- ``integers``: Two's-complement integer decoding.
- ``ieee11073``: IEEE-11073 medical device SFLOAT/FLOAT decoding.
"""
