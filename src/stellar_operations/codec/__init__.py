"""
XDR Binary Codec Module

Implements the canonical XDR encoding used on the Stellar wire.

Key components:
- writer.py: XdrWriter, big-endian primitive and aggregate encoding
- reader.py: XdrReader, bounds-checked decoding that tracks bytes consumed
- options.py: CodecOptions, decoder limits
"""

from .options import CodecOptions, DEFAULT_OPTIONS
from .reader import XdrReader
from .writer import XdrWriter

__all__ = [
    "CodecOptions",
    "DEFAULT_OPTIONS",
    "XdrReader",
    "XdrWriter",
]
