"""
XDR Writer

Implements the canonical XDR (RFC 4506) encoding used by the Stellar
network: big-endian 4/8 byte integers, 4-byte aligned opaque data and
length-prefixed variable data.
"""

import struct
from typing import Callable, Optional, Sequence, TypeVar

from ..runtime.errors import EncodingError

T = TypeVar("T")


def _padding(n: int) -> int:
    return (4 - n % 4) % 4


class XdrWriter:
    """
    Binary writer for XDR primitives.

    Every method appends to an internal buffer; to_bytes() returns the
    accumulated encoding. Values outside the range of the target type raise
    EncodingError.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def __len__(self) -> int:
        return len(self._bb)

    def _pack(self, fmt: str, v: int, type_name: str) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise EncodingError(f"{type_name} value must be an integer, got {type(v).__name__}")
        try:
            self._bb.extend(struct.pack(fmt, v))
        except struct.error as e:
            raise EncodingError(f"{type_name} value out of range: {v}", cause=e)

    def int32(self, v: int) -> None:
        """Write signed 32-bit integer."""
        self._pack(">i", v, "int32")

    def uint32(self, v: int) -> None:
        """Write unsigned 32-bit integer."""
        self._pack(">I", v, "uint32")

    def int64(self, v: int) -> None:
        """Write signed 64-bit hyper integer."""
        self._pack(">q", v, "int64")

    def uint64(self, v: int) -> None:
        """Write unsigned 64-bit hyper integer."""
        self._pack(">Q", v, "uint64")

    def boolean(self, v: bool) -> None:
        """Write boolean as an int32 of 0 or 1."""
        self.int32(1 if v else 0)

    def opaque_fixed(self, v: bytes, size: int) -> None:
        """
        Write fixed-length opaque data followed by zero padding.

        Args:
            v: Bytes to write, must be exactly size bytes
            size: Declared length of the field
        """
        if len(v) != size:
            raise EncodingError(f"Fixed opaque field expects {size} bytes, got {len(v)}")
        self._bb.extend(v)
        self._bb.extend(b"\x00" * _padding(size))

    def opaque_var(self, v: bytes, max_length: Optional[int] = None) -> None:
        """
        Write variable-length opaque data with a uint32 length prefix.

        Args:
            v: Bytes to write
            max_length: Upper bound declared by the protocol, if any
        """
        if max_length is not None and len(v) > max_length:
            raise EncodingError(f"Variable opaque of {len(v)} bytes exceeds maximum {max_length}")
        self.uint32(len(v))
        self._bb.extend(v)
        self._bb.extend(b"\x00" * _padding(len(v)))

    def string(self, s: str, max_length: Optional[int] = None) -> None:
        """Write a UTF-8 string using the variable opaque layout."""
        try:
            encoded = s.encode("utf-8")
        except (AttributeError, UnicodeEncodeError) as e:
            raise EncodingError(f"Cannot encode string value {s!r}", cause=e)
        self.opaque_var(encoded, max_length)

    def optional(self, v: Optional[T], pack: Callable[["XdrWriter", T], None]) -> None:
        """Write an optional value: a boolean presence flag, then the value."""
        if v is None:
            self.boolean(False)
        else:
            self.boolean(True)
            pack(self, v)

    def array_var(self, items: Sequence[T], pack: Callable[["XdrWriter", T], None],
                  max_length: Optional[int] = None) -> None:
        """Write a variable-length array with a uint32 element count."""
        if max_length is not None and len(items) > max_length:
            raise EncodingError(f"Array of {len(items)} elements exceeds maximum {max_length}")
        self.uint32(len(items))
        for item in items:
            pack(self, item)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
