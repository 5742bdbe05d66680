"""
XDR Reader

Implements canonical XDR decoding with bounds checking. Every failure is
reported as DecodingError; the reader never returns a partially decoded
value.
"""

import struct
from typing import Callable, List, Optional, TypeVar

from ..runtime.errors import DecodingError
from .options import CodecOptions, DEFAULT_OPTIONS

T = TypeVar("T")


class XdrReader:
    """
    Binary reader for XDR primitives.

    Tracks the read offset so callers can report exactly how many bytes a
    record consumed.
    """

    def __init__(self, buf: bytes, options: Optional[CodecOptions] = None):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
            options: Decoder limits, defaults to DEFAULT_OPTIONS
        """
        self._buf = bytes(buf)
        self._off = 0
        self.options = options or DEFAULT_OPTIONS

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._off

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._off

    @property
    def eof(self) -> bool:
        """True if at end of buffer."""
        return self._off >= len(self._buf)

    def _take(self, n: int) -> bytes:
        if self._off + n > len(self._buf):
            raise DecodingError(
                f"Buffer underflow: need {n} bytes at offset {self._off}, {self.remaining} available"
            )
        out = self._buf[self._off:self._off + n]
        self._off += n
        return out

    def _unpack(self, fmt: str, size: int) -> int:
        return struct.unpack(fmt, self._take(size))[0]

    def int32(self) -> int:
        """Read signed 32-bit integer."""
        return self._unpack(">i", 4)

    def uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        return self._unpack(">I", 4)

    def int64(self) -> int:
        """Read signed 64-bit hyper integer."""
        return self._unpack(">q", 8)

    def uint64(self) -> int:
        """Read unsigned 64-bit hyper integer."""
        return self._unpack(">Q", 8)

    def boolean(self) -> bool:
        """Read boolean, rejecting anything other than 0 or 1."""
        offset = self._off
        v = self.int32()
        if v not in (0, 1):
            raise DecodingError(f"Invalid boolean value {v} at offset {offset}")
        return v == 1

    def _skip_padding(self, n: int) -> None:
        pad = (4 - n % 4) % 4
        if not pad:
            return
        offset = self._off
        padding = self._take(pad)
        if self.options.strict_padding and padding != b"\x00" * pad:
            raise DecodingError(f"Non-zero padding at offset {offset}")

    def opaque_fixed(self, size: int) -> bytes:
        """Read fixed-length opaque data and its padding."""
        out = self._take(size)
        self._skip_padding(size)
        return out

    def _length(self, max_length: Optional[int]) -> int:
        offset = self._off
        n = self.uint32()
        limit = self.options.max_var_length
        if max_length is not None:
            limit = min(limit, max_length)
        if n > limit:
            raise DecodingError(f"Length {n} at offset {offset} exceeds maximum {limit}")
        return n

    def opaque_var(self, max_length: Optional[int] = None) -> bytes:
        """Read variable-length opaque data with its uint32 length prefix."""
        n = self._length(max_length)
        out = self._take(n)
        self._skip_padding(n)
        return out

    def string(self, max_length: Optional[int] = None) -> str:
        """Read a UTF-8 string stored with the variable opaque layout."""
        raw = self.opaque_var(max_length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError("String field is not valid UTF-8", cause=e)

    def optional(self, unpack: Callable[["XdrReader"], T]) -> Optional[T]:
        """Read an optional value preceded by its presence flag."""
        if self.boolean():
            return unpack(self)
        return None

    def array_var(self, unpack: Callable[["XdrReader"], T],
                  max_length: Optional[int] = None) -> List[T]:
        """Read a variable-length array preceded by its uint32 element count."""
        n = self._length(max_length)
        return [unpack(self) for _ in range(n)]
