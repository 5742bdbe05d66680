"""
Shared byte-level entry points for XDR records.
"""

from __future__ import annotations
import base64
import binascii
from typing import Optional, Tuple, Type, TypeVar

from ..codec.options import CodecOptions
from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import DecodingError

R = TypeVar("R", bound="XdrRecord")


class XdrRecord:
    """
    Mixin for records that implement pack(writer) and unpack(reader).
    """

    def pack(self, writer: XdrWriter) -> None:
        raise NotImplementedError

    @classmethod
    def unpack(cls: Type[R], reader: XdrReader) -> R:
        raise NotImplementedError

    def to_xdr_bytes(self) -> bytes:
        """Encode this record to canonical XDR bytes."""
        writer = XdrWriter()
        self.pack(writer)
        return writer.to_bytes()

    @classmethod
    def from_xdr_bytes(cls: Type[R], buf: bytes,
                       options: Optional[CodecOptions] = None) -> Tuple[R, int]:
        """
        Decode one record from the start of buf.

        Returns:
            Tuple of (record, bytes consumed). Trailing bytes are left unread.
        """
        reader = XdrReader(buf, options)
        record = cls.unpack(reader)
        return record, reader.offset

    def to_xdr_base64(self) -> str:
        return base64.b64encode(self.to_xdr_bytes()).decode("ascii")

    @classmethod
    def from_xdr_base64(cls: Type[R], text: str, options: Optional[CodecOptions] = None) -> R:
        """Decode a base64 string holding exactly one record."""
        raw = decode_base64(text)
        record, consumed = cls.from_xdr_bytes(raw, options)
        if consumed != len(raw):
            raise DecodingError(
                f"{len(raw) - consumed} trailing bytes after {cls.__name__}",
                details={"consumed": consumed, "length": len(raw)},
            )
        return record


def decode_base64(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError("Invalid base64 input", cause=e)
