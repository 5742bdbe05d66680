"""
Key and account records.

    union PublicKey switch (PublicKeyType type) { case PUBLIC_KEY_TYPE_ED25519: uint256 ed25519; };
    union MuxedAccount switch (CryptoKeyType type) {
        case KEY_TYPE_ED25519: uint256 ed25519;
        case KEY_TYPE_MUXED_ED25519: struct { uint64 id; uint256 ed25519; } med25519;
    };
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import DecodingError, EncodingError
from .base import XdrRecord
from .enums import CryptoKeyType, PublicKeyType, SignerKeyType, read_enum

UINT256_SIZE = 32


@dataclass(frozen=True)
class PublicKey(XdrRecord):
    """Ed25519 account identifier (AccountID on the wire)."""
    ed25519: bytes

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(PublicKeyType.ED25519)
        writer.opaque_fixed(self.ed25519, UINT256_SIZE)

    @classmethod
    def unpack(cls, reader: XdrReader) -> PublicKey:
        read_enum(reader, PublicKeyType)
        return cls(reader.opaque_fixed(UINT256_SIZE))


AccountID = PublicKey


@dataclass(frozen=True)
class MuxedAccountMed25519(XdrRecord):
    id: int
    ed25519: bytes

    def pack(self, writer: XdrWriter) -> None:
        writer.uint64(self.id)
        writer.opaque_fixed(self.ed25519, UINT256_SIZE)

    @classmethod
    def unpack(cls, reader: XdrReader) -> MuxedAccountMed25519:
        account_id = reader.uint64()
        return cls(account_id, reader.opaque_fixed(UINT256_SIZE))


@dataclass(frozen=True)
class MuxedAccount(XdrRecord):
    """Account reference that may carry a 64-bit multiplexing id."""
    type: CryptoKeyType
    ed25519: Optional[bytes] = None
    med25519: Optional[MuxedAccountMed25519] = None

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        if self.type == CryptoKeyType.ED25519:
            if self.ed25519 is None:
                raise EncodingError("MuxedAccount of type ED25519 requires ed25519 key bytes")
            writer.opaque_fixed(self.ed25519, UINT256_SIZE)
        elif self.type == CryptoKeyType.MUXED_ED25519:
            if self.med25519 is None:
                raise EncodingError("MuxedAccount of type MUXED_ED25519 requires med25519 body")
            self.med25519.pack(writer)
        else:
            raise EncodingError(f"Invalid MuxedAccount type {self.type!r}")

    @classmethod
    def unpack(cls, reader: XdrReader) -> MuxedAccount:
        offset = reader.offset
        key_type = read_enum(reader, CryptoKeyType)
        if key_type == CryptoKeyType.ED25519:
            return cls(key_type, ed25519=reader.opaque_fixed(UINT256_SIZE))
        if key_type == CryptoKeyType.MUXED_ED25519:
            return cls(key_type, med25519=MuxedAccountMed25519.unpack(reader))
        raise DecodingError(f"Invalid MuxedAccount type {key_type.name} at offset {offset}")


@dataclass(frozen=True)
class SignerKey(XdrRecord):
    type: SignerKeyType
    key: bytes

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        writer.opaque_fixed(self.key, UINT256_SIZE)

    @classmethod
    def unpack(cls, reader: XdrReader) -> SignerKey:
        key_type = read_enum(reader, SignerKeyType)
        return cls(key_type, reader.opaque_fixed(UINT256_SIZE))


@dataclass(frozen=True)
class Signer(XdrRecord):
    key: SignerKey
    weight: int

    def pack(self, writer: XdrWriter) -> None:
        self.key.pack(writer)
        writer.uint32(self.weight)

    @classmethod
    def unpack(cls, reader: XdrReader) -> Signer:
        key = SignerKey.unpack(reader)
        return cls(key, reader.uint32())


__all__ = [
    "PublicKey",
    "AccountID",
    "MuxedAccount",
    "MuxedAccountMed25519",
    "SignerKey",
    "Signer",
]
