"""
Asset and price records.

    union Asset switch (AssetType type) {
        case ASSET_TYPE_NATIVE: void;
        case ASSET_TYPE_CREDIT_ALPHANUM4: struct { AssetCode4 assetCode; AccountID issuer; } alphaNum4;
        case ASSET_TYPE_CREDIT_ALPHANUM12: struct { AssetCode12 assetCode; AccountID issuer; } alphaNum12;
    };
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import DecodingError, EncodingError
from .base import XdrRecord
from .enums import AssetType, read_enum
from .keys import PublicKey

ASSET_CODE_SIZES = {
    AssetType.CREDIT_ALPHANUM4: 4,
    AssetType.CREDIT_ALPHANUM12: 12,
}


def _code_size(asset_type: AssetType) -> int:
    try:
        return ASSET_CODE_SIZES[asset_type]
    except KeyError:
        raise EncodingError(f"Asset type {asset_type!r} has no asset code")


@dataclass(frozen=True)
class AlphaNum:
    """Credit asset body; asset_code is the zero-padded fixed-size code."""
    asset_code: bytes
    issuer: PublicKey


@dataclass(frozen=True)
class Asset(XdrRecord):
    type: AssetType
    alpha_num: Optional[AlphaNum] = None

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        if self.type == AssetType.NATIVE:
            return
        if self.alpha_num is None:
            raise EncodingError(f"Asset of type {self.type.name} requires an asset code and issuer")
        writer.opaque_fixed(self.alpha_num.asset_code, _code_size(self.type))
        self.alpha_num.issuer.pack(writer)

    @classmethod
    def unpack(cls, reader: XdrReader) -> Asset:
        asset_type = read_enum(reader, AssetType)
        if asset_type == AssetType.NATIVE:
            return cls(asset_type)
        code = reader.opaque_fixed(ASSET_CODE_SIZES[asset_type])
        return cls(asset_type, AlphaNum(code, PublicKey.unpack(reader)))


@dataclass(frozen=True)
class AllowTrustAsset(XdrRecord):
    """Asset code without issuer, as used by AllowTrustOp."""
    type: AssetType
    asset_code: bytes

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(self.type)
        writer.opaque_fixed(self.asset_code, _code_size(self.type))

    @classmethod
    def unpack(cls, reader: XdrReader) -> AllowTrustAsset:
        offset = reader.offset
        asset_type = read_enum(reader, AssetType)
        if asset_type not in ASSET_CODE_SIZES:
            raise DecodingError(f"AllowTrust asset cannot be {asset_type.name} (offset {offset})")
        return cls(asset_type, reader.opaque_fixed(ASSET_CODE_SIZES[asset_type]))


@dataclass(frozen=True)
class Price(XdrRecord):
    """Rational price n/d."""
    n: int
    d: int

    def pack(self, writer: XdrWriter) -> None:
        writer.int32(self.n)
        writer.int32(self.d)

    @classmethod
    def unpack(cls, reader: XdrReader) -> Price:
        n = reader.int32()
        return cls(n, reader.int32())


__all__ = [
    "ASSET_CODE_SIZES",
    "AlphaNum",
    "Asset",
    "AllowTrustAsset",
    "Price",
]
