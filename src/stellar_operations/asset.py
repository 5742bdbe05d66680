"""
Domain asset: the native lumen or a credit asset issued by an account.
"""

from __future__ import annotations
import re
from typing import Optional

from pydantic import BaseModel

from . import xdr
from .xdr.asset import ASSET_CODE_SIZES
from .crypto.keys import PublicKey
from .runtime.errors import DecodingError, EncodingError

_ASSET_CODE_RE = re.compile(r"[A-Za-z0-9]{1,12}")


class Asset(BaseModel):
    """
    Asset held or transferred by an operation.

    A native asset has neither code nor issuer. Credit asset codes of 1-4
    characters use the alphanum4 wire form, 5-12 characters alphanum12.
    """
    code: Optional[str] = None
    issuer: Optional[PublicKey] = None

    model_config = {"frozen": True}

    @classmethod
    def native(cls) -> Asset:
        return cls()

    @classmethod
    def credit(cls, code: str, issuer: PublicKey) -> Asset:
        return cls(code=code, issuer=issuer)

    @property
    def is_native(self) -> bool:
        return self.code is None and self.issuer is None

    @property
    def asset_type(self) -> xdr.AssetType:
        if self.is_native:
            return xdr.AssetType.NATIVE
        if self.code is not None and len(self.code) <= 4:
            return xdr.AssetType.CREDIT_ALPHANUM4
        return xdr.AssetType.CREDIT_ALPHANUM12

    def to_xdr(self) -> xdr.Asset:
        """
        Raises:
            EncodingError: If the code or issuer is missing or malformed
        """
        if self.is_native:
            return xdr.Asset(xdr.AssetType.NATIVE)
        if self.code is None or self.issuer is None:
            raise EncodingError("Credit asset requires both code and issuer")
        if not _ASSET_CODE_RE.fullmatch(self.code):
            raise EncodingError(f"Invalid asset code {self.code!r}")
        asset_type = self.asset_type
        size = ASSET_CODE_SIZES[asset_type]
        code = self.code.encode("ascii").ljust(size, b"\x00")
        return xdr.Asset(asset_type, xdr.AlphaNum(code, self.issuer.to_xdr_public_key()))

    @classmethod
    def from_xdr(cls, x: xdr.Asset) -> Asset:
        """
        Raises:
            DecodingError: If the wire code is malformed
        """
        if x.type == xdr.AssetType.NATIVE:
            return cls.native()
        if x.alpha_num is None:
            raise DecodingError(f"Asset of type {x.type.name} without code and issuer")
        code = x.alpha_num.asset_code.rstrip(b"\x00")
        try:
            text = code.decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodingError("Asset code is not ASCII", cause=e)
        if not _ASSET_CODE_RE.fullmatch(text):
            raise DecodingError(f"Invalid asset code {text!r}")
        if x.type == xdr.AssetType.CREDIT_ALPHANUM12 and len(text) <= 4:
            raise DecodingError(f"Asset code {text!r} is too short for alphanum12")
        return cls(code=text, issuer=PublicKey.from_xdr_public_key(x.alpha_num.issuer))

    def __str__(self) -> str:
        if self.is_native:
            return "native"
        return f"{self.code}:{self.issuer}"


__all__ = ["Asset"]
