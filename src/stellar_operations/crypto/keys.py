"""
Account keys and the account reference codec.

PublicKey identifies an account (G... address); MuxedEd25519PublicKey adds a
64-bit id to a public key (M... address). Either may appear wherever the
protocol accepts a MuxedAccount. muxed_account_to_xdr and
muxed_account_from_xdr convert between these domain values and
xdr.MuxedAccount.
"""

from __future__ import annotations
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .. import xdr
from ..runtime.errors import DecodingError, EncodingError, InvalidKeyError, InvalidStrKeyError
from .ed25519 import KEY_SIZE, Ed25519PrivateKey
from .strkey import VersionByte, decode_check, encode_check

UINT64_MAX = 0xFFFFFFFFFFFFFFFF


class PublicKey:
    """Ed25519 account public key."""

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_SIZE:
            raise InvalidKeyError(f"Public key must be {KEY_SIZE} bytes")
        self._key = bytes(key)

    @classmethod
    def from_account_id(cls, account_id: str) -> PublicKey:
        """Parse a G... account id."""
        return cls(decode_check(VersionByte.ACCOUNT_ID, account_id))

    @property
    def account_id(self) -> str:
        return encode_check(VersionByte.ACCOUNT_ID, self._key)

    def as_bytes(self) -> bytes:
        return self._key

    def to_muxed_account(self, muxed_id: int) -> MuxedEd25519PublicKey:
        return MuxedEd25519PublicKey(self, muxed_id)

    def to_xdr_public_key(self) -> xdr.PublicKey:
        return xdr.PublicKey(self._key)

    @classmethod
    def from_xdr_public_key(cls, x: xdr.PublicKey) -> PublicKey:
        try:
            return cls(x.ed25519)
        except InvalidKeyError as e:
            raise DecodingError("Invalid public key on the wire", cause=e)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.account_id

    def __repr__(self) -> str:
        return f"PublicKey('{self.account_id}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Accept PublicKey instances or G... account ids."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
        )

    @classmethod
    def _validate(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return cls.from_account_id(value)
            except InvalidStrKeyError as e:
                raise ValueError(str(e)) from e
        return value


class MuxedEd25519PublicKey:
    """Public key combined with a 64-bit multiplexing id."""

    def __init__(self, key: PublicKey, muxed_id: int):
        if not isinstance(key, PublicKey):
            raise InvalidKeyError(f"Muxed account key must be a PublicKey, got {type(key).__name__}")
        if isinstance(muxed_id, bool) or not isinstance(muxed_id, int) or not 0 <= muxed_id <= UINT64_MAX:
            raise InvalidKeyError(f"Muxed account id must be a uint64, got {muxed_id!r}")
        self._key = key
        self._id = muxed_id

    @classmethod
    def from_account_id(cls, account_id: str) -> MuxedEd25519PublicKey:
        """Parse an M... account id (SEP-23 layout: key then big-endian id)."""
        payload = decode_check(VersionByte.MUXED_ACCOUNT, account_id)
        return cls(PublicKey(payload[:KEY_SIZE]), int.from_bytes(payload[KEY_SIZE:], "big"))

    @property
    def account_id(self) -> str:
        payload = self._key.as_bytes() + self._id.to_bytes(8, "big")
        return encode_check(VersionByte.MUXED_ACCOUNT, payload)

    @property
    def public_key(self) -> PublicKey:
        return self._key

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MuxedEd25519PublicKey):
            return NotImplemented
        return self._key == other._key and self._id == other._id

    def __hash__(self) -> int:
        return hash((self._key, self._id))

    def __str__(self) -> str:
        return self.account_id

    def __repr__(self) -> str:
        return f"MuxedEd25519PublicKey('{self.account_id}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Accept MuxedEd25519PublicKey instances or M... account ids."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
        )

    @classmethod
    def _validate(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return cls.from_account_id(value)
            except InvalidStrKeyError as e:
                raise ValueError(str(e)) from e
        return value


MuxedAccount = Union[PublicKey, MuxedEd25519PublicKey]


def muxed_account_from_account_id(account_id: str) -> MuxedAccount:
    """Parse either a G... or an M... address."""
    if isinstance(account_id, str) and account_id.startswith("M"):
        return MuxedEd25519PublicKey.from_account_id(account_id)
    return PublicKey.from_account_id(account_id)


def muxed_account_to_xdr(account: MuxedAccount) -> xdr.MuxedAccount:
    """
    Encode a domain account reference.

    Raises:
        EncodingError: If account is not a PublicKey or MuxedEd25519PublicKey
    """
    if isinstance(account, PublicKey):
        return xdr.MuxedAccount(xdr.CryptoKeyType.ED25519, ed25519=account.as_bytes())
    if isinstance(account, MuxedEd25519PublicKey):
        med25519 = xdr.MuxedAccountMed25519(account.id, account.public_key.as_bytes())
        return xdr.MuxedAccount(xdr.CryptoKeyType.MUXED_ED25519, med25519=med25519)
    raise EncodingError(f"Cannot encode {type(account).__name__} as a muxed account")


def muxed_account_from_xdr(x: xdr.MuxedAccount) -> MuxedAccount:
    """
    Decode a wire account reference.

    Raises:
        DecodingError: If the record is incomplete or of an unknown type
    """
    try:
        if x.type == xdr.CryptoKeyType.ED25519 and x.ed25519 is not None:
            return PublicKey(x.ed25519)
        if x.type == xdr.CryptoKeyType.MUXED_ED25519 and x.med25519 is not None:
            return MuxedEd25519PublicKey(PublicKey(x.med25519.ed25519), x.med25519.id)
    except InvalidKeyError as e:
        raise DecodingError("Invalid muxed account on the wire", cause=e)
    raise DecodingError(f"Malformed muxed account of type {x.type!r}")


class KeyPair:
    """Secret seed and the account public key derived from it."""

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key = PublicKey(private_key.public_key_bytes())

    @classmethod
    def from_secret_seed(cls, seed: str) -> KeyPair:
        """Create key pair from an S... secret seed."""
        return cls(Ed25519PrivateKey(decode_check(VersionByte.SEED, seed)))

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> KeyPair:
        return cls(Ed25519PrivateKey(seed))

    @classmethod
    def random(cls) -> KeyPair:
        """Generate a new random key pair."""
        return cls(Ed25519PrivateKey.generate())

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    @property
    def secret_seed(self) -> str:
        return encode_check(VersionByte.SEED, self._private_key.to_bytes())

    def __repr__(self) -> str:
        return f"KeyPair(public_key='{self._public_key.account_id}')"


__all__ = [
    "PublicKey",
    "MuxedEd25519PublicKey",
    "MuxedAccount",
    "KeyPair",
    "muxed_account_from_account_id",
    "muxed_account_to_xdr",
    "muxed_account_from_xdr",
]
