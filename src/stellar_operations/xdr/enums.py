"""
XDR discriminants used by operation records.

Values are fixed by the Stellar protocol definition files
(Stellar-transaction.x, Stellar-ledger-entries.x, Stellar-types.x).
"""

from __future__ import annotations
from enum import IntEnum
from typing import Type, TypeVar, TYPE_CHECKING

from ..runtime.errors import DecodingError

if TYPE_CHECKING:
    from ..codec.reader import XdrReader

E = TypeVar("E", bound=IntEnum)


class OperationType(IntEnum):
    """Operation body discriminant."""
    CREATE_ACCOUNT = 0
    PAYMENT = 1
    PATH_PAYMENT_STRICT_RECEIVE = 2
    MANAGE_SELL_OFFER = 3
    CREATE_PASSIVE_SELL_OFFER = 4
    SET_OPTIONS = 5
    CHANGE_TRUST = 6
    ALLOW_TRUST = 7
    ACCOUNT_MERGE = 8
    INFLATION = 9
    MANAGE_DATA = 10
    BUMP_SEQUENCE = 11
    MANAGE_BUY_OFFER = 12
    PATH_PAYMENT_STRICT_SEND = 13


class AssetType(IntEnum):
    NATIVE = 0
    CREDIT_ALPHANUM4 = 1
    CREDIT_ALPHANUM12 = 2


class CryptoKeyType(IntEnum):
    ED25519 = 0
    PRE_AUTH_TX = 1
    HASH_X = 2
    MUXED_ED25519 = 0x100


class PublicKeyType(IntEnum):
    ED25519 = 0


class SignerKeyType(IntEnum):
    ED25519 = 0
    PRE_AUTH_TX = 1
    HASH_X = 2


def read_enum(reader: "XdrReader", enum_cls: Type[E]) -> E:
    """Read an int32 discriminant and map it onto enum_cls."""
    offset = reader.offset
    value = reader.int32()
    try:
        return enum_cls(value)
    except ValueError as e:
        raise DecodingError(
            f"Unknown {enum_cls.__name__} discriminant {value} at offset {offset}",
            cause=e,
        )


__all__ = [
    "OperationType",
    "AssetType",
    "CryptoKeyType",
    "PublicKeyType",
    "SignerKeyType",
    "read_enum",
]
