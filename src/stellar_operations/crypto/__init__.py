"""
Key material and account references for Stellar operations.

Provides Ed25519 key derivation, StrKey text encoding and the conversion of
account references to and from their wire form.
"""

from .ed25519 import Ed25519PrivateKey
from .strkey import VersionByte, encode_check, decode_check
from .keys import (
    PublicKey,
    MuxedEd25519PublicKey,
    MuxedAccount,
    KeyPair,
    muxed_account_from_account_id,
    muxed_account_to_xdr,
    muxed_account_from_xdr,
)

__all__ = [
    "Ed25519PrivateKey",
    "VersionByte",
    "encode_check",
    "decode_check",
    "PublicKey",
    "MuxedEd25519PublicKey",
    "MuxedAccount",
    "KeyPair",
    "muxed_account_from_account_id",
    "muxed_account_to_xdr",
    "muxed_account_from_xdr",
]
