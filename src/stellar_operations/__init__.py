"""
Stellar Operations

Models the operations that can appear in a Stellar ledger transaction and
converts them losslessly to and from canonical XDR bytes.
"""

from .runtime.errors import *
from .codec import CodecOptions, XdrReader, XdrWriter
from . import xdr
from .crypto import KeyPair, PublicKey, MuxedEd25519PublicKey, MuxedAccount
from .amount import Stroops
from .asset import Asset
from .operations import *

__version__ = "0.1.0"
__all__ = [
    # Errors
    "ErrorCode",
    "StellarError",
    "ConstructionError",
    "EncodingError",
    "DecodingError",
    "UnsupportedOperationKind",
    "InvalidStrKeyError",
    "InvalidKeyError",

    # Codec and wire records
    "CodecOptions",
    "XdrReader",
    "XdrWriter",
    "xdr",

    # Accounts, amounts and assets
    "KeyPair",
    "PublicKey",
    "MuxedEd25519PublicKey",
    "MuxedAccount",
    "Stroops",
    "Asset",

    # Operations
    "Operation",
    "OperationVariant",
    "CreateAccountOperation",
    "CreateAccountOperationBuilder",
    "PaymentOperation",
    "PaymentOperationBuilder",
    "PathPaymentStrictReceiveOperation",
    "PathPaymentStrictReceiveOperationBuilder",
    "AccountMergeOperation",
    "AccountMergeOperationBuilder",
    "InflationOperation",
    "InflationOperationBuilder",
    "create_account",
    "payment",
    "path_payment_strict_receive",
    "account_merge",
    "inflation",
]
