"""
XDR wire records for Stellar operations.

Provides the canonical record layouts (operation, operation bodies, assets,
account references) with pack/unpack methods over the codec primitives.
"""

from .enums import OperationType, AssetType, CryptoKeyType, PublicKeyType, SignerKeyType
from .base import XdrRecord
from .keys import PublicKey, AccountID, MuxedAccount, MuxedAccountMed25519, SignerKey, Signer
from .asset import AlphaNum, Asset, AllowTrustAsset, Price
from .operation import (
    MAX_PATH_LENGTH,
    CreateAccountOp,
    PaymentOp,
    PathPaymentStrictReceiveOp,
    PathPaymentStrictSendOp,
    ManageSellOfferOp,
    ManageBuyOfferOp,
    CreatePassiveSellOfferOp,
    SetOptionsOp,
    ChangeTrustOp,
    AllowTrustOp,
    ManageDataOp,
    BumpSequenceOp,
    OperationBody,
    Operation,
)

__all__ = [
    "OperationType",
    "AssetType",
    "CryptoKeyType",
    "PublicKeyType",
    "SignerKeyType",
    "XdrRecord",
    "PublicKey",
    "AccountID",
    "MuxedAccount",
    "MuxedAccountMed25519",
    "SignerKey",
    "Signer",
    "AlphaNum",
    "Asset",
    "AllowTrustAsset",
    "Price",
    "MAX_PATH_LENGTH",
    "CreateAccountOp",
    "PaymentOp",
    "PathPaymentStrictReceiveOp",
    "PathPaymentStrictSendOp",
    "ManageSellOfferOp",
    "ManageBuyOfferOp",
    "CreatePassiveSellOfferOp",
    "SetOptionsOp",
    "ChangeTrustOp",
    "AllowTrustOp",
    "ManageDataOp",
    "BumpSequenceOp",
    "OperationBody",
    "Operation",
]
