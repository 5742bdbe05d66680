"""Runtime helpers for the Stellar operations package"""

from .errors import (
    ErrorCode,
    StellarError,
    ConstructionError,
    EncodingError,
    DecodingError,
    UnsupportedOperationKind,
    InvalidStrKeyError,
    InvalidKeyError,
)

__all__ = [
    "ErrorCode",
    "StellarError",
    "ConstructionError",
    "EncodingError",
    "DecodingError",
    "UnsupportedOperationKind",
    "InvalidStrKeyError",
    "InvalidKeyError",
]
