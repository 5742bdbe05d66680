"""
Stellar Operations Error Model

This module provides the error handling framework for the operation model
and its XDR bridge. Every failure raised by this package is a subclass of
StellarError and carries a stable ErrorCode.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, TYPE_CHECKING
from enum import IntEnum

if TYPE_CHECKING:
    from ..xdr.enums import OperationType


class ErrorCode(IntEnum):
    """Error codes for operation construction and XDR conversion."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    CONSTRUCTION_ERROR = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    DECODING_ERROR = 101
    UNSUPPORTED_OPERATION = 102

    # Key/Account errors (700-799)
    INVALID_KEY = 700
    INVALID_STRKEY = 701


class StellarError(Exception):
    """
    Base class for all errors raised by this package.

    Provides structured error information: a message, a code, optional
    details and the underlying exception when one was wrapped.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Stellar error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ConstructionError(StellarError):
    """Builder finalized without a required field, or with an invalid value."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CONSTRUCTION_ERROR, details, cause)


class EncodingError(StellarError):
    """A value violates a wire-format constraint while encoding."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENCODING_ERROR, details, cause)


class DecodingError(StellarError):
    """Input bytes are not a valid wire representation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UnsupportedOperationKind(DecodingError):
    """
    A protocol-valid operation tag that has no domain variant yet.

    The wire record decoded correctly; only the conversion into the
    domain Operation union is missing.
    """

    def __init__(self, operation_type: "OperationType", details: Optional[Dict[str, Any]] = None):
        self.operation_type = operation_type
        merged = {"operation_type": operation_type.name, **(details or {})}
        super().__init__(
            f"Operation kind {operation_type.name} ({int(operation_type)}) is not supported yet",
            ErrorCode.UNSUPPORTED_OPERATION,
            merged,
        )


class InvalidStrKeyError(StellarError):
    """StrKey text failed its version, length or checksum check."""

    def __init__(self, message: str = "Invalid StrKey",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_STRKEY, details, cause)


class InvalidKeyError(StellarError):
    """Raw key material of the wrong size or shape."""

    def __init__(self, message: str = "Invalid key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY, details, cause)


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
