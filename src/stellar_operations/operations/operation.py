"""
Operation union and its wire bridge.

An Operation holds exactly one variant. to_wire/from_wire convert between the
union and xdr.Operation; serialize/deserialize add the byte layer on top.
"""

from __future__ import annotations
import logging
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Tuple, Type, Union

from .. import xdr
from ..codec.options import CodecOptions
from ..crypto.keys import MuxedAccount, muxed_account_from_xdr, muxed_account_to_xdr
from ..runtime.errors import DecodingError, UnsupportedOperationKind
from .account_merge import AccountMergeOperation
from .base import BaseOperation
from .create_account import CreateAccountOperation
from .inflation import InflationOperation
from .path_payment_strict_receive import PathPaymentStrictReceiveOperation
from .payment import PaymentOperation

logger = logging.getLogger(__name__)

OperationVariant = Union[
    CreateAccountOperation,
    PaymentOperation,
    PathPaymentStrictReceiveOperation,
    AccountMergeOperation,
    InflationOperation,
]


class Operation:
    """
    Closed union over the modeled operation variants.

    VARIANTS maps each modeled OperationType to its variant class.
    UNSUPPORTED_OPERATION_TYPES lists the protocol kinds that decode at the
    wire level but have no variant yet; together the two cover every
    OperationType.
    """

    VARIANTS: ClassVar[Dict[xdr.OperationType, Type[BaseOperation]]] = {
        xdr.OperationType.CREATE_ACCOUNT: CreateAccountOperation,
        xdr.OperationType.PAYMENT: PaymentOperation,
        xdr.OperationType.PATH_PAYMENT_STRICT_RECEIVE: PathPaymentStrictReceiveOperation,
        xdr.OperationType.ACCOUNT_MERGE: AccountMergeOperation,
        xdr.OperationType.INFLATION: InflationOperation,
    }

    UNSUPPORTED_OPERATION_TYPES: ClassVar[FrozenSet[xdr.OperationType]] = frozenset({
        xdr.OperationType.MANAGE_SELL_OFFER,
        xdr.OperationType.CREATE_PASSIVE_SELL_OFFER,
        xdr.OperationType.SET_OPTIONS,
        xdr.OperationType.CHANGE_TRUST,
        xdr.OperationType.ALLOW_TRUST,
        xdr.OperationType.MANAGE_DATA,
        xdr.OperationType.BUMP_SEQUENCE,
        xdr.OperationType.MANAGE_BUY_OFFER,
        xdr.OperationType.PATH_PAYMENT_STRICT_SEND,
    })

    __slots__ = ("_inner",)

    def __init__(self, inner: OperationVariant):
        if type(inner) not in self.VARIANTS.values():
            raise TypeError(f"Operation cannot hold {type(inner).__name__}")
        object.__setattr__(self, "_inner", inner)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Operation is immutable")

    # Constructors

    @classmethod
    def wrap(cls, variant: OperationVariant) -> Operation:
        return cls(variant)

    @classmethod
    def new_create_account(cls, op: CreateAccountOperation) -> Operation:
        return cls(op)

    @classmethod
    def new_payment(cls, op: PaymentOperation) -> Operation:
        return cls(op)

    @classmethod
    def new_path_payment_strict_receive(cls, op: PathPaymentStrictReceiveOperation) -> Operation:
        return cls(op)

    @classmethod
    def new_account_merge(cls, op: AccountMergeOperation) -> Operation:
        return cls(op)

    @classmethod
    def new_inflation(cls, op: InflationOperation) -> Operation:
        return cls(op)

    # Narrowing

    @property
    def inner(self) -> OperationVariant:
        return self._inner

    @property
    def kind(self) -> xdr.OperationType:
        return self._inner.operation_type

    def as_create_account(self) -> Optional[CreateAccountOperation]:
        return self._inner if isinstance(self._inner, CreateAccountOperation) else None

    def is_create_account(self) -> bool:
        return self.as_create_account() is not None

    def as_payment(self) -> Optional[PaymentOperation]:
        return self._inner if isinstance(self._inner, PaymentOperation) else None

    def is_payment(self) -> bool:
        return self.as_payment() is not None

    def as_path_payment_strict_receive(self) -> Optional[PathPaymentStrictReceiveOperation]:
        return self._inner if isinstance(self._inner, PathPaymentStrictReceiveOperation) else None

    def is_path_payment_strict_receive(self) -> bool:
        return self.as_path_payment_strict_receive() is not None

    def as_account_merge(self) -> Optional[AccountMergeOperation]:
        return self._inner if isinstance(self._inner, AccountMergeOperation) else None

    def is_account_merge(self) -> bool:
        return self.as_account_merge() is not None

    def as_inflation(self) -> Optional[InflationOperation]:
        return self._inner if isinstance(self._inner, InflationOperation) else None

    def is_inflation(self) -> bool:
        return self.as_inflation() is not None

    @property
    def source_account(self) -> Optional[MuxedAccount]:
        """Per-operation source override; None means the transaction source."""
        return self._inner.source_account

    # Wire bridge

    def to_wire(self) -> xdr.Operation:
        """
        Convert to the wire record.

        Raises:
            EncodingError: If the source account or any payload field cannot be encoded
        """
        source_account = None
        if self.source_account is not None:
            source_account = muxed_account_to_xdr(self.source_account)
        body = self._inner.to_wire_body()
        return xdr.Operation(body=body, source_account=source_account)

    @classmethod
    def from_wire(cls, record: xdr.Operation) -> Operation:
        """
        Convert a wire record into the union.

        Raises:
            UnsupportedOperationKind: If the body tag has no variant yet
            DecodingError: If the source account or body violates a protocol constraint
        """
        source_account = None
        if record.source_account is not None:
            source_account = muxed_account_from_xdr(record.source_account)

        op_type = record.body.type
        variant_cls = cls.VARIANTS.get(op_type)
        if variant_cls is None:
            if op_type in cls.UNSUPPORTED_OPERATION_TYPES:
                logger.warning(f"Cannot convert {op_type.name} operation: kind not supported yet")
                raise UnsupportedOperationKind(op_type)
            raise DecodingError(f"Unknown operation type {op_type!r}")
        return cls(variant_cls.from_wire_body(source_account, record.body.value))

    # Binary entry points

    def serialize(self) -> bytes:
        """Encode to canonical XDR bytes."""
        return self.to_wire().to_xdr_bytes()

    @classmethod
    def deserialize(cls, buffer: bytes, options: Optional[CodecOptions] = None) -> Tuple[Operation, int]:
        """
        Decode one operation from the start of buffer.

        Args:
            buffer: Bytes holding one or more encoded operations
            options: Decoder limits

        Returns:
            Tuple of (operation, bytes consumed); bytes after the operation
            are left for the caller.
        """
        record, consumed = xdr.Operation.from_xdr_bytes(buffer, options)
        op = cls.from_wire(record)
        logger.debug(f"Decoded {op.kind.name} operation ({consumed} bytes)")
        return op, consumed

    def to_xdr_base64(self) -> str:
        return self.to_wire().to_xdr_base64()

    @classmethod
    def from_xdr_base64(cls, text: str, options: Optional[CodecOptions] = None) -> Operation:
        """Decode a base64 string holding exactly one operation."""
        return cls.from_wire(xdr.Operation.from_xdr_base64(text, options))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return self._inner == other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    def __repr__(self) -> str:
        return f"Operation({self._inner!r})"


__all__ = ["Operation", "OperationVariant"]
