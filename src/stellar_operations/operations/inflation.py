"""
Inflation: run the inflation process. The body carries no data.
"""

from __future__ import annotations
from typing import Any, ClassVar, Optional, Type

from .. import xdr
from ..crypto.keys import MuxedAccount
from ..runtime.errors import DecodingError
from .base import BaseOperation, BaseOperationBuilder


class InflationOperation(BaseOperation):
    operation_type: ClassVar[xdr.OperationType] = xdr.OperationType.INFLATION

    def to_wire_body(self) -> xdr.OperationBody:
        return xdr.OperationBody(self.operation_type)

    @classmethod
    def from_wire_body(cls, source_account: Optional[MuxedAccount],
                       body: Any = None) -> InflationOperation:
        if body is not None:
            raise DecodingError(f"Inflation body must be void, got {type(body).__name__}")
        return cls(source_account=source_account)


class InflationOperationBuilder(BaseOperationBuilder[InflationOperation]):
    """Builder for Inflation operations."""

    @property
    def op_cls(self) -> Type[InflationOperation]:
        return InflationOperation


__all__ = ["InflationOperation", "InflationOperationBuilder"]
