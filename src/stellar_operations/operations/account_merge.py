"""
AccountMerge: transfer the source account's lumens to destination and
remove the source account from the ledger.
"""

from __future__ import annotations
from typing import ClassVar, Optional, Type, Union

from .. import xdr
from ..crypto.keys import MuxedAccount, muxed_account_from_xdr, muxed_account_to_xdr
from .base import BaseOperation, BaseOperationBuilder


class AccountMergeOperation(BaseOperation):
    operation_type: ClassVar[xdr.OperationType] = xdr.OperationType.ACCOUNT_MERGE

    destination: MuxedAccount

    def to_wire_body(self) -> xdr.OperationBody:
        return xdr.OperationBody(self.operation_type, muxed_account_to_xdr(self.destination))

    @classmethod
    def from_wire_body(cls, source_account: Optional[MuxedAccount],
                       body: xdr.MuxedAccount) -> AccountMergeOperation:
        return cls(source_account=source_account, destination=muxed_account_from_xdr(body))


class AccountMergeOperationBuilder(BaseOperationBuilder[AccountMergeOperation]):
    """Builder for AccountMerge operations."""

    required_fields = ("destination",)

    @property
    def op_cls(self) -> Type[AccountMergeOperation]:
        return AccountMergeOperation

    def with_destination(self, destination: Union[MuxedAccount, str]) -> AccountMergeOperationBuilder:
        """Set the account receiving the merged balance."""
        return self.with_field("destination", destination)


__all__ = ["AccountMergeOperation", "AccountMergeOperationBuilder"]
