"""
CreateAccount: create and fund a new account.
"""

from __future__ import annotations
from typing import ClassVar, Optional, Type, Union

from .. import xdr
from ..amount import Stroops
from ..crypto.keys import MuxedAccount, PublicKey
from .base import BaseOperation, BaseOperationBuilder


class CreateAccountOperation(BaseOperation):
    """Create destination and transfer starting_balance lumens to it."""

    operation_type: ClassVar[xdr.OperationType] = xdr.OperationType.CREATE_ACCOUNT

    destination: PublicKey
    starting_balance: Stroops

    def to_wire_body(self) -> xdr.OperationBody:
        body = xdr.CreateAccountOp(
            destination=self.destination.to_xdr_public_key(),
            starting_balance=self.starting_balance.to_xdr_int64(),
        )
        return xdr.OperationBody(self.operation_type, body)

    @classmethod
    def from_wire_body(cls, source_account: Optional[MuxedAccount],
                       body: xdr.CreateAccountOp) -> CreateAccountOperation:
        return cls(
            source_account=source_account,
            destination=PublicKey.from_xdr_public_key(body.destination),
            starting_balance=Stroops.from_xdr_int64(body.starting_balance),
        )


class CreateAccountOperationBuilder(BaseOperationBuilder[CreateAccountOperation]):
    """Builder for CreateAccount operations."""

    required_fields = ("destination", "starting_balance")

    @property
    def op_cls(self) -> Type[CreateAccountOperation]:
        return CreateAccountOperation

    def with_destination(self, destination: Union[PublicKey, str]) -> CreateAccountOperationBuilder:
        """Set the account to create."""
        return self.with_field("destination", destination)

    def with_starting_balance(self, amount: Union[Stroops, int]) -> CreateAccountOperationBuilder:
        """Set the initial balance in stroops."""
        return self.with_field("starting_balance", amount)


__all__ = ["CreateAccountOperation", "CreateAccountOperationBuilder"]
