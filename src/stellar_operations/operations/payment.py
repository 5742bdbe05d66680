"""
Payment: send an amount of one asset to a destination account.
"""

from __future__ import annotations
from typing import ClassVar, Optional, Type, Union

from .. import xdr
from ..amount import Stroops
from ..asset import Asset
from ..crypto.keys import MuxedAccount, muxed_account_from_xdr, muxed_account_to_xdr
from .base import BaseOperation, BaseOperationBuilder


class PaymentOperation(BaseOperation):
    """Send amount of asset to destination."""

    operation_type: ClassVar[xdr.OperationType] = xdr.OperationType.PAYMENT

    destination: MuxedAccount
    asset: Asset
    amount: Stroops

    def to_wire_body(self) -> xdr.OperationBody:
        body = xdr.PaymentOp(
            destination=muxed_account_to_xdr(self.destination),
            asset=self.asset.to_xdr(),
            amount=self.amount.to_xdr_int64(),
        )
        return xdr.OperationBody(self.operation_type, body)

    @classmethod
    def from_wire_body(cls, source_account: Optional[MuxedAccount],
                       body: xdr.PaymentOp) -> PaymentOperation:
        return cls(
            source_account=source_account,
            destination=muxed_account_from_xdr(body.destination),
            asset=Asset.from_xdr(body.asset),
            amount=Stroops.from_xdr_int64(body.amount),
        )


class PaymentOperationBuilder(BaseOperationBuilder[PaymentOperation]):
    """Builder for Payment operations."""

    required_fields = ("destination", "asset", "amount")

    @property
    def op_cls(self) -> Type[PaymentOperation]:
        return PaymentOperation

    def with_destination(self, destination: Union[MuxedAccount, str]) -> PaymentOperationBuilder:
        """Set the recipient account."""
        return self.with_field("destination", destination)

    def with_asset(self, asset: Asset) -> PaymentOperationBuilder:
        """Set the asset to send."""
        return self.with_field("asset", asset)

    def with_amount(self, amount: Union[Stroops, int]) -> PaymentOperationBuilder:
        """Set the amount to send in stroops."""
        return self.with_field("amount", amount)


__all__ = ["PaymentOperation", "PaymentOperationBuilder"]
