"""
PathPaymentStrictReceive: deliver an exact amount, converting through a path
of intermediate assets while spending at most send_max.
"""

from __future__ import annotations
from typing import ClassVar, Iterable, Optional, Tuple, Type, Union

from .. import xdr
from ..amount import Stroops
from ..asset import Asset
from ..crypto.keys import MuxedAccount, muxed_account_from_xdr, muxed_account_to_xdr
from ..runtime.errors import EncodingError
from .base import BaseOperation, BaseOperationBuilder


class PathPaymentStrictReceiveOperation(BaseOperation):
    """
    Path payment where the destination receives exactly destination_amount.

    path lists the intermediate assets, at most five; the limit is enforced
    when encoding.
    """

    operation_type: ClassVar[xdr.OperationType] = xdr.OperationType.PATH_PAYMENT_STRICT_RECEIVE

    send_asset: Asset
    send_max: Stroops
    destination: MuxedAccount
    destination_asset: Asset
    destination_amount: Stroops
    path: Tuple[Asset, ...] = ()

    def to_wire_body(self) -> xdr.OperationBody:
        if len(self.path) > xdr.MAX_PATH_LENGTH:
            raise EncodingError(
                f"Path of {len(self.path)} assets exceeds maximum {xdr.MAX_PATH_LENGTH}",
                details={"field": "path"},
            )
        body = xdr.PathPaymentStrictReceiveOp(
            send_asset=self.send_asset.to_xdr(),
            send_max=self.send_max.to_xdr_int64(),
            destination=muxed_account_to_xdr(self.destination),
            dest_asset=self.destination_asset.to_xdr(),
            dest_amount=self.destination_amount.to_xdr_int64(),
            path=tuple(asset.to_xdr() for asset in self.path),
        )
        return xdr.OperationBody(self.operation_type, body)

    @classmethod
    def from_wire_body(cls, source_account: Optional[MuxedAccount],
                       body: xdr.PathPaymentStrictReceiveOp) -> PathPaymentStrictReceiveOperation:
        return cls(
            source_account=source_account,
            send_asset=Asset.from_xdr(body.send_asset),
            send_max=Stroops.from_xdr_int64(body.send_max),
            destination=muxed_account_from_xdr(body.destination),
            destination_asset=Asset.from_xdr(body.dest_asset),
            destination_amount=Stroops.from_xdr_int64(body.dest_amount),
            path=tuple(Asset.from_xdr(asset) for asset in body.path),
        )


class PathPaymentStrictReceiveOperationBuilder(BaseOperationBuilder[PathPaymentStrictReceiveOperation]):
    """Builder for PathPaymentStrictReceive operations."""

    required_fields = ("send_asset", "send_max", "destination", "destination_asset", "destination_amount")

    @property
    def op_cls(self) -> Type[PathPaymentStrictReceiveOperation]:
        return PathPaymentStrictReceiveOperation

    def with_send_asset(self, asset: Asset) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the asset debited from the source."""
        return self.with_field("send_asset", asset)

    def with_send_max(self, amount: Union[Stroops, int]) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the most the source is willing to spend."""
        return self.with_field("send_max", amount)

    def with_destination(self, destination: Union[MuxedAccount, str]) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the recipient account."""
        return self.with_field("destination", destination)

    def with_destination_asset(self, asset: Asset) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the asset the recipient receives."""
        return self.with_field("destination_asset", asset)

    def with_destination_amount(self, amount: Union[Stroops, int]) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the exact amount the recipient receives."""
        return self.with_field("destination_amount", amount)

    def with_path(self, path: Iterable[Asset]) -> PathPaymentStrictReceiveOperationBuilder:
        """Set the intermediate assets."""
        return self.with_field("path", tuple(path))

    def add_asset_to_path(self, asset: Asset) -> PathPaymentStrictReceiveOperationBuilder:
        """Append one intermediate asset."""
        return self.with_field("path", tuple(self._fields.get("path", ())) + (asset,))


__all__ = ["PathPaymentStrictReceiveOperation", "PathPaymentStrictReceiveOperationBuilder"]
