"""
Operation wire records.

    struct Operation {
        MuxedAccount* sourceAccount;
        union switch (OperationType type) { ... } body;
    };

Every protocol-defined body is decodable here, including kinds that the
domain layer does not model yet.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Type

from ..codec.reader import XdrReader
from ..codec.writer import XdrWriter
from ..runtime.errors import EncodingError
from .asset import AllowTrustAsset, Asset, Price
from .base import XdrRecord
from .enums import OperationType, read_enum
from .keys import MuxedAccount, PublicKey, Signer

MAX_PATH_LENGTH = 5
HOME_DOMAIN_MAX_LENGTH = 32
DATA_NAME_MAX_LENGTH = 64
DATA_VALUE_MAX_LENGTH = 64


def _pack_asset(writer: XdrWriter, asset: Asset) -> None:
    asset.pack(writer)


@dataclass(frozen=True)
class CreateAccountOp(XdrRecord):
    destination: PublicKey
    starting_balance: int

    def pack(self, writer: XdrWriter) -> None:
        self.destination.pack(writer)
        writer.int64(self.starting_balance)

    @classmethod
    def unpack(cls, reader: XdrReader) -> CreateAccountOp:
        destination = PublicKey.unpack(reader)
        return cls(destination, reader.int64())


@dataclass(frozen=True)
class PaymentOp(XdrRecord):
    destination: MuxedAccount
    asset: Asset
    amount: int

    def pack(self, writer: XdrWriter) -> None:
        self.destination.pack(writer)
        self.asset.pack(writer)
        writer.int64(self.amount)

    @classmethod
    def unpack(cls, reader: XdrReader) -> PaymentOp:
        destination = MuxedAccount.unpack(reader)
        asset = Asset.unpack(reader)
        return cls(destination, asset, reader.int64())


@dataclass(frozen=True)
class PathPaymentStrictReceiveOp(XdrRecord):
    send_asset: Asset
    send_max: int
    destination: MuxedAccount
    dest_asset: Asset
    dest_amount: int
    path: Tuple[Asset, ...] = ()

    def pack(self, writer: XdrWriter) -> None:
        self.send_asset.pack(writer)
        writer.int64(self.send_max)
        self.destination.pack(writer)
        self.dest_asset.pack(writer)
        writer.int64(self.dest_amount)
        writer.array_var(self.path, _pack_asset, MAX_PATH_LENGTH)

    @classmethod
    def unpack(cls, reader: XdrReader) -> PathPaymentStrictReceiveOp:
        send_asset = Asset.unpack(reader)
        send_max = reader.int64()
        destination = MuxedAccount.unpack(reader)
        dest_asset = Asset.unpack(reader)
        dest_amount = reader.int64()
        path = tuple(reader.array_var(Asset.unpack, MAX_PATH_LENGTH))
        return cls(send_asset, send_max, destination, dest_asset, dest_amount, path)


@dataclass(frozen=True)
class PathPaymentStrictSendOp(XdrRecord):
    send_asset: Asset
    send_amount: int
    destination: MuxedAccount
    dest_asset: Asset
    dest_min: int
    path: Tuple[Asset, ...] = ()

    def pack(self, writer: XdrWriter) -> None:
        self.send_asset.pack(writer)
        writer.int64(self.send_amount)
        self.destination.pack(writer)
        self.dest_asset.pack(writer)
        writer.int64(self.dest_min)
        writer.array_var(self.path, _pack_asset, MAX_PATH_LENGTH)

    @classmethod
    def unpack(cls, reader: XdrReader) -> PathPaymentStrictSendOp:
        send_asset = Asset.unpack(reader)
        send_amount = reader.int64()
        destination = MuxedAccount.unpack(reader)
        dest_asset = Asset.unpack(reader)
        dest_min = reader.int64()
        path = tuple(reader.array_var(Asset.unpack, MAX_PATH_LENGTH))
        return cls(send_asset, send_amount, destination, dest_asset, dest_min, path)


@dataclass(frozen=True)
class ManageSellOfferOp(XdrRecord):
    selling: Asset
    buying: Asset
    amount: int
    price: Price
    offer_id: int

    def pack(self, writer: XdrWriter) -> None:
        self.selling.pack(writer)
        self.buying.pack(writer)
        writer.int64(self.amount)
        self.price.pack(writer)
        writer.int64(self.offer_id)

    @classmethod
    def unpack(cls, reader: XdrReader) -> ManageSellOfferOp:
        selling = Asset.unpack(reader)
        buying = Asset.unpack(reader)
        amount = reader.int64()
        price = Price.unpack(reader)
        return cls(selling, buying, amount, price, reader.int64())


@dataclass(frozen=True)
class ManageBuyOfferOp(XdrRecord):
    selling: Asset
    buying: Asset
    buy_amount: int
    price: Price
    offer_id: int

    def pack(self, writer: XdrWriter) -> None:
        self.selling.pack(writer)
        self.buying.pack(writer)
        writer.int64(self.buy_amount)
        self.price.pack(writer)
        writer.int64(self.offer_id)

    @classmethod
    def unpack(cls, reader: XdrReader) -> ManageBuyOfferOp:
        selling = Asset.unpack(reader)
        buying = Asset.unpack(reader)
        buy_amount = reader.int64()
        price = Price.unpack(reader)
        return cls(selling, buying, buy_amount, price, reader.int64())


@dataclass(frozen=True)
class CreatePassiveSellOfferOp(XdrRecord):
    selling: Asset
    buying: Asset
    amount: int
    price: Price

    def pack(self, writer: XdrWriter) -> None:
        self.selling.pack(writer)
        self.buying.pack(writer)
        writer.int64(self.amount)
        self.price.pack(writer)

    @classmethod
    def unpack(cls, reader: XdrReader) -> CreatePassiveSellOfferOp:
        selling = Asset.unpack(reader)
        buying = Asset.unpack(reader)
        amount = reader.int64()
        return cls(selling, buying, amount, Price.unpack(reader))


def _read_uint32(reader: XdrReader) -> int:
    return reader.uint32()


def _write_uint32(writer: XdrWriter, v: int) -> None:
    writer.uint32(v)


@dataclass(frozen=True)
class SetOptionsOp(XdrRecord):
    inflation_dest: Optional[PublicKey] = None
    clear_flags: Optional[int] = None
    set_flags: Optional[int] = None
    master_weight: Optional[int] = None
    low_threshold: Optional[int] = None
    med_threshold: Optional[int] = None
    high_threshold: Optional[int] = None
    home_domain: Optional[str] = None
    signer: Optional[Signer] = None

    def pack(self, writer: XdrWriter) -> None:
        writer.optional(self.inflation_dest, lambda w, v: v.pack(w))
        for value in (self.clear_flags, self.set_flags, self.master_weight,
                      self.low_threshold, self.med_threshold, self.high_threshold):
            writer.optional(value, _write_uint32)
        writer.optional(self.home_domain, lambda w, v: w.string(v, HOME_DOMAIN_MAX_LENGTH))
        writer.optional(self.signer, lambda w, v: v.pack(w))

    @classmethod
    def unpack(cls, reader: XdrReader) -> SetOptionsOp:
        inflation_dest = reader.optional(PublicKey.unpack)
        clear_flags = reader.optional(_read_uint32)
        set_flags = reader.optional(_read_uint32)
        master_weight = reader.optional(_read_uint32)
        low_threshold = reader.optional(_read_uint32)
        med_threshold = reader.optional(_read_uint32)
        high_threshold = reader.optional(_read_uint32)
        home_domain = reader.optional(lambda r: r.string(HOME_DOMAIN_MAX_LENGTH))
        signer = reader.optional(Signer.unpack)
        return cls(inflation_dest, clear_flags, set_flags, master_weight, low_threshold,
                   med_threshold, high_threshold, home_domain, signer)


@dataclass(frozen=True)
class ChangeTrustOp(XdrRecord):
    line: Asset
    limit: int

    def pack(self, writer: XdrWriter) -> None:
        self.line.pack(writer)
        writer.int64(self.limit)

    @classmethod
    def unpack(cls, reader: XdrReader) -> ChangeTrustOp:
        line = Asset.unpack(reader)
        return cls(line, reader.int64())


@dataclass(frozen=True)
class AllowTrustOp(XdrRecord):
    trustor: PublicKey
    asset: AllowTrustAsset
    authorize: int

    def pack(self, writer: XdrWriter) -> None:
        self.trustor.pack(writer)
        self.asset.pack(writer)
        writer.uint32(self.authorize)

    @classmethod
    def unpack(cls, reader: XdrReader) -> AllowTrustOp:
        trustor = PublicKey.unpack(reader)
        asset = AllowTrustAsset.unpack(reader)
        return cls(trustor, asset, reader.uint32())


@dataclass(frozen=True)
class ManageDataOp(XdrRecord):
    data_name: str
    data_value: Optional[bytes] = None

    def pack(self, writer: XdrWriter) -> None:
        writer.string(self.data_name, DATA_NAME_MAX_LENGTH)
        writer.optional(self.data_value, lambda w, v: w.opaque_var(v, DATA_VALUE_MAX_LENGTH))

    @classmethod
    def unpack(cls, reader: XdrReader) -> ManageDataOp:
        data_name = reader.string(DATA_NAME_MAX_LENGTH)
        return cls(data_name, reader.optional(lambda r: r.opaque_var(DATA_VALUE_MAX_LENGTH)))


@dataclass(frozen=True)
class BumpSequenceOp(XdrRecord):
    bump_to: int

    def pack(self, writer: XdrWriter) -> None:
        writer.int64(self.bump_to)

    @classmethod
    def unpack(cls, reader: XdrReader) -> BumpSequenceOp:
        return cls(reader.int64())


# Arm type per discriminant; None marks a void arm.
BODY_ARMS: Dict[OperationType, Optional[Type[Any]]] = {
    OperationType.CREATE_ACCOUNT: CreateAccountOp,
    OperationType.PAYMENT: PaymentOp,
    OperationType.PATH_PAYMENT_STRICT_RECEIVE: PathPaymentStrictReceiveOp,
    OperationType.MANAGE_SELL_OFFER: ManageSellOfferOp,
    OperationType.CREATE_PASSIVE_SELL_OFFER: CreatePassiveSellOfferOp,
    OperationType.SET_OPTIONS: SetOptionsOp,
    OperationType.CHANGE_TRUST: ChangeTrustOp,
    OperationType.ALLOW_TRUST: AllowTrustOp,
    OperationType.ACCOUNT_MERGE: MuxedAccount,
    OperationType.INFLATION: None,
    OperationType.MANAGE_DATA: ManageDataOp,
    OperationType.BUMP_SEQUENCE: BumpSequenceOp,
    OperationType.MANAGE_BUY_OFFER: ManageBuyOfferOp,
    OperationType.PATH_PAYMENT_STRICT_SEND: PathPaymentStrictSendOp,
}


@dataclass(frozen=True)
class OperationBody(XdrRecord):
    """Tagged operation body; value is the arm record, or None for a void arm."""
    type: OperationType
    value: Any = None

    def pack(self, writer: XdrWriter) -> None:
        try:
            arm = BODY_ARMS[self.type]
        except KeyError:
            raise EncodingError(f"Unknown operation type {self.type!r}")
        if arm is None:
            if self.value is not None:
                raise EncodingError(f"{self.type.name} body carries no data, got {type(self.value).__name__}")
        elif not isinstance(self.value, arm):
            raise EncodingError(
                f"{self.type.name} body expects {arm.__name__}, got {type(self.value).__name__}"
            )
        writer.int32(self.type)
        if arm is not None:
            self.value.pack(writer)

    @classmethod
    def unpack(cls, reader: XdrReader) -> OperationBody:
        op_type = read_enum(reader, OperationType)
        arm = BODY_ARMS[op_type]
        if arm is None:
            return cls(op_type)
        return cls(op_type, arm.unpack(reader))


@dataclass(frozen=True)
class Operation(XdrRecord):
    body: OperationBody
    source_account: Optional[MuxedAccount] = field(default=None)

    def pack(self, writer: XdrWriter) -> None:
        writer.optional(self.source_account, lambda w, v: v.pack(w))
        self.body.pack(writer)

    @classmethod
    def unpack(cls, reader: XdrReader) -> Operation:
        source_account = reader.optional(MuxedAccount.unpack)
        return cls(OperationBody.unpack(reader), source_account)


__all__ = [
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
    "BODY_ARMS",
    "OperationBody",
    "Operation",
]
