"""
Operation variants, builders and the Operation union.

Each module-level function returns a fresh builder for one operation kind:

    op = payment().with_destination(dest).with_asset(Asset.native()).with_amount(10).build_operation()
"""

from .base import BaseOperation, BaseOperationBuilder
from .create_account import CreateAccountOperation, CreateAccountOperationBuilder
from .payment import PaymentOperation, PaymentOperationBuilder
from .path_payment_strict_receive import (
    PathPaymentStrictReceiveOperation,
    PathPaymentStrictReceiveOperationBuilder,
)
from .account_merge import AccountMergeOperation, AccountMergeOperationBuilder
from .inflation import InflationOperation, InflationOperationBuilder
from .operation import Operation, OperationVariant


def create_account() -> CreateAccountOperationBuilder:
    return CreateAccountOperationBuilder()


def payment() -> PaymentOperationBuilder:
    return PaymentOperationBuilder()


def path_payment_strict_receive() -> PathPaymentStrictReceiveOperationBuilder:
    return PathPaymentStrictReceiveOperationBuilder()


def account_merge() -> AccountMergeOperationBuilder:
    return AccountMergeOperationBuilder()


def inflation() -> InflationOperationBuilder:
    return InflationOperationBuilder()


__all__ = [
    "BaseOperation",
    "BaseOperationBuilder",
    "CreateAccountOperation",
    "CreateAccountOperationBuilder",
    "PaymentOperation",
    "PaymentOperationBuilder",
    "PathPaymentStrictReceiveOperation",
    "PathPaymentStrictReceiveOperationBuilder",
    "AccountMergeOperation",
    "AccountMergeOperationBuilder",
    "InflationOperation",
    "InflationOperationBuilder",
    "Operation",
    "OperationVariant",
    "create_account",
    "payment",
    "path_payment_strict_receive",
    "account_merge",
    "inflation",
]
