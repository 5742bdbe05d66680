"""
Tests for the operation builders.

Verifies required-field checks, single use, text account parsing and the
immutability of the variants the builders produce.
"""

import pytest
from pydantic import ValidationError

from stellar_operations import (
    AccountMergeOperation,
    Asset,
    ConstructionError,
    CreateAccountOperation,
    ErrorCode,
    InflationOperation,
    MuxedEd25519PublicKey,
    Operation,
    PathPaymentStrictReceiveOperation,
    PublicKey,
    Stroops,
    account_merge,
    create_account,
    inflation,
    path_payment_strict_receive,
    payment,
)

from helpers import mk_keypair

ACCOUNT_ID_0 = "GDQNY3PBOJOKYZSRMK2S7LHHGWZIUISD4QORETLMXEWXBI7KFZZMKTL3"


class TestRequiredFields:
    """build() refuses to produce a variant with unset required fields."""

    def test_empty_create_account(self):
        with pytest.raises(ConstructionError) as exc_info:
            create_account().build()

        err = exc_info.value
        assert err.code == ErrorCode.CONSTRUCTION_ERROR
        assert err.details["missing"] == ["destination", "starting_balance"]
        assert "destination" in err.message

    def test_payment_missing_amount(self, keypair0):
        builder = payment().with_destination(keypair0.public_key).with_asset(Asset.native())

        assert builder.missing_fields() == ["amount"]
        with pytest.raises(ConstructionError) as exc_info:
            builder.build()

        assert exc_info.value.details["missing"] == ["amount"]

    def test_path_payment_missing_fields(self, keypair0):
        builder = path_payment_strict_receive().with_send_asset(Asset.native()).with_destination(keypair0.public_key)

        assert builder.missing_fields() == ["send_max", "destination_asset", "destination_amount"]

    def test_path_is_optional(self, keypair0):
        op = (
            path_payment_strict_receive()
            .with_send_asset(Asset.native())
            .with_send_max(100)
            .with_destination(keypair0.public_key)
            .with_destination_asset(Asset.native())
            .with_destination_amount(90)
            .build()
        )

        assert op.path == ()

    def test_account_merge_requires_destination(self):
        with pytest.raises(ConstructionError):
            account_merge().build()

    def test_none_counts_as_missing(self):
        with pytest.raises(ConstructionError) as exc_info:
            account_merge().with_destination(None).build()

        assert exc_info.value.details["missing"] == ["destination"]

    def test_inflation_has_no_required_fields(self):
        op = inflation().build()

        assert isinstance(op, InflationOperation)
        assert op.source_account is None


class TestBuilderLifecycle:
    """Builders are single use and chainable."""

    def test_build_twice_fails(self):
        builder = inflation()
        builder.build()

        with pytest.raises(ConstructionError, match="already been built"):
            builder.build()

    def test_set_after_build_fails(self, keypair0):
        builder = account_merge().with_destination(keypair0.public_key)
        builder.build()

        with pytest.raises(ConstructionError):
            builder.with_source_account(keypair0.public_key)

    def test_failed_build_can_be_completed(self, keypair0):
        """A build rejected for missing fields leaves the builder usable."""
        builder = account_merge()
        with pytest.raises(ConstructionError):
            builder.build()

        op = builder.with_destination(keypair0.public_key).build()

        assert op.destination == keypair0.public_key

    def test_build_returns_variant(self, keypair0):
        op = create_account().with_destination(keypair0.public_key).with_starting_balance(10).build()

        assert isinstance(op, CreateAccountOperation)
        assert op.starting_balance == Stroops(10)

    def test_build_operation_wraps_variant(self, keypair0):
        op = account_merge().with_destination(keypair0.public_key).build_operation()

        assert isinstance(op, Operation)
        assert isinstance(op.inner, AccountMergeOperation)

    def test_add_asset_to_path_appends(self, keypair0, usd_asset, long_asset):
        op = (
            path_payment_strict_receive()
            .with_send_asset(Asset.native())
            .with_send_max(100)
            .with_destination(keypair0.public_key)
            .with_destination_asset(usd_asset)
            .with_destination_amount(90)
            .add_asset_to_path(long_asset)
            .add_asset_to_path(Asset.native())
            .build()
        )

        assert isinstance(op, PathPaymentStrictReceiveOperation)
        assert op.path == (long_asset, Asset.native())

    def test_repr_lists_set_fields(self, keypair0):
        builder = payment().with_destination(keypair0.public_key)

        assert "destination" in repr(builder)


class TestAccountInputs:
    """Account fields accept key objects or their text forms."""

    def test_source_defaults_to_none(self, keypair0):
        op = payment().with_destination(keypair0.public_key).with_asset(Asset.native()).with_amount(1).build()

        assert op.source_account is None

    def test_source_account_from_g_address(self):
        op = inflation().with_source_account(ACCOUNT_ID_0).build()

        assert isinstance(op.source_account, PublicKey)
        assert op.source_account.account_id == ACCOUNT_ID_0

    def test_source_account_from_m_address(self, keypair0):
        muxed = keypair0.public_key.to_muxed_account(12345)

        op = inflation().with_source_account(muxed.account_id).build()

        assert isinstance(op.source_account, MuxedEd25519PublicKey)
        assert op.source_account == muxed

    def test_destination_from_text(self):
        op = create_account().with_destination(ACCOUNT_ID_0).with_starting_balance(1).build()

        assert op.destination.account_id == ACCOUNT_ID_0

    def test_invalid_address_text(self):
        builder = create_account().with_destination("GNOTANADDRESS").with_starting_balance(1)

        with pytest.raises(ConstructionError) as exc_info:
            builder.build()

        assert isinstance(exc_info.value.cause, ValidationError)

    def test_create_account_rejects_muxed_destination(self, keypair0):
        """New accounts are always plain account ids."""
        muxed = keypair0.public_key.to_muxed_account(1)

        with pytest.raises(ConstructionError):
            create_account().with_destination(muxed).with_starting_balance(1).build()

    def test_amount_rejects_float(self, keypair0):
        builder = payment().with_destination(keypair0.public_key).with_asset(Asset.native()).with_amount(1.5)

        with pytest.raises(ConstructionError):
            builder.build()

    def test_amount_from_decimal_text(self, keypair0):
        op = (
            payment()
            .with_destination(keypair0.public_key)
            .with_asset(Asset.native())
            .with_amount(Stroops.from_amount("12.5"))
            .build()
        )

        assert op.amount.value == 125_000_000


class TestVariantsAreImmutable:

    def test_cannot_reassign_field(self, keypair0):
        op = account_merge().with_destination(keypair0.public_key).build()

        with pytest.raises(ValidationError):
            op.destination = mk_keypair(9).public_key

    def test_equal_variants_hash_equal(self, keypair0, usd_asset):
        def build():
            return payment().with_destination(keypair0.public_key).with_asset(usd_asset).with_amount(7).build()

        assert build() == build()
        assert hash(build()) == hash(build())
