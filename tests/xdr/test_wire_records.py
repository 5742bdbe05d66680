"""
Wire-level operation records.

Every protocol body decodes at this layer, including kinds the domain union
does not model, so the records are checked directly here.
"""

import pytest

from stellar_operations import DecodingError, EncodingError, xdr
from stellar_operations.xdr import OperationType

from helpers import int32, mk_keypair, mk_unmodeled_bodies


def key_bytes(seed: int) -> bytes:
    return mk_keypair(seed).public_key.as_bytes()


class TestOperationRecords:

    @pytest.mark.parametrize("op_type", sorted(mk_unmodeled_bodies()))
    def test_unmodeled_bodies_decode(self, op_type):
        """Bodies without a domain variant still decode to their wire records."""
        record = xdr.Operation(mk_unmodeled_bodies()[op_type])
        encoded = record.to_xdr_bytes()

        decoded, consumed = xdr.Operation.from_xdr_bytes(encoded)

        assert decoded == record
        assert consumed == len(encoded)

    def test_set_options_all_absent(self):
        encoded = xdr.SetOptionsOp().to_xdr_bytes()

        assert encoded == bytes(4 * 9)

    def test_manage_data_delete(self):
        """A missing data value encodes as an absent optional."""
        encoded = xdr.ManageDataOp("key").to_xdr_bytes()

        assert encoded == bytes.fromhex("00000003" "6b657900" "00000000")

    def test_manage_data_name_limit(self):
        with pytest.raises(EncodingError):
            xdr.ManageDataOp("n" * 65).to_xdr_bytes()

    def test_home_domain_limit(self):
        with pytest.raises(EncodingError):
            xdr.SetOptionsOp(home_domain="d" * 33).to_xdr_bytes()

    def test_path_over_five_rejected_on_decode(self):
        native = xdr.Asset(xdr.AssetType.NATIVE).to_xdr_bytes()
        muxed = int32(0) + key_bytes(1)
        body = (
            native + bytes(8) + muxed + native + bytes(8)
            + int32(6) + native * 6
        )

        with pytest.raises(DecodingError):
            xdr.PathPaymentStrictReceiveOp.from_xdr_bytes(body)


class TestOperationBody:

    def test_void_arm(self):
        assert xdr.OperationBody(OperationType.INFLATION).to_xdr_bytes() == int32(9)

    def test_void_arm_rejects_value(self):
        with pytest.raises(EncodingError):
            xdr.OperationBody(OperationType.INFLATION, xdr.BumpSequenceOp(1)).to_xdr_bytes()

    def test_arm_type_checked(self):
        with pytest.raises(EncodingError):
            xdr.OperationBody(OperationType.PAYMENT, xdr.BumpSequenceOp(1)).to_xdr_bytes()

    def test_account_merge_arm_is_muxed_account(self):
        dest = xdr.MuxedAccount(xdr.CryptoKeyType.ED25519, ed25519=key_bytes(1))

        encoded = xdr.OperationBody(OperationType.ACCOUNT_MERGE, dest).to_xdr_bytes()

        assert encoded == int32(8) + int32(0) + key_bytes(1)

    def test_unknown_discriminant(self):
        with pytest.raises(DecodingError, match="OperationType"):
            xdr.OperationBody.from_xdr_bytes(int32(99))


class TestKeyRecords:

    def test_muxed_account_rejects_other_key_types(self):
        encoded = int32(xdr.CryptoKeyType.PRE_AUTH_TX) + key_bytes(1)

        with pytest.raises(DecodingError):
            xdr.MuxedAccount.from_xdr_bytes(encoded)

    def test_muxed_account_requires_body(self):
        with pytest.raises(EncodingError):
            xdr.MuxedAccount(xdr.CryptoKeyType.MUXED_ED25519).to_xdr_bytes()

    def test_med25519_layout(self):
        med = xdr.MuxedAccountMed25519(1, key_bytes(1))
        record = xdr.MuxedAccount(xdr.CryptoKeyType.MUXED_ED25519, med25519=med)

        encoded = record.to_xdr_bytes()

        assert encoded[:4] == int32(0x100)
        assert encoded[4:12] == bytes.fromhex("0000000000000001")
        assert encoded[12:] == key_bytes(1)


class TestAssetRecords:

    def test_alphanum12_layout(self):
        issuer = xdr.PublicKey(key_bytes(1))
        asset = xdr.Asset(xdr.AssetType.CREDIT_ALPHANUM12, xdr.AlphaNum(b"LONGCODE\x00\x00\x00\x00", issuer))

        encoded = asset.to_xdr_bytes()

        assert encoded[:4] == int32(2)
        assert encoded[4:16] == b"LONGCODE\x00\x00\x00\x00"
        assert len(encoded) == 4 + 12 + 36

    def test_code_size_enforced(self):
        issuer = xdr.PublicKey(key_bytes(1))

        with pytest.raises(EncodingError):
            xdr.Asset(xdr.AssetType.CREDIT_ALPHANUM4, xdr.AlphaNum(b"TOOLONG", issuer)).to_xdr_bytes()

    def test_allow_trust_asset_cannot_be_native(self):
        with pytest.raises(DecodingError):
            xdr.AllowTrustAsset.from_xdr_bytes(int32(0))

    def test_from_base64_rejects_trailing_bytes(self):
        text = xdr.Asset(xdr.AssetType.NATIVE).to_xdr_base64()

        assert xdr.Asset.from_xdr_base64(text) == xdr.Asset(xdr.AssetType.NATIVE)
        with pytest.raises(DecodingError):
            xdr.Asset.from_xdr_base64("AAAAAAAAAAA=")
