"""
Test the structured error hierarchy.
"""

import pytest

from stellar_operations import (
    ConstructionError,
    DecodingError,
    EncodingError,
    ErrorCode,
    InvalidKeyError,
    InvalidStrKeyError,
    StellarError,
    UnsupportedOperationKind,
)
from stellar_operations.xdr import OperationType


def test_every_error_is_a_stellar_error():
    """All package errors share one base class."""
    for cls in (ConstructionError, EncodingError, DecodingError, InvalidKeyError, InvalidStrKeyError):
        assert issubclass(cls, StellarError)
    assert issubclass(UnsupportedOperationKind, DecodingError)


@pytest.mark.parametrize("cls,code", [
    (ConstructionError, ErrorCode.CONSTRUCTION_ERROR),
    (EncodingError, ErrorCode.ENCODING_ERROR),
    (DecodingError, ErrorCode.DECODING_ERROR),
    (InvalidKeyError, ErrorCode.INVALID_KEY),
    (InvalidStrKeyError, ErrorCode.INVALID_STRKEY),
])
def test_error_codes(cls, code):
    assert cls("boom").code == code


def test_string_form():
    cause = ValueError("bad value")
    err = EncodingError("cannot encode", details={"field": "amount"}, cause=cause)

    assert str(err) == "[ENCODING_ERROR] cannot encode | Details: {'field': 'amount'} | Caused by: bad value"


def test_to_dict():
    err = ConstructionError("missing", details={"missing": ["destination"]})

    assert err.to_dict() == {
        "code": ErrorCode.CONSTRUCTION_ERROR.value,
        "message": "missing",
        "details": {"missing": ["destination"]},
    }


def test_unsupported_operation_kind():
    err = UnsupportedOperationKind(OperationType.MANAGE_DATA)

    assert err.operation_type == OperationType.MANAGE_DATA
    assert err.code == ErrorCode.UNSUPPORTED_OPERATION
    assert err.details == {"operation_type": "MANAGE_DATA"}
    assert "MANAGE_DATA (10)" in err.message


def test_can_catch_as_decoding_error():
    with pytest.raises(DecodingError):
        raise UnsupportedOperationKind(OperationType.BUMP_SEQUENCE)
