"""
Error model: codes, hierarchy and dictionary round trips.
"""

import pytest

from multisig_wallet.runtime.errors import (
    ERROR_CODE_MAP,
    AddressCannotBeZero,
    CannotReinitialize,
    ErrorCode,
    ExecutionError,
    IncorrectSignerOrdering,
    InitError,
    InsufficientApprovals,
    InsufficientAssetAmount,
    NotInitialized,
    SignatureError,
    SignatureRecoveryFailed,
    ThresholdCannotBeZero,
    WalletError,
    WeightingCannotBeZero,
)


@pytest.mark.parametrize("error_class,base", [
    (CannotReinitialize, InitError),
    (ThresholdCannotBeZero, InitError),
    (AddressCannotBeZero, InitError),
    (WeightingCannotBeZero, InitError),
    (NotInitialized, ExecutionError),
    (InsufficientApprovals, ExecutionError),
    (InsufficientAssetAmount, ExecutionError),
    (IncorrectSignerOrdering, ExecutionError),
    (SignatureRecoveryFailed, SignatureError),
])
def test_taxonomy(error_class, base):
    error = error_class()
    assert isinstance(error, base)
    assert isinstance(error, WalletError)
    assert ERROR_CODE_MAP[error.code] is error_class


def test_codes_are_distinct():
    codes = [cls().code for cls in ERROR_CODE_MAP.values()]
    assert len(codes) == len(set(codes))


def test_str_includes_code_details_and_cause():
    cause = ValueError("bad point")
    error = SignatureRecoveryFailed(details={"index": 2}, cause=cause)
    text = str(error)
    assert text.startswith("[SIGNATURE_RECOVERY_FAILED]")
    assert "index" in text
    assert "bad point" in text


def test_dict_round_trip_restores_class():
    error = InsufficientApprovals(details={"approvals": 1, "threshold": 2})
    data = error.to_dict()
    assert data["code"] == ErrorCode.INSUFFICIENT_APPROVALS

    restored = WalletError.from_dict(data)
    assert isinstance(restored, InsufficientApprovals)
    assert restored.details == {"approvals": 1, "threshold": 2}


def test_unknown_code_from_dict():
    restored = WalletError.from_dict({"code": ErrorCode.INTERNAL, "message": "boom"})
    assert type(restored) is WalletError
    assert restored.code == ErrorCode.INTERNAL
