"""
Message formatting: envelope and prefix stages.
"""

import hashlib

import pytest

from helpers import mk_b256

from multisig_wallet.codec.hashes import keccak256
from multisig_wallet.enums import MessageFormat, MessagePrefix
from multisig_wallet.signers.message import (
    ETHEREUM_PREFIX,
    PERSONAL_SIGN_HEADER,
    format_message,
    personal_sign_envelope,
)

DIGEST = hashlib.sha256(b"formatted message test").digest()


def test_no_format_no_prefix_is_passthrough():
    assert format_message(DIGEST, MessageFormat.NONE, MessagePrefix.NONE) == DIGEST
    assert format_message(DIGEST) == DIGEST


def test_personal_sign_hashes_34_byte_envelope():
    envelope = b"\x19\x45" + DIGEST
    assert len(envelope) == 34
    assert PERSONAL_SIGN_HEADER == bytes([0x19, 0x45])
    assert format_message(DIGEST, MessageFormat.PERSONAL_SIGN) == keccak256(envelope)
    assert personal_sign_envelope(DIGEST) == keccak256(envelope)


def test_personal_sign_uses_keccak_not_sha256():
    envelope = b"\x19\x45" + DIGEST
    assert format_message(DIGEST, MessageFormat.PERSONAL_SIGN) != hashlib.sha256(envelope).digest()


def test_ethereum_prefix_stage():
    assert ETHEREUM_PREFIX == b"\x19Ethereum Signed Message:\n32"
    expected = hashlib.sha256(ETHEREUM_PREFIX + DIGEST).digest()
    assert format_message(DIGEST, MessageFormat.NONE, MessagePrefix.ETHEREUM_TEXT) == expected


def test_prefix_applies_to_envelope_output():
    stage1 = keccak256(b"\x19\x45" + DIGEST)
    expected = hashlib.sha256(ETHEREUM_PREFIX + stage1).digest()
    assert format_message(DIGEST, MessageFormat.PERSONAL_SIGN, MessagePrefix.ETHEREUM_TEXT) == expected


def test_all_combinations_are_distinct():
    outputs = {
        format_message(DIGEST, fmt, prefix)
        for fmt in MessageFormat
        for prefix in MessagePrefix
    }
    assert len(outputs) == len(MessageFormat) * len(MessagePrefix)


def test_digest_length_enforced():
    with pytest.raises(ValueError):
        format_message(b"\x00" * 31)
    with pytest.raises(ValueError):
        format_message(mk_b256(1) + b"\x00")


def test_unknown_tags_rejected():
    with pytest.raises(ValueError):
        format_message(DIGEST, 7, MessagePrefix.NONE)
    with pytest.raises(ValueError):
        format_message(DIGEST, MessageFormat.NONE, 7)
