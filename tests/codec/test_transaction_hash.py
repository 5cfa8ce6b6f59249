"""
Transaction hashing: canonical layout, determinism and field binding.
"""

import hashlib

import pytest
from pydantic import ValidationError

from helpers import assert_hex_equal, mk_b256

from multisig_wallet.codec.hashes import keccak256, sha256_bytes
from multisig_wallet.codec.transaction_codec import (
    ENCODED_LENGTH,
    TransactionCodec,
    encode_transaction,
    transaction_hash,
)
from multisig_wallet.enums import IdentityKind
from multisig_wallet.types import Identity, Transaction

CONTRACT = mk_b256(1)
TO = Identity.address(mk_b256(2))
DATA = mk_b256(3)


def test_hash_primitives_known_answers():
    assert_hex_equal(
        sha256_bytes(b""),
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        "sha256 of empty input",
    )
    assert_hex_equal(
        keccak256(b""),
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470",
        "keccak256 of empty input",
    )


def test_encoding_layout():
    encoded = encode_transaction(CONTRACT, TO, 0x0102, DATA, 7)

    assert len(encoded) == ENCODED_LENGTH == 120
    assert encoded[0:32] == CONTRACT
    assert encoded[32:40] == int(IdentityKind.ADDRESS).to_bytes(8, "big")
    assert encoded[40:72] == TO.value
    assert encoded[72:80] == (0x0102).to_bytes(8, "big")
    assert encoded[80:112] == DATA
    assert encoded[112:120] == (7).to_bytes(8, "big")


def test_hash_is_sha256_of_encoding():
    encoded = encode_transaction(CONTRACT, TO, 5, DATA, 1)
    assert transaction_hash(CONTRACT, TO, 5, DATA, 1) == hashlib.sha256(encoded).digest()


def test_hash_is_deterministic():
    h1 = transaction_hash(CONTRACT, TO, 5, DATA, 1)
    h2 = transaction_hash(CONTRACT, TO, 5, DATA, 1)
    assert h1 == h2
    assert len(h1) == 32


@pytest.mark.parametrize("field,changed", [
    ("contract", (mk_b256(99), TO, 5, DATA, 1)),
    ("destination", (CONTRACT, Identity.address(mk_b256(99)), 5, DATA, 1)),
    ("destination_kind", (CONTRACT, Identity.contract(mk_b256(2)), 5, DATA, 1)),
    ("value", (CONTRACT, TO, 6, DATA, 1)),
    ("data", (CONTRACT, TO, 5, mk_b256(99), 1)),
    ("nonce", (CONTRACT, TO, 5, DATA, 2)),
])
def test_every_field_changes_hash(field, changed):
    base = transaction_hash(CONTRACT, TO, 5, DATA, 1)
    assert transaction_hash(*changed) != base, field


def test_transaction_model_hash_matches_function():
    tx = Transaction(contract_identifier=CONTRACT, destination=TO, value=5, data=DATA, nonce=1)
    assert tx.hash() == transaction_hash(CONTRACT, TO, 5, DATA, 1)
    assert tx.to_bytes() == TransactionCodec.encode(tx)


def test_transaction_accepts_hex_fields():
    tx = Transaction(
        contract_identifier="0x" + CONTRACT.hex(),
        destination={"kind": IdentityKind.ADDRESS, "value": TO.value.hex()},
        value=5,
        data=DATA.hex(),
        nonce=1,
    )
    assert tx.hash() == transaction_hash(CONTRACT, TO, 5, DATA, 1)


def test_u64_bounds():
    u64_max = (1 << 64) - 1
    transaction_hash(CONTRACT, TO, u64_max, DATA, u64_max)

    with pytest.raises(ValidationError):
        transaction_hash(CONTRACT, TO, u64_max + 1, DATA, 1)
    with pytest.raises(ValidationError):
        transaction_hash(CONTRACT, TO, 5, DATA, -1)


def test_payload_must_be_32_bytes():
    with pytest.raises(ValidationError):
        transaction_hash(CONTRACT, TO, 5, b"\x01" * 31, 1)
    with pytest.raises(ValidationError):
        Identity.address(b"\x01" * 20)
