"""
Transaction Codec

Canonical binary encoding and hashing of a proposed wallet action.

Layout (big-endian, no length prefixes, 120 bytes total):

    contract_identifier  32
    identity tag          8   (u64, IdentityKind)
    identity value       32
    value                 8   (u64)
    data                 32
    nonce                 8   (u64)

The contract identifier binds every hash to one wallet instance so a
signature cannot be replayed against another wallet.
"""

import logging

from ..types import Identity, Transaction
from .hashes import sha256_bytes

logger = logging.getLogger(__name__)

U64_MAX = (1 << 64) - 1
ENCODED_LENGTH = 32 + 8 + 32 + 8 + 32 + 8


class BinaryWriter:
    """Append-only big-endian byte buffer."""

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb = bytearray()

    def u64be(self, v: int) -> None:
        """
        Write unsigned 64-bit integer in big-endian format.

        Args:
            v: Integer value in [0, 2**64)

        Raises:
            ValueError: If the value does not fit in 64 bits
        """
        if not 0 <= v <= U64_MAX:
            raise ValueError(f"Value out of u64 range: {v}")
        self._bb.extend(v.to_bytes(8, "big"))

    def bytes32(self, v: bytes) -> None:
        """Write exactly 32 raw bytes."""
        if len(v) != 32:
            raise ValueError(f"Expected 32 bytes, got {len(v)}")
        self._bb.extend(v)

    def to_bytes(self) -> bytes:
        """Get the encoded bytes."""
        return bytes(self._bb)


class TransactionCodec:
    """Encoder for the signing form of a Transaction."""

    @staticmethod
    def encode(tx: Transaction) -> bytes:
        """
        Encode a transaction into its canonical byte form.

        Args:
            tx: Transaction to encode

        Returns:
            120-byte canonical encoding
        """
        w = BinaryWriter()
        w.bytes32(tx.contract_identifier)
        w.u64be(int(tx.destination.kind))
        w.bytes32(tx.destination.value)
        w.u64be(tx.value)
        w.bytes32(tx.data)
        w.u64be(tx.nonce)
        return w.to_bytes()

    @staticmethod
    def hash(tx: Transaction) -> bytes:
        """SHA-256 of the canonical encoding."""
        return sha256_bytes(TransactionCodec.encode(tx))


def encode_transaction(contract_identifier: bytes, to: Identity, value: int,
                       data: bytes, nonce: int) -> bytes:
    """Canonical encoding of the five transaction fields."""
    tx = Transaction(
        contract_identifier=contract_identifier,
        destination=to,
        value=value,
        data=data,
        nonce=nonce,
    )
    return TransactionCodec.encode(tx)


def transaction_hash(contract_identifier: bytes, to: Identity, value: int,
                     data: bytes, nonce: int) -> bytes:
    """
    Compute the digest that signers approve.

    Args:
        contract_identifier: 32-byte identifier of the authorizing wallet
        to: Destination identity
        value: Amount (u64)
        data: Opaque 32-byte payload
        nonce: Replay-protection counter (u64)

    Returns:
        32-byte SHA-256 digest
    """
    digest = sha256_bytes(encode_transaction(contract_identifier, to, value, data, nonce))
    logger.debug(f"Transaction hash for nonce {nonce}: {digest.hex()}")
    return digest
