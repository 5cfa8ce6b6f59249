"""
SECP256K1 cryptographic operations.

Recoverable ECDSA signatures over 32-byte digests, backed by coincurve
(libsecp256k1). Signatures are 65 bytes: r (32) || s (32) || v (1).

Digests are signed and recovered as-is (``hasher=None``); all hashing is
done by the caller so the signed bytes are exactly the formatted message.
"""

from __future__ import annotations
import os
from typing import Optional

import coincurve

from ..runtime.errors import ErrorCode, SignatureError, SignatureRecoveryFailed

SIGNATURE_LENGTH = 65
DIGEST_LENGTH = 32
# Ethereum encodes the recovery id as 27/28
ETH_RECOVERY_OFFSET = 27


class Secp256k1Error(SignatureError):
    """Base exception for SECP256K1 key operations."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY, cause=cause)


def normalize_recovery_id(v: int) -> int:
    """
    Map a signature's v byte to a libsecp256k1 recovery id.

    Args:
        v: Recovery byte, 0-3 or Ethereum-style 27/28

    Returns:
        Recovery id in 0-3

    Raises:
        SignatureRecoveryFailed: If v is not a valid recovery id
    """
    if v in (ETH_RECOVERY_OFFSET, ETH_RECOVERY_OFFSET + 1):
        v -= ETH_RECOVERY_OFFSET
    if not 0 <= v <= 3:
        raise SignatureRecoveryFailed(
            f"Invalid recovery id: {v}",
            details={"v": v},
        )
    return v


def recover_public_key(signature: bytes, digest: bytes) -> bytes:
    """
    Recover the uncompressed public key that produced a signature.

    Args:
        signature: 65-byte recoverable signature
        digest: 32-byte message digest that was signed

    Returns:
        65-byte uncompressed public key (0x04 || X || Y)

    Raises:
        SignatureRecoveryFailed: If the signature is malformed or recovery fails
    """
    if len(signature) != SIGNATURE_LENGTH:
        raise SignatureRecoveryFailed(
            f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}",
            details={"length": len(signature)},
        )
    if len(digest) != DIGEST_LENGTH:
        raise SignatureRecoveryFailed(
            f"Digest must be {DIGEST_LENGTH} bytes, got {len(digest)}",
            details={"length": len(digest)},
        )

    recid = normalize_recovery_id(signature[64])
    compact = signature[:64] + bytes([recid])

    try:
        public_key = coincurve.PublicKey.from_signature_and_message(compact, digest, hasher=None)
    except Exception as e:
        raise SignatureRecoveryFailed("Public key recovery failed", cause=e)

    return public_key.format(compressed=False)


class Secp256k1KeyPair:
    """
    SECP256K1 key pair producing recoverable signatures.

    Used to prepare approvals off-chain; the wallet itself only recovers.
    """

    def __init__(self, private_key_bytes: Optional[bytes] = None):
        """
        Initialize key pair.

        Args:
            private_key_bytes: 32-byte private key (random if omitted)
        """
        if private_key_bytes is None:
            private_key_bytes = os.urandom(32)
        if len(private_key_bytes) != 32:
            raise Secp256k1Error(f"Private key must be 32 bytes, got {len(private_key_bytes)}")

        try:
            self._private_key = coincurve.PrivateKey(private_key_bytes)
        except ValueError as e:
            raise Secp256k1Error("Private key is out of range", cause=e)
        self._private_key_bytes = private_key_bytes

    @classmethod
    def generate(cls) -> Secp256k1KeyPair:
        """Generate a new random key pair."""
        return cls()

    @classmethod
    def from_hex(cls, private_key_hex: str) -> Secp256k1KeyPair:
        """Create key pair from private key hex string."""
        try:
            private_key_bytes = bytes.fromhex(private_key_hex)
        except ValueError as e:
            raise Secp256k1Error(f"Invalid hex string: {e}", cause=e)
        return cls(private_key_bytes)

    def sign_recoverable(self, digest: bytes) -> bytes:
        """
        Sign a 32-byte digest.

        Args:
            digest: Digest to sign, used without further hashing

        Returns:
            65-byte signature r || s || recovery id (0-3)
        """
        if len(digest) != DIGEST_LENGTH:
            raise Secp256k1Error(f"Digest must be {DIGEST_LENGTH} bytes, got {len(digest)}")
        return self._private_key.sign_recoverable(digest, hasher=None)

    def public_key_bytes(self, compressed: bool = False) -> bytes:
        """Public key bytes (uncompressed 65 bytes by default)."""
        return self._private_key.public_key.format(compressed=compressed)

    def to_hex(self) -> str:
        """Get private key as hex string."""
        return self._private_key_bytes.hex()

    def to_bytes(self) -> bytes:
        """Get private key as bytes."""
        return self._private_key_bytes

    def __str__(self) -> str:
        return f"Secp256k1KeyPair(public={self.public_key_bytes(compressed=True).hex()[:16]}...)"


__all__ = [
    "Secp256k1KeyPair",
    "Secp256k1Error",
    "recover_public_key",
    "normalize_recovery_id",
    "SIGNATURE_LENGTH",
]
