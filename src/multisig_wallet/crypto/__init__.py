"""
Cryptographic primitives for the multisig wallet.
"""

from .secp256k1 import (
    Secp256k1KeyPair,
    Secp256k1Error,
    recover_public_key,
    normalize_recovery_id,
    SIGNATURE_LENGTH,
)

__all__ = [
    "Secp256k1KeyPair",
    "Secp256k1Error",
    "recover_public_key",
    "normalize_recovery_id",
    "SIGNATURE_LENGTH",
]
