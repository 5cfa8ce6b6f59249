"""
Hash Functions

SHA-256 is the primary hash used for transaction hashes, native addresses and
the text prefix stage. Keccak-256 is the hash paired with the personal-sign
envelope and with EVM address derivation.

Note: Keccak-256 is not SHA3-256; the padding differs.
"""

import hashlib

from Crypto.Hash import keccak


def sha256_bytes(input_bytes: bytes) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    return hashlib.sha256(input_bytes).digest()


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash (Ethereum's hash function).

    Args:
        data: Input data to hash

    Returns:
        32-byte Keccak-256 hash
    """
    return keccak.new(digest_bits=256, data=data).digest()
