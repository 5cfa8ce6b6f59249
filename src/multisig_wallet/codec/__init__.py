"""
Codec package - hashing primitives and canonical transaction encoding.
"""

from .hashes import sha256_bytes, keccak256
from .transaction_codec import TransactionCodec, encode_transaction, transaction_hash

__all__ = [
    "sha256_bytes",
    "keccak256",
    "TransactionCodec",
    "encode_transaction",
    "transaction_hash",
]
