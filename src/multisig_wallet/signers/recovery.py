"""
Signer recovery.

Recovers the canonical 32-byte address of whoever produced a signature,
under one of two address conventions:

- NATIVE: SHA-256 of the 64-byte uncompressed public key (X || Y).
- EVM: Keccak-256 of the same 64 bytes, last 20 bytes kept, left-padded
  with 12 zero bytes into the 32-byte address space.
"""

import logging

from ..codec.hashes import keccak256, sha256_bytes
from ..crypto.secp256k1 import recover_public_key
from ..enums import WalletType
from ..runtime.errors import SignatureRecoveryFailed

logger = logging.getLogger(__name__)

EVM_ADDRESS_LENGTH = 20
EVM_PADDING = bytes(32 - EVM_ADDRESS_LENGTH)


def _raw_public_key(public_key_bytes: bytes) -> bytes:
    """Strip the 0x04 tag from an uncompressed public key."""
    if len(public_key_bytes) == 65 and public_key_bytes[0] == 0x04:
        return public_key_bytes[1:]
    if len(public_key_bytes) == 64:
        return public_key_bytes
    raise ValueError(f"Invalid uncompressed public key length: {len(public_key_bytes)}")


def native_address(public_key_bytes: bytes) -> bytes:
    """
    Native address of an uncompressed public key.

    Args:
        public_key_bytes: 65-byte (0x04-tagged) or 64-byte public key

    Returns:
        32-byte address
    """
    return sha256_bytes(_raw_public_key(public_key_bytes))


def evm_address(public_key_bytes: bytes) -> bytes:
    """
    EVM address of an uncompressed public key, padded to 32 bytes.

    Args:
        public_key_bytes: 65-byte (0x04-tagged) or 64-byte public key

    Returns:
        32 bytes: 12 zero bytes followed by the 20-byte Ethereum address
    """
    return EVM_PADDING + keccak256(_raw_public_key(public_key_bytes))[-EVM_ADDRESS_LENGTH:]


def address_for(public_key_bytes: bytes, wallet_type: WalletType) -> bytes:
    """Derive the address of a public key under a wallet convention."""
    if wallet_type == WalletType.NATIVE:
        return native_address(public_key_bytes)
    if wallet_type == WalletType.EVM:
        return evm_address(public_key_bytes)
    raise ValueError(f"Unsupported wallet type: {wallet_type!r}")


def recover_signer(signature: bytes, message_hash: bytes, wallet_type: WalletType) -> bytes:
    """
    Recover the signer address from a signature over a formatted message.

    Args:
        signature: 65-byte signature r || s || v
        message_hash: 32-byte formatted message hash
        wallet_type: Address convention of the signer

    Returns:
        32-byte signer address

    Raises:
        SignatureRecoveryFailed: If the signature cannot be recovered
    """
    try:
        wallet_type = WalletType(wallet_type)
    except ValueError as e:
        raise SignatureRecoveryFailed(
            f"Unsupported wallet type: {wallet_type!r}",
            details={"wallet_type": wallet_type},
            cause=e,
        )

    public_key = recover_public_key(signature, message_hash)
    address = address_for(public_key, wallet_type)
    logger.debug(f"Recovered {wallet_type.name} signer 0x{address.hex()}")
    return address


__all__ = [
    "native_address",
    "evm_address",
    "address_for",
    "recover_signer",
]
