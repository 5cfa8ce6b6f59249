r"""
Off-chain signers.

A signer holds a secp256k1 key and produces SignatureData for a transaction
hash, applying the same message formatting the wallet will apply during
recovery. The signer's address is the one the wallet will recover, so it is
what must be registered as a User.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from ..crypto.secp256k1 import Secp256k1KeyPair
from ..enums import MessageFormat, MessagePrefix, WalletType
from ..types import SignatureData, User
from .message import format_message
from .recovery import evm_address, native_address


class Signer(ABC):
    """
    Base signer interface.

    Subclasses fix the wallet convention; signing and formatting are shared.
    """

    def __init__(self, key_pair: Optional[Secp256k1KeyPair] = None):
        """
        Initialize signer.

        Args:
            key_pair: Key pair to sign with (random if omitted)
        """
        self.key_pair = key_pair or Secp256k1KeyPair.generate()

    @abstractmethod
    def get_wallet_type(self) -> WalletType:
        """
        Get the wallet convention.

        Returns:
            WalletType enum value
        """
        pass

    @property
    @abstractmethod
    def address(self) -> bytes:
        """32-byte address the wallet recovers for this signer."""
        pass

    def sign(self, transaction_hash: bytes,
             message_format: MessageFormat = MessageFormat.NONE,
             message_prefix: MessagePrefix = MessagePrefix.NONE) -> SignatureData:
        """
        Sign a transaction hash.

        Args:
            transaction_hash: 32-byte hash from transaction_hash()
            message_format: Envelope to apply before signing
            message_prefix: Prefix to apply before signing

        Returns:
            SignatureData ready to pass to the wallet
        """
        message_hash = format_message(transaction_hash, message_format, message_prefix)
        return SignatureData(
            signature=self.key_pair.sign_recoverable(message_hash),
            format=message_format,
            prefix=message_prefix,
            wallet_type=self.get_wallet_type(),
        )

    def as_user(self, weight: int) -> User:
        """User entry for this signer."""
        return User(address=self.address, weight=weight)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.address.hex()})"


class NativeSigner(Signer):
    """Signer whose address is the SHA-256 of its public key."""

    def get_wallet_type(self) -> WalletType:
        return WalletType.NATIVE

    @property
    def address(self) -> bytes:
        return native_address(self.key_pair.public_key_bytes())


class EVMSigner(Signer):
    """Signer whose address is an Ethereum address padded to 32 bytes."""

    def get_wallet_type(self) -> WalletType:
        return WalletType.EVM

    @property
    def address(self) -> bytes:
        return evm_address(self.key_pair.public_key_bytes())

    @property
    def eth_address(self) -> str:
        """Ethereum address string (0x prefixed)."""
        return "0x" + self.address[12:].hex()


def order_by_signer(pairs: Iterable[Tuple[bytes, SignatureData]]) -> List[SignatureData]:
    """
    Sort (signer address, signature) pairs into the order the wallet requires.

    Args:
        pairs: Signer addresses with their signatures

    Returns:
        Signatures ordered by increasing signer address
    """
    return [sig for _, sig in sorted(pairs, key=lambda pair: int.from_bytes(pair[0], "big"))]


def sign_all(signers: Iterable[Signer], transaction_hash: bytes,
             message_format: MessageFormat = MessageFormat.NONE,
             message_prefix: MessagePrefix = MessagePrefix.NONE) -> List[SignatureData]:
    """Sign with every signer and return the signatures in wallet order."""
    return order_by_signer(
        (signer.address, signer.sign(transaction_hash, message_format, message_prefix))
        for signer in signers
    )


__all__ = [
    "Signer",
    "NativeSigner",
    "EVMSigner",
    "order_by_signer",
    "sign_all",
]
