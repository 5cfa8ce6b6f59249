"""
Core data types for the multisig wallet.

All models are immutable pydantic models. Byte fields accept raw bytes or
hex strings (with or without a 0x prefix).
"""

from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator

from .enums import IdentityKind, MessageFormat, MessagePrefix, WalletType

U64_MAX = (1 << 64) - 1
ZERO_B256 = bytes(32)


def parse_hex_bytes(v: Any) -> Any:
    """Accept hex strings for byte fields."""
    if isinstance(v, str):
        text = v[2:] if v.startswith(("0x", "0X")) else v
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {e}")
    if isinstance(v, bytearray):
        return bytes(v)
    return v


def _require_b256(v: bytes, name: str) -> bytes:
    if len(v) != 32:
        raise ValueError(f"{name} must be 32 bytes, got {len(v)}")
    return v


class Identity(BaseModel):
    """
    Destination of an action: an external address or a contract.

    The kind is part of the transaction hash and decides how transfers are
    routed by the asset ledger.
    """
    kind: IdentityKind = Field(..., description="Identity discriminant")
    value: bytes = Field(..., description="32-byte address or contract id")

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: Any) -> Any:
        return parse_hex_bytes(v)

    @field_validator("value")
    @classmethod
    def check_value(cls, v: bytes) -> bytes:
        return _require_b256(v, "Identity value")

    @classmethod
    def address(cls, value: bytes) -> Identity:
        """Identity of an external (key-controlled) address."""
        return cls(kind=IdentityKind.ADDRESS, value=value)

    @classmethod
    def contract(cls, value: bytes) -> Identity:
        """Identity of a contract."""
        return cls(kind=IdentityKind.CONTRACT_ID, value=value)

    @property
    def is_address(self) -> bool:
        return self.kind == IdentityKind.ADDRESS

    def __str__(self) -> str:
        return f"{self.kind.name}(0x{self.value.hex()})"


class Transaction(BaseModel):
    """
    A proposed action as it is hashed for signing.

    Never persisted; only its hash is compared against signatures.
    """
    contract_identifier: bytes = Field(..., description="Identifier of the authorizing wallet")
    destination: Identity
    value: int = Field(..., ge=0, le=U64_MAX)
    data: bytes = Field(..., description="Opaque 32-byte payload")
    nonce: int = Field(..., ge=0, le=U64_MAX)

    model_config = {"frozen": True}

    @field_validator("contract_identifier", "data", mode="before")
    @classmethod
    def parse_bytes(cls, v: Any) -> Any:
        return parse_hex_bytes(v)

    @field_validator("contract_identifier", "data")
    @classmethod
    def check_b256(cls, v: bytes, info) -> bytes:
        return _require_b256(v, info.field_name)

    def to_bytes(self) -> bytes:
        """Canonical encoding used for hashing."""
        # Import here to avoid circular imports
        from .codec.transaction_codec import TransactionCodec
        return TransactionCodec.encode(self)

    def hash(self) -> bytes:
        """SHA-256 digest of the canonical encoding."""
        from .codec.transaction_codec import TransactionCodec
        return TransactionCodec.hash(self)


class SignatureData(BaseModel):
    """
    One signer's approval of a transaction hash.

    The signature is 65 bytes (r || s || v). Its length is checked during
    recovery, not here.
    """
    signature: bytes = Field(..., description="65-byte recoverable ECDSA signature")
    format: MessageFormat = Field(default=MessageFormat.NONE, description="Envelope applied before signing")
    prefix: MessagePrefix = Field(default=MessagePrefix.NONE, description="Text prefix applied before signing")
    wallet_type: WalletType = Field(..., alias="walletType", description="Recovery convention")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("signature", mode="before")
    @classmethod
    def parse_signature(cls, v: Any) -> Any:
        return parse_hex_bytes(v)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "signature": self.signature.hex(),
            "format": self.format.name,
            "prefix": self.prefix.name,
            "walletType": self.wallet_type.name,
        }


class User(BaseModel):
    """A signer and its vote weight, used to seed the wallet."""
    address: bytes = Field(..., description="32-byte signer address")
    weight: int = Field(..., ge=0, le=U64_MAX)

    model_config = {"frozen": True}

    @field_validator("address", mode="before")
    @classmethod
    def parse_address(cls, v: Any) -> Any:
        return parse_hex_bytes(v)

    @field_validator("address")
    @classmethod
    def check_address(cls, v: bytes) -> bytes:
        return _require_b256(v, "User address")


__all__ = [
    "U64_MAX",
    "ZERO_B256",
    "Identity",
    "Transaction",
    "SignatureData",
    "User",
]
