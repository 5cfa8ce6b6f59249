"""
Tag enums for the multisig wallet.

Each enum is a closed set of variants; dispatch code matches on every member
and raises on anything else, so adding a variant means extending the enum
and every dispatch site together.
"""

from enum import IntEnum


class MessageFormat(IntEnum):
    """Envelope applied to the transaction hash before it was signed."""
    NONE = 0
    PERSONAL_SIGN = 1


class MessagePrefix(IntEnum):
    """Text prefix applied after the envelope stage."""
    NONE = 0
    ETHEREUM_TEXT = 1


class WalletType(IntEnum):
    """Curve-recovery and address-derivation convention of a signature."""
    NATIVE = 0
    EVM = 1


class IdentityKind(IntEnum):
    """Discriminant of a destination identity."""
    ADDRESS = 0
    CONTRACT_ID = 1


__all__ = [
    "MessageFormat",
    "MessagePrefix",
    "WalletType",
    "IdentityKind",
]
