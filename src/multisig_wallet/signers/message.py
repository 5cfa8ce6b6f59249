"""
Message formatting.

Turns a raw transaction hash into the exact 32 bytes a signer signed, in two
stages: an optional personal-sign envelope, then an optional text prefix.
"""

from ..codec.hashes import keccak256, sha256_bytes
from ..enums import MessageFormat, MessagePrefix

# Version marker of the personal-sign envelope: 0x19 followed by 'E'
PERSONAL_SIGN_HEADER = b"\x19\x45"
ETHEREUM_PREFIX = b"\x19Ethereum Signed Message:\n32"


def personal_sign_envelope(digest: bytes) -> bytes:
    """
    Wrap a digest in the personal-sign envelope.

    The hashed buffer is exactly 34 bytes: 0x19, 0x45, then the digest.
    """
    buf = bytearray(34)
    buf[0:2] = PERSONAL_SIGN_HEADER
    buf[2:34] = digest
    return keccak256(bytes(buf))


def ethereum_prefix(digest: bytes) -> bytes:
    """Hash the Ethereum text prefix followed by the digest."""
    return sha256_bytes(ETHEREUM_PREFIX + digest)


def apply_format(digest: bytes, message_format: MessageFormat) -> bytes:
    """First stage: envelope."""
    if message_format == MessageFormat.NONE:
        return digest
    if message_format == MessageFormat.PERSONAL_SIGN:
        return personal_sign_envelope(digest)
    raise ValueError(f"Unsupported message format: {message_format!r}")


def apply_prefix(digest: bytes, message_prefix: MessagePrefix) -> bytes:
    """Second stage: text prefix."""
    if message_prefix == MessagePrefix.NONE:
        return digest
    if message_prefix == MessagePrefix.ETHEREUM_TEXT:
        return ethereum_prefix(digest)
    raise ValueError(f"Unsupported message prefix: {message_prefix!r}")


def format_message(digest: bytes, message_format: MessageFormat = MessageFormat.NONE,
                   message_prefix: MessagePrefix = MessagePrefix.NONE) -> bytes:
    """
    Produce the bytes that were actually signed for a transaction hash.

    Args:
        digest: 32-byte transaction hash
        message_format: Envelope applied first
        message_prefix: Prefix applied to the envelope output

    Returns:
        32-byte formatted message hash

    Raises:
        ValueError: If the digest is not 32 bytes or a tag is unknown
    """
    if len(digest) != 32:
        raise ValueError(f"Digest must be 32 bytes, got {len(digest)}")
    return apply_prefix(apply_format(digest, message_format), message_prefix)


__all__ = [
    "PERSONAL_SIGN_HEADER",
    "ETHEREUM_PREFIX",
    "personal_sign_envelope",
    "ethereum_prefix",
    "format_message",
]
