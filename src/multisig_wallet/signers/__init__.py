"""
Signature handling: message formatting, signer recovery, approval counting
and off-chain signers.
"""

from .message import format_message, personal_sign_envelope, ethereum_prefix
from .recovery import recover_signer, native_address, evm_address, address_for
from .multisig import ApprovalCounter, count_approvals
from .signer import Signer, NativeSigner, EVMSigner, order_by_signer, sign_all

__all__ = [
    "format_message",
    "personal_sign_envelope",
    "ethereum_prefix",
    "recover_signer",
    "native_address",
    "evm_address",
    "address_for",
    "ApprovalCounter",
    "count_approvals",
    "Signer",
    "NativeSigner",
    "EVMSigner",
    "order_by_signer",
    "sign_all",
]
