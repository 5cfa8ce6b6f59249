from .factories import mk_keypair, mk_native_signer, mk_evm_signer, mk_b256, mk_signers
from .parity import assert_hex_equal

__all__ = [
    "mk_keypair",
    "mk_native_signer",
    "mk_evm_signer",
    "mk_b256",
    "mk_signers",
    "assert_hex_equal",
]
