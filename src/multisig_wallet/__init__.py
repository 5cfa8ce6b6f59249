"""
Multisig Wallet Core

Weighted multi-signature authorization: transaction hashing, message
formatting, secp256k1 signer recovery (native and EVM address conventions),
ordered approval counting and the wallet state machine.
"""

from .enums import *
from .types import *
from .runtime.errors import *
from .codec import sha256_bytes, keccak256, transaction_hash, encode_transaction
from .crypto import Secp256k1KeyPair, Secp256k1Error
from .signers import *
from .wallet import *
from .config import WalletConfig

__version__ = "0.1.0"
