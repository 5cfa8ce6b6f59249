"""
Wallet state machine and its collaborators.
"""

from .store import WalletState, WalletStore, InMemoryWalletStore
from .ledger import AssetLedger, InMemoryAssetLedger
from .events import (
    ExecuteTransactionEvent, TransferEvent, CancelEvent,
    WalletEvent, EventLog, InMemoryEventLog
)
from .state_machine import WalletStateMachine

__all__ = [
    "WalletState",
    "WalletStore",
    "InMemoryWalletStore",
    "AssetLedger",
    "InMemoryAssetLedger",
    "ExecuteTransactionEvent",
    "TransferEvent",
    "CancelEvent",
    "WalletEvent",
    "EventLog",
    "InMemoryEventLog",
    "WalletStateMachine",
]
