"""
Wallet state persistence.

The state machine never touches global storage; it is handed a WalletStore
holding the nonce, the threshold and the signer weighting table.
"""

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

logger = logging.getLogger(__name__)


@dataclass
class WalletState:
    """Persisted wallet state. nonce == 0 means uninitialized."""
    nonce: int = 0
    threshold: int = 0
    weighting: Dict[bytes, int] = field(default_factory=dict)

    @property
    def is_initialized(self) -> bool:
        return self.nonce != 0


class WalletStore(ABC):
    """
    Abstract base class for wallet state persistence.

    snapshot()/restore() let the state machine discard every write of a
    failed invocation.
    """

    @abstractmethod
    def get_nonce(self) -> int:
        """Current nonce (0 when uninitialized)."""
        pass

    @abstractmethod
    def set_nonce(self, nonce: int) -> None:
        pass

    @abstractmethod
    def get_threshold(self) -> int:
        pass

    @abstractmethod
    def set_threshold(self, threshold: int) -> None:
        pass

    @abstractmethod
    def get_weight(self, address: bytes) -> int:
        """Weight of a signer, 0 if unknown."""
        pass

    @abstractmethod
    def set_weight(self, address: bytes, weight: int) -> None:
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """Capture the full state."""
        pass

    @abstractmethod
    def restore(self, snapshot: Any) -> None:
        """Return to a previously captured state."""
        pass


class InMemoryWalletStore(WalletStore):
    """In-memory implementation of wallet store."""

    def __init__(self, state: WalletState = None):
        """Initialize in-memory store."""
        self.state = state or WalletState()

    def get_nonce(self) -> int:
        return self.state.nonce

    def set_nonce(self, nonce: int) -> None:
        self.state.nonce = nonce

    def get_threshold(self) -> int:
        return self.state.threshold

    def set_threshold(self, threshold: int) -> None:
        self.state.threshold = threshold

    def get_weight(self, address: bytes) -> int:
        return self.state.weighting.get(address, 0)

    def set_weight(self, address: bytes, weight: int) -> None:
        self.state.weighting[address] = weight

    def snapshot(self) -> WalletState:
        return copy.deepcopy(self.state)

    def restore(self, snapshot: WalletState) -> None:
        logger.debug(f"Restoring wallet state to nonce {snapshot.nonce}")
        self.state = copy.deepcopy(snapshot)


__all__ = [
    "WalletState",
    "WalletStore",
    "InMemoryWalletStore",
]
