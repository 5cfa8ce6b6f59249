"""
Asset ledger collaborator.

The wallet reads its holdings and moves value through an AssetLedger; how
value actually moves is the host's concern.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, Optional, Tuple

from ..runtime.errors import InsufficientAssetAmount
from ..types import Identity

logger = logging.getLogger(__name__)


class AssetLedger(ABC):
    """Interface to the host's asset-transfer primitive."""

    @abstractmethod
    def balance(self, asset_id: bytes) -> int:
        """Amount of an asset held by the wallet."""
        pass

    @abstractmethod
    def transfer_to_address(self, address: bytes, asset_id: bytes, amount: int) -> None:
        """Move value to an external address."""
        pass

    @abstractmethod
    def force_transfer_to_contract(self, contract_id: bytes, asset_id: bytes, amount: int) -> None:
        """Move value to a contract."""
        pass


class InMemoryAssetLedger(AssetLedger):
    """
    In-memory ledger.

    Debits the wallet's own holdings and credits a book keyed by recipient
    identity and asset.
    """

    def __init__(self, balances: Optional[Dict[bytes, int]] = None):
        """
        Initialize ledger.

        Args:
            balances: Initial wallet holdings per asset id
        """
        self.balances: Dict[bytes, int] = dict(balances or {})
        self.credited: Dict[Tuple[Identity, bytes], int] = defaultdict(int)

    def deposit(self, asset_id: bytes, amount: int) -> None:
        """Add holdings to the wallet."""
        self.balances[asset_id] = self.balances.get(asset_id, 0) + amount

    def balance(self, asset_id: bytes) -> int:
        return self.balances.get(asset_id, 0)

    def transfer_to_address(self, address: bytes, asset_id: bytes, amount: int) -> None:
        self._move(Identity.address(address), asset_id, amount)

    def force_transfer_to_contract(self, contract_id: bytes, asset_id: bytes, amount: int) -> None:
        self._move(Identity.contract(contract_id), asset_id, amount)

    def credited_to(self, recipient: Identity, asset_id: bytes) -> int:
        """Total amount of an asset sent to a recipient."""
        return self.credited.get((recipient, asset_id), 0)

    def _move(self, recipient: Identity, asset_id: bytes, amount: int) -> None:
        held = self.balance(asset_id)
        if amount > held:
            raise InsufficientAssetAmount(details={
                "asset_id": asset_id.hex(),
                "requested": amount,
                "available": held,
            })
        self.balances[asset_id] = held - amount
        self.credited[(recipient, asset_id)] += amount
        logger.debug(f"Moved {amount} of 0x{asset_id.hex()} to {recipient}")


__all__ = [
    "AssetLedger",
    "InMemoryAssetLedger",
]
