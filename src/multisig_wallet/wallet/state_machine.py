"""
Multisig wallet state machine.

States: uninitialized (nonce == 0) and active (nonce >= 1). The constructor
moves the wallet to active exactly once; execute_transaction and transfer
consume one nonce each when a weighted quorum of signers approves.

Each mutating operation is atomic: on any error every write made to the
store during the call is discarded and no event is emitted.
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Sequence, Union

from ..codec.transaction_codec import transaction_hash
from ..config import WalletConfig
from ..monitoring.metrics import MetricsRegistry, get_registry
from ..runtime.errors import (
    AddressCannotBeZero,
    CannotReinitialize,
    InsufficientApprovals,
    InsufficientAssetAmount,
    NotInitialized,
    ThresholdCannotBeZero,
    WeightingCannotBeZero,
)
from ..signers.multisig import ApprovalCounter
from ..types import U64_MAX, ZERO_B256, Identity, SignatureData, User
from .events import EventLog, ExecuteTransactionEvent, InMemoryEventLog, TransferEvent
from .ledger import AssetLedger, InMemoryAssetLedger
from .store import InMemoryWalletStore, WalletStore

logger = logging.getLogger(__name__)


class WalletStateMachine:
    """
    Weighted multisig wallet.

    Example usage:
        ```python
        wallet = WalletStateMachine(contract_id)
        wallet.constructor([signer_a.as_user(1), signer_b.as_user(1)], threshold=2)

        tx_hash = wallet.transaction_hash(to, value, data, wallet.nonce())
        wallet.execute_transaction(to, value, data, sign_all([signer_a, signer_b], tx_hash))
        ```
    """

    def __init__(
        self,
        config: Union[WalletConfig, bytes, str],
        store: Optional[WalletStore] = None,
        ledger: Optional[AssetLedger] = None,
        events: Optional[EventLog] = None,
        metrics: Optional[MetricsRegistry] = None,
    ):
        """
        Initialize the state machine.

        Args:
            config: WalletConfig, or the 32-byte contract id (bytes or hex)
            store: Wallet state store (in-memory if omitted)
            ledger: Asset ledger (empty in-memory ledger if omitted)
            events: Event log (in-memory if omitted)
            metrics: Metrics registry (global registry if omitted)
        """
        if not isinstance(config, WalletConfig):
            config = WalletConfig(contract_id=config)
        self.config = config
        self.store = store if store is not None else InMemoryWalletStore()
        self.ledger = ledger if ledger is not None else InMemoryAssetLedger()
        self.events = events if events is not None else InMemoryEventLog()
        self._metrics = None
        if config.metrics_enabled:
            self._metrics = metrics if metrics is not None else get_registry()

    @property
    def contract_id(self) -> bytes:
        """Domain identifier bound into every transaction hash."""
        return self.config.contract_id

    # Read-only helpers

    def nonce(self) -> int:
        """Current nonce; 0 while uninitialized."""
        return self.store.get_nonce()

    def threshold(self) -> int:
        return self.store.get_threshold()

    def weight(self, address: bytes) -> int:
        return self.store.get_weight(address)

    def balance(self, asset_id: bytes) -> int:
        """Wallet holdings of an asset, as reported by the ledger."""
        return self.ledger.balance(asset_id)

    def transaction_hash(self, to: Identity, value: int, data: bytes, nonce: int) -> bytes:
        """
        Hash a proposed action for off-chain signing.

        Args:
            to: Destination identity
            value: Amount (u64)
            data: Opaque 32-byte payload
            nonce: Nonce the action will consume

        Returns:
            32-byte transaction hash
        """
        return transaction_hash(self.contract_id, to, value, data, nonce)

    # State transitions

    def constructor(self, users: Sequence[User], threshold: int) -> None:
        """
        Initialize the wallet with its signers and threshold.

        Args:
            users: Signers and their weights
            threshold: Approval weight required for execution

        Raises:
            CannotReinitialize: If the wallet is already initialized
            ThresholdCannotBeZero: If threshold is 0
            AddressCannotBeZero: If a user has the zero address
            WeightingCannotBeZero: If a user has weight 0
        """
        with self._atomic("constructor"):
            if self.store.get_nonce() != 0:
                raise CannotReinitialize()
            if threshold == 0:
                raise ThresholdCannotBeZero()
            if not 0 < threshold <= U64_MAX:
                raise ValueError(f"Threshold out of u64 range: {threshold}")

            for index, user in enumerate(users):
                if user.address == ZERO_B256:
                    raise AddressCannotBeZero(details={"index": index})
                if user.weight == 0:
                    raise WeightingCannotBeZero(details={"index": index, "address": user.address.hex()})

            for user in users:
                self.store.set_weight(user.address, user.weight)
            self.store.set_nonce(1)
            self.store.set_threshold(threshold)

        logger.info(f"Wallet 0x{self.contract_id.hex()} initialized with {len(users)} users, threshold {threshold}")

    def execute_transaction(self, to: Identity, value: int, data: bytes,
                            signatures: Iterable[SignatureData]) -> ExecuteTransactionEvent:
        """
        Execute an approved action without moving assets.

        Args:
            to: Destination identity
            value: Amount (u64)
            data: Opaque 32-byte payload
            signatures: Approvals ordered by increasing recovered signer

        Returns:
            The emitted ExecuteTransactionEvent

        Raises:
            NotInitialized: If the wallet is not initialized
            IncorrectSignerOrdering: If signers are not strictly increasing
            SignatureRecoveryFailed: If a signature cannot be recovered
            InsufficientApprovals: If approvals are below the threshold
        """
        with self._atomic("execute_transaction"):
            nonce = self._require_initialized()
            self._require_approvals(to, value, data, nonce, signatures)
            self._consume_nonce(nonce)
            event = ExecuteTransactionEvent(to=to, value=value, data=data, nonce=nonce)

        self.events.log(event)
        logger.info(f"Executed transaction {nonce} to {to} value {value}")
        return event

    def transfer(self, to: Identity, asset_id: bytes, value: int, data: bytes,
                 signatures: Iterable[SignatureData]) -> TransferEvent:
        """
        Transfer assets held by the wallet.

        Args:
            to: Recipient identity
            asset_id: 32-byte asset identifier
            value: Amount to move (u64)
            data: Opaque 32-byte payload
            signatures: Approvals ordered by increasing recovered signer

        Returns:
            The emitted TransferEvent

        Raises:
            NotInitialized: If the wallet is not initialized
            InsufficientAssetAmount: If value exceeds the wallet's holdings
            IncorrectSignerOrdering: If signers are not strictly increasing
            SignatureRecoveryFailed: If a signature cannot be recovered
            InsufficientApprovals: If approvals are below the threshold
        """
        with self._atomic("transfer"):
            nonce = self._require_initialized()

            available = self.ledger.balance(asset_id)
            if value > available:
                raise InsufficientAssetAmount(details={
                    "asset_id": asset_id.hex(),
                    "requested": value,
                    "available": available,
                })

            self._require_approvals(to, value, data, nonce, signatures)
            self._consume_nonce(nonce)

            if to.is_address:
                self.ledger.transfer_to_address(to.value, asset_id, value)
            else:
                self.ledger.force_transfer_to_contract(to.value, asset_id, value)

            event = TransferEvent(to=to, asset_id=asset_id, value=value, nonce=nonce)

        self.events.log(event)
        logger.info(f"Transferred {value} of 0x{asset_id.hex()} to {to} (nonce {nonce})")
        return event

    # Internals

    def _require_initialized(self) -> int:
        nonce = self.store.get_nonce()
        if nonce == 0:
            raise NotInitialized()
        return nonce

    def _require_approvals(self, to: Identity, value: int, data: bytes, nonce: int,
                           signatures: Iterable[SignatureData]) -> int:
        threshold = self.store.get_threshold()
        counter = ApprovalCounter(self.store.get_weight, threshold, early_exit=self.config.early_exit)
        tx_hash = self.transaction_hash(to, value, data, nonce)
        try:
            approvals = counter.count_approvals(tx_hash, signatures)
        finally:
            self._record("wallet_signatures_processed_total", counter.processed)

        if approvals < threshold:
            raise InsufficientApprovals(details={
                "approvals": approvals,
                "threshold": threshold,
            })
        return approvals

    def _consume_nonce(self, nonce: int) -> None:
        self.store.set_nonce(nonce + 1)

    @contextmanager
    def _atomic(self, operation: str) -> Iterator[None]:
        """Run an operation against a store snapshot, restoring it on failure."""
        snapshot = self.store.snapshot()
        try:
            yield
        except Exception as e:
            self.store.restore(snapshot)
            logger.warning(f"{operation} rejected: {e}")
            self._record("wallet_operations_total", labels={"operation": operation, "outcome": type(e).__name__})
            raise
        self._record("wallet_operations_total", labels={"operation": operation, "outcome": "ok"})
        if self._metrics is not None:
            self._metrics.gauge("wallet_nonce", "Current wallet nonce").set(
                self.store.get_nonce(), {"contract": self.contract_id.hex()}
            )

    def _record(self, name: str, amount: float = 1.0, labels: Optional[dict] = None) -> None:
        if self._metrics is None:
            return
        self._metrics.counter(name).increment(amount, labels)


__all__ = ["WalletStateMachine"]
