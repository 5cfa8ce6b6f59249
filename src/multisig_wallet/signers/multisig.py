r"""
Weighted approval counting for multisig operations.

Signatures are processed in the order supplied. Each one is formatted,
recovered to a signer address, and that signer's weight is added to a
running total. Recovered addresses must be strictly increasing as unsigned
256-bit integers, which rejects duplicate signers and the zero address
without any auxiliary set. The caller is responsible for ordering; the
counter never sorts.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, Union
import logging

from ..runtime.errors import IncorrectSignerOrdering
from ..types import SignatureData
from .message import format_message
from .recovery import recover_signer

if TYPE_CHECKING:
    from ..wallet.store import WalletStore

logger = logging.getLogger(__name__)

WeightSource = Union[Mapping[bytes, int], "WalletStore", Callable[[bytes], int]]


def _weight_lookup(weights: WeightSource) -> Callable[[bytes], int]:
    from ..wallet.store import WalletStore

    if isinstance(weights, WalletStore):
        return weights.get_weight
    if isinstance(weights, Mapping):
        return lambda address: weights.get(address, 0)
    if callable(weights):
        return weights
    raise TypeError(f"Unsupported weight source: {type(weights).__name__}")


class ApprovalCounter:
    """
    Accumulates signer weight for one transaction hash.

    Unknown signers contribute 0. Counting stops as soon as the total reaches
    the threshold; signatures after that point are not recovered at all.
    """

    def __init__(self, weights: WeightSource, threshold: int, early_exit: bool = True):
        """
        Initialize counter.

        Args:
            weights: Mapping address -> weight, a WalletStore, or a callable returning the weight
            threshold: Weight at which counting may stop
            early_exit: Stop as soon as the threshold is reached
        """
        self._weight_of = _weight_lookup(weights)
        self.threshold = threshold
        self.early_exit = early_exit
        self.processed = 0

    def count_approvals(self, transaction_hash: bytes, signatures: Iterable[SignatureData]) -> int:
        """
        Count weighted approvals for a transaction hash.

        Args:
            transaction_hash: 32-byte transaction hash
            signatures: Signatures ordered by increasing recovered signer

        Returns:
            Accumulated approval weight

        Raises:
            IncorrectSignerOrdering: If a recovered signer is not greater than the previous one
            SignatureRecoveryFailed: If a signature cannot be recovered
        """
        total = 0
        previous_signer = 0
        self.processed = 0

        for index, sig in enumerate(signatures):
            message_hash = format_message(transaction_hash, sig.format, sig.prefix)
            signer = recover_signer(sig.signature, message_hash, sig.wallet_type)
            self.processed += 1

            signer_value = int.from_bytes(signer, "big")
            if signer_value <= previous_signer:
                raise IncorrectSignerOrdering(details={
                    "index": index,
                    "signer": signer.hex(),
                })
            previous_signer = signer_value

            weight = self._weight_of(signer)
            total += weight
            logger.debug(f"Signature {index}: signer 0x{signer.hex()} weight {weight} total {total}/{self.threshold}")

            if self.early_exit and total >= self.threshold:
                break

        return total

    def is_approved(self, transaction_hash: bytes, signatures: Iterable[SignatureData]) -> bool:
        """Check whether the signatures reach the threshold."""
        return self.count_approvals(transaction_hash, signatures) >= self.threshold


def count_approvals(transaction_hash: bytes, signatures: Iterable[SignatureData],
                    weights: WeightSource, threshold: int,
                    early_exit: bool = True) -> int:
    """
    Count weighted approvals (functional form of ApprovalCounter).

    Args:
        transaction_hash: 32-byte transaction hash
        signatures: Signatures ordered by increasing recovered signer
        weights: Mapping address -> weight, a WalletStore, or a callable returning the weight
        threshold: Weight at which counting may stop
        early_exit: Stop as soon as the threshold is reached

    Returns:
        Accumulated approval weight
    """
    return ApprovalCounter(weights, threshold, early_exit).count_approvals(transaction_hash, signatures)


__all__ = [
    "ApprovalCounter",
    "count_approvals",
]
