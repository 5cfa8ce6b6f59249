"""
Records emitted by wallet operations, and the log that receives them.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union
from pydantic import BaseModel, Field

from ..types import U64_MAX, Identity


class ExecuteTransactionEvent(BaseModel):
    """Emitted by execute_transaction. nonce is the value consumed."""
    to: Identity
    value: int = Field(..., ge=0, le=U64_MAX)
    data: bytes
    nonce: int = Field(..., ge=0, le=U64_MAX)

    model_config = {"frozen": True}


class TransferEvent(BaseModel):
    """Emitted by transfer. nonce is the value consumed."""
    to: Identity
    asset_id: bytes = Field(..., alias="assetId")
    value: int = Field(..., ge=0, le=U64_MAX)
    nonce: int = Field(..., ge=0, le=U64_MAX)

    model_config = {"frozen": True, "populate_by_name": True}


class CancelEvent(BaseModel):
    """
    Reserved record type.

    Part of the event vocabulary but no wallet operation emits it.
    """
    cancelled_nonce: int = Field(..., alias="cancelledNonce", ge=0, le=U64_MAX)
    user: bytes

    model_config = {"frozen": True, "populate_by_name": True}


WalletEvent = Union[ExecuteTransactionEvent, TransferEvent, CancelEvent]


class EventLog(ABC):
    """Receiver of emitted records."""

    @abstractmethod
    def log(self, event: WalletEvent) -> None:
        pass


class InMemoryEventLog(EventLog):
    """Keeps emitted records in order."""

    def __init__(self):
        self.events: List[WalletEvent] = []

    def log(self, event: WalletEvent) -> None:
        self.events.append(event)

    def last(self) -> WalletEvent:
        return self.events[-1]

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [
            {"type": type(e).__name__, **e.model_dump(by_alias=True)}
            for e in self.events
        ]

    def __len__(self) -> int:
        return len(self.events)


__all__ = [
    "ExecuteTransactionEvent",
    "TransferEvent",
    "CancelEvent",
    "WalletEvent",
    "EventLog",
    "InMemoryEventLog",
]
