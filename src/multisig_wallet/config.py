"""
Wallet configuration.

Options for a WalletStateMachine, loadable from keyword arguments, a dict
(camelCase aliases accepted) or environment variables.
"""

from __future__ import annotations
import os
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator

from .types import parse_hex_bytes

_TRUE_VALUES = {"1", "true", "yes", "on"}


class WalletConfig(BaseModel):
    """
    Options for a wallet instance.

    contract_id is the domain identifier bound into every transaction hash.
    """
    contract_id: bytes = Field(
        ...,
        alias="contractId",
        description="32-byte identifier of this wallet instance"
    )
    early_exit: bool = Field(
        default=True,
        alias="earlyExit",
        description="Stop counting approvals once the threshold is reached"
    )
    metrics_enabled: bool = Field(
        default=True,
        alias="metricsEnabled",
        description="Record operation metrics in the global registry"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("contract_id", mode="before")
    @classmethod
    def parse_contract_id(cls, v: Any) -> Any:
        return parse_hex_bytes(v)

    @field_validator("contract_id")
    @classmethod
    def check_contract_id(cls, v: bytes) -> bytes:
        if len(v) != 32:
            raise ValueError(f"contract_id must be 32 bytes, got {len(v)}")
        return v

    @classmethod
    def from_env(cls, prefix: str = "MULTISIG_", environ: Optional[Dict[str, str]] = None) -> WalletConfig:
        """
        Load configuration from environment variables.

        Reads <prefix>CONTRACT_ID (hex, required), <prefix>EARLY_EXIT and
        <prefix>METRICS_ENABLED.

        Raises:
            KeyError: If the contract id variable is missing
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {"contract_id": env[f"{prefix}CONTRACT_ID"]}
        for name in ("early_exit", "metrics_enabled"):
            raw = env.get(f"{prefix}{name.upper()}")
            if raw is not None:
                values[name] = raw.strip().lower() in _TRUE_VALUES
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "contractId": self.contract_id.hex(),
            "earlyExit": self.early_exit,
            "metricsEnabled": self.metrics_enabled,
        }


__all__ = ["WalletConfig"]
