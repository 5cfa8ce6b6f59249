"""
WalletConfig parsing from keyword arguments, aliases and the environment.
"""

import pytest
from pydantic import ValidationError

from multisig_wallet.config import WalletConfig

CONTRACT_HEX = "ab" * 32


def test_defaults():
    config = WalletConfig(contract_id=bytes.fromhex(CONTRACT_HEX))
    assert config.early_exit is True
    assert config.metrics_enabled is True


def test_hex_and_aliases():
    config = WalletConfig(**{"contractId": "0x" + CONTRACT_HEX, "earlyExit": False})
    assert config.contract_id == bytes.fromhex(CONTRACT_HEX)
    assert config.early_exit is False
    assert config.to_dict()["contractId"] == CONTRACT_HEX


def test_contract_id_length():
    with pytest.raises(ValidationError):
        WalletConfig(contract_id=b"\x01" * 31)
    with pytest.raises(ValidationError):
        WalletConfig(contract_id="not hex")


def test_from_env():
    env = {
        "MULTISIG_CONTRACT_ID": CONTRACT_HEX,
        "MULTISIG_EARLY_EXIT": "false",
        "MULTISIG_METRICS_ENABLED": "1",
    }
    config = WalletConfig.from_env(environ=env)
    assert config.contract_id == bytes.fromhex(CONTRACT_HEX)
    assert config.early_exit is False
    assert config.metrics_enabled is True


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("WALLET_CONTRACT_ID", CONTRACT_HEX)
    config = WalletConfig.from_env(prefix="WALLET_")
    assert config.contract_id == bytes.fromhex(CONTRACT_HEX)


def test_from_env_requires_contract_id():
    with pytest.raises(KeyError):
        WalletConfig.from_env(environ={})
