"""
Shared fixtures: a contract id, three deterministic signers in address
order, and a wallet wired to in-memory collaborators.
"""

import sys
from pathlib import Path

import pytest

# Make the helpers package importable from every test directory
sys.path.insert(0, str(Path(__file__).parent))

from helpers import mk_b256, mk_signers

from multisig_wallet.monitoring.metrics import MetricsRegistry
from multisig_wallet.wallet.ledger import InMemoryAssetLedger
from multisig_wallet.wallet.state_machine import WalletStateMachine


@pytest.fixture
def contract_id():
    """Domain identifier of the wallet under test."""
    return mk_b256(0xC0FFEE)


@pytest.fixture
def signers():
    """Three native signers A < B < C by address."""
    return mk_signers(3)


@pytest.fixture
def metrics_registry():
    """Provide a private metrics registry for testing."""
    return MetricsRegistry()


@pytest.fixture
def ledger():
    return InMemoryAssetLedger()


@pytest.fixture
def wallet(contract_id, ledger, metrics_registry):
    """Uninitialized wallet."""
    return WalletStateMachine(contract_id, ledger=ledger, metrics=metrics_registry)


@pytest.fixture
def active_wallet(wallet, signers):
    """Wallet with A, B, C at weight 1 and threshold 2."""
    wallet.constructor([s.as_user(1) for s in signers], threshold=2)
    return wallet
