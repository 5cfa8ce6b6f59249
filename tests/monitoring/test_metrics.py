"""
Metrics registry and wallet instrumentation.
"""

import pytest

from helpers import mk_b256

from multisig_wallet.config import WalletConfig
from multisig_wallet.monitoring.metrics import Counter, Gauge, MetricsRegistry, MetricType
from multisig_wallet.runtime.errors import ThresholdCannotBeZero
from multisig_wallet.signers.signer import sign_all
from multisig_wallet.types import Identity
from multisig_wallet.wallet.state_machine import WalletStateMachine


def test_counter_with_labels():
    c = Counter("ops")
    c.increment()
    c.increment(2, {"outcome": "ok"})
    assert c.get_value() == 1
    assert c.get_value({"outcome": "ok"}) == 2
    assert c.metric_type == MetricType.COUNTER

    with pytest.raises(ValueError):
        c.increment(-1)


def test_gauge_set():
    g = Gauge("nonce")
    g.set(5)
    g.set(7)
    assert g.get_value() == 7


def test_registry_get_or_create():
    registry = MetricsRegistry()
    assert registry.counter("a") is registry.counter("a")
    with pytest.raises(ValueError):
        registry.gauge("a")

    registry.counter("a").increment()
    assert registry.collect_all() == {"a": {"": 1.0}}
    registry.reset_all()
    assert registry.counter("a").get_value() == 0
    registry.clear()
    assert registry.list_metrics() == []


def test_wallet_records_outcomes(metrics_registry, signers):
    wallet = WalletStateMachine(mk_b256(1), metrics=metrics_registry)
    with pytest.raises(ThresholdCannotBeZero):
        wallet.constructor([s.as_user(1) for s in signers], threshold=0)
    wallet.constructor([s.as_user(1) for s in signers], threshold=2)

    to = Identity.address(mk_b256(2))
    data = mk_b256(3)
    tx_hash = wallet.transaction_hash(to, 0, data, wallet.nonce())
    wallet.execute_transaction(to, 0, data, sign_all(signers, tx_hash))

    ops = metrics_registry.get_metric("wallet_operations_total")
    assert ops.get_value({"operation": "constructor", "outcome": "ThresholdCannotBeZero"}) == 1
    assert ops.get_value({"operation": "constructor", "outcome": "ok"}) == 1
    assert ops.get_value({"operation": "execute_transaction", "outcome": "ok"}) == 1
    assert metrics_registry.get_metric("wallet_signatures_processed_total").get_value() == 2
    assert metrics_registry.get_metric("wallet_nonce").get_value({"contract": mk_b256(1).hex()}) == 2


def test_metrics_can_be_disabled(metrics_registry, signers):
    config = WalletConfig(contract_id=mk_b256(1), metrics_enabled=False)
    wallet = WalletStateMachine(config, metrics=metrics_registry)
    wallet.constructor([s.as_user(1) for s in signers], threshold=1)
    assert metrics_registry.list_metrics() == []
