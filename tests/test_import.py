"""Test basic imports from the package."""


def test_main_import():
    """Test that the main package imports successfully."""
    import multisig_wallet
    assert multisig_wallet.__version__ == "0.1.0"
    assert hasattr(multisig_wallet, "WalletStateMachine")
    assert hasattr(multisig_wallet, "ApprovalCounter")
    assert hasattr(multisig_wallet, "transaction_hash")


def test_signers_import():
    """Test signers module imports."""
    import multisig_wallet.signers as signers
    assert hasattr(signers, "format_message")
    assert hasattr(signers, "recover_signer")
    assert hasattr(signers, "count_approvals")


def test_errors_import():
    """Test error classes are exported at top level."""
    import multisig_wallet
    assert issubclass(multisig_wallet.SignatureRecoveryFailed, multisig_wallet.WalletError)
    assert issubclass(multisig_wallet.IncorrectSignerOrdering, multisig_wallet.ExecutionError)
