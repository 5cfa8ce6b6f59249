"""
Multisig Wallet Error Model

Every failure of a wallet operation is a hard abort of the whole invocation.
Each reason is a distinct exception class carrying a stable error code so a
caller can tell them apart without parsing messages.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Wallet error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Initialization errors (100-199)
    CANNOT_REINITIALIZE = 100
    THRESHOLD_CANNOT_BE_ZERO = 101
    ADDRESS_CANNOT_BE_ZERO = 102
    WEIGHTING_CANNOT_BE_ZERO = 103

    # Execution errors (200-299)
    NOT_INITIALIZED = 200
    INSUFFICIENT_APPROVALS = 201
    INSUFFICIENT_ASSET_AMOUNT = 202
    INCORRECT_SIGNER_ORDERING = 203

    # Signature errors (300-399)
    SIGNATURE_RECOVERY_FAILED = 300
    INVALID_KEY = 301


class WalletError(Exception):
    """
    Base class for all wallet errors.

    Provides structured error information: a code, a message, optional
    details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a wallet error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WalletError':
        """Create error from dictionary representation."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        error_class = ERROR_CODE_MAP.get(code)
        if error_class is not None:
            return error_class(message, details=details)
        return cls(message, code, details)


# Initialization errors

class InitError(WalletError):
    """Errors raised by the one-time constructor operation."""


class CannotReinitialize(InitError):
    """The wallet has already been initialized."""

    def __init__(self, message: str = "Wallet is already initialized",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CANNOT_REINITIALIZE, details, cause)


class ThresholdCannotBeZero(InitError):
    """A zero threshold would authorize anything."""

    def __init__(self, message: str = "Threshold cannot be zero",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.THRESHOLD_CANNOT_BE_ZERO, details, cause)


class AddressCannotBeZero(InitError):
    """A user was supplied with the zero address."""

    def __init__(self, message: str = "User address cannot be zero",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ADDRESS_CANNOT_BE_ZERO, details, cause)


class WeightingCannotBeZero(InitError):
    """A user was supplied with a zero weight."""

    def __init__(self, message: str = "User weighting cannot be zero",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.WEIGHTING_CANNOT_BE_ZERO, details, cause)


# Execution errors

class ExecutionError(WalletError):
    """Errors raised by execute_transaction and transfer."""


class NotInitialized(ExecutionError):
    """The wallet has not been initialized yet."""

    def __init__(self, message: str = "Wallet is not initialized",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.NOT_INITIALIZED, details, cause)


class InsufficientApprovals(ExecutionError):
    """Approval weight is below the threshold."""

    def __init__(self, message: str = "Insufficient approvals",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INSUFFICIENT_APPROVALS, details, cause)


class InsufficientAssetAmount(ExecutionError):
    """Requested transfer exceeds the wallet's holdings of the asset."""

    def __init__(self, message: str = "Insufficient asset amount",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INSUFFICIENT_ASSET_AMOUNT, details, cause)


class IncorrectSignerOrdering(ExecutionError):
    """Recovered signers are not strictly increasing."""

    def __init__(self, message: str = "Signers must be supplied in strictly increasing address order",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INCORRECT_SIGNER_ORDERING, details, cause)


# Signature errors

class SignatureError(WalletError):
    """Errors raised while handling signatures."""


class SignatureRecoveryFailed(SignatureError):
    """The signer could not be recovered from a signature."""

    def __init__(self, message: str = "Signature recovery failed",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNATURE_RECOVERY_FAILED, details, cause)


ERROR_CODE_MAP = {
    ErrorCode.CANNOT_REINITIALIZE: CannotReinitialize,
    ErrorCode.THRESHOLD_CANNOT_BE_ZERO: ThresholdCannotBeZero,
    ErrorCode.ADDRESS_CANNOT_BE_ZERO: AddressCannotBeZero,
    ErrorCode.WEIGHTING_CANNOT_BE_ZERO: WeightingCannotBeZero,
    ErrorCode.NOT_INITIALIZED: NotInitialized,
    ErrorCode.INSUFFICIENT_APPROVALS: InsufficientApprovals,
    ErrorCode.INSUFFICIENT_ASSET_AMOUNT: InsufficientAssetAmount,
    ErrorCode.INCORRECT_SIGNER_ORDERING: IncorrectSignerOrdering,
    ErrorCode.SIGNATURE_RECOVERY_FAILED: SignatureRecoveryFailed,
}


__all__ = [
    "ErrorCode",
    "WalletError",
    "InitError",
    "CannotReinitialize",
    "ThresholdCannotBeZero",
    "AddressCannotBeZero",
    "WeightingCannotBeZero",
    "ExecutionError",
    "NotInitialized",
    "InsufficientApprovals",
    "InsufficientAssetAmount",
    "IncorrectSignerOrdering",
    "SignatureError",
    "SignatureRecoveryFailed",
    "ERROR_CODE_MAP",
]
