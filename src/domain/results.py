"""
Service results - Success/failure values returned by the account services.

Business rule violations are not raised. Each operation returns a
ServiceResult carrying a human-readable message and, on failure, the
AccountError kind so that callers can branch without parsing text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AccountError(str, Enum):
    """
    Failure kinds of the onboarding lifecycle.

    Values are stable snake_case identifiers exposed in API error payloads.
    """

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    ALREADY_VERIFIED = "already_verified"
    INVALID_CODE = "invalid_code"
    EXPIRED = "expired"
    NOT_VERIFIED = "not_verified"
    POLICY_NOT_AGREED = "policy_not_agreed"
    PIN_MISMATCH = "pin_mismatch"
    PIN_NOT_SETUP = "pin_not_setup"
    DISPATCH_FAILURE = "dispatch_failure"

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_DEFAULT_MESSAGES = {
    AccountError.ALREADY_EXISTS: "Account already exists",
    AccountError.NOT_FOUND: "Account not found",
    AccountError.ALREADY_VERIFIED: "Account is already verified",
    AccountError.INVALID_CODE: "Invalid verification code",
    AccountError.EXPIRED: "Verification code has expired",
    AccountError.NOT_VERIFIED: "Account is not verified",
    AccountError.POLICY_NOT_AGREED: "Privacy policy not agreed",
    AccountError.PIN_MISMATCH: "PIN and Confirm PIN do not match",
    AccountError.PIN_NOT_SETUP: "PIN not setup",
    AccountError.DISPATCH_FAILURE: "Failed to send verification code",
}


@dataclass(frozen=True)
class ServiceResult:
    """Outcome of a service operation."""

    success: bool
    message: str
    data: Any = None
    error: AccountError | None = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ServiceResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: AccountError, message: str | None = None) -> "ServiceResult":
        """Build a failed result, defaulting the message to the error's text."""
        return cls(success=False, message=message or error.default_message, error=error)
