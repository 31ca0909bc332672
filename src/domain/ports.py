"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from datetime import datetime
from typing import Protocol

from .account import Account


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def get_by_national_id(self, national_id: str) -> Account | None:
        """
        Load the account registered under a national identifier.

        Args:
            national_id: Business key of the account

        Returns:
            The stored Account, or None if no account matches
        """
        ...

    def add(self, account: Account) -> Account:
        """
        Insert a new account.

        The store's uniqueness constraint on national_id is the real guard
        against duplicate registration; any service-level lookup before the
        insert is advisory only.

        Args:
            account: Account without an id

        Returns:
            The same account with its store-assigned id populated

        Raises:
            AccountAlreadyExists: If national_id is already taken
        """
        ...

    def update(self, account: Account) -> None:
        """
        Persist all mutable fields of an existing account.

        Args:
            account: Account previously returned by this repository
        """
        ...


class VerificationSender(Protocol):
    """Port interface for verification code delivery."""

    def send_verification_code(self, account: Account, code: str) -> None:
        """
        Deliver a verification code to the account's mobile number and email.

        Args:
            account: Recipient account
            code: 4-digit verification code
        """
        ...


class CodeGenerator(Protocol):
    """Produces a fresh one-time verification code."""

    def __call__(self) -> str: ...


class Clock(Protocol):
    """Returns the current time as an aware UTC datetime."""

    def __call__(self) -> datetime: ...
