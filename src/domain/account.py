"""
Account entity - The single aggregate of the onboarding flow.

One Account exists per national identifier. It is created unverified by
registration and mutated in place by each later onboarding step.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


@dataclass
class Account:
    """
    Onboarding account keyed on the customer's national identifier.

    Lifecycle stages are derived from the flags rather than stored:
    unverified -> verified -> policy agreed -> PIN set -> biometric set.
    """

    customer_name: str
    national_id: str
    mobile_number: str
    email_address: str
    id: int | None = None
    is_verified: bool = False
    verification_code: str | None = None
    verification_code_expiry: datetime | None = None
    privacy_policy_agreed: bool = False
    pin_hash: str | None = None
    is_biometric_set: bool = False
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    @property
    def has_pin(self) -> bool:
        """True once a PIN credential has been stored."""
        return bool(self.pin_hash)

    def is_code_expired(self, now: datetime) -> bool:
        """A code with no recorded expiry is treated as expired."""
        if self.verification_code_expiry is None:
            return True
        return now > self.verification_code_expiry

    def touch(self, now: datetime) -> None:
        self.updated_at = now
