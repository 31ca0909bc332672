"""
Account lifecycle service - Guarded onboarding state machine.

This module contains the core business logic of customer onboarding.
Each step is only allowed once the previous one has completed.

Lifecycle (forward-only)
========================

    Unregistered --register-->                 Unverified
    Unverified   --verify(correct, unexpired)-> Verified
    Verified     --agree_to_privacy_policy-->  Verified + policy flag
    + policy     --setup_pin(matching)-->      Verified + policy + PIN
    + PIN        --setup_biometric-->          fully provisioned

resend_verification is a self-loop on Unverified and Verified: it refreshes
the code and its expiry without changing the lifecycle stage.

Guards run in a fixed order and the first failing one decides the result.
Every operation is a read-check-write sequence with no locking of its own;
only the store's unique constraint on national_id is race-free.

PIN and biometric credentials are not stored. setup_pin does not populate
pin_hash, so setup_biometric fails with PIN_NOT_SETUP until some other
process provides a PIN credential.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta

from .account import Account, utcnow
from .exceptions import AccountAlreadyExists
from .ports import AccountRepository, Clock
from .results import AccountError, ServiceResult
from .verification import VerificationCodeService

logger = logging.getLogger(__name__)

DEFAULT_CODE_TTL = timedelta(minutes=10)


@dataclass
class AccountLifecycleService:
    """
    Domain service orchestrating account onboarding.

    Sole writer of Account records. All failures are returned as
    ServiceResult values; only unexpected store errors propagate.
    """

    repository: AccountRepository
    verification: VerificationCodeService
    clock: Clock = utcnow
    code_ttl: timedelta = DEFAULT_CODE_TTL

    def register(
        self,
        customer_name: str,
        national_id: str,
        mobile_number: str,
        email_address: str,
    ) -> ServiceResult:
        """
        Register a new unverified account and send its verification code.

        Nothing is persisted if code dispatch fails.
        """
        if self.repository.get_by_national_id(national_id) is not None:
            logger.info("Registration rejected, account exists: national_id=%s", national_id)
            return ServiceResult.fail(AccountError.ALREADY_EXISTS)

        now = self.clock()
        account = Account(
            customer_name=customer_name,
            national_id=national_id,
            mobile_number=mobile_number,
            email_address=email_address,
            created_at=now,
        )

        sent = self.verification.generate(account)
        if not sent.success:
            return sent

        account.verification_code = sent.data
        account.verification_code_expiry = now + self.code_ttl

        try:
            self.repository.add(account)
        except AccountAlreadyExists:
            # Lost the race against a concurrent registration
            logger.info("Registration rejected by store: national_id=%s", national_id)
            return ServiceResult.fail(AccountError.ALREADY_EXISTS)

        logger.info("Account registered: national_id=%s id=%s", national_id, account.id)
        return ServiceResult.ok("Verification code sent to your mobile and email")

    def resend_verification(self, national_id: str) -> ServiceResult:
        """
        Issue a new verification code with a fresh expiry.

        Allowed regardless of verification status.
        """
        account = self.repository.get_by_national_id(national_id)
        if account is None:
            return self._not_found("resend_verification", national_id)

        sent = self.verification.generate(account)
        if not sent.success:
            return sent

        now = self.clock()
        account.verification_code = sent.data
        account.verification_code_expiry = now + self.code_ttl
        account.touch(now)
        self.repository.update(account)

        logger.info("Verification code resent: national_id=%s", national_id)
        return ServiceResult.ok("Verification code resent successfully")

    def verify(self, national_id: str, code: str) -> ServiceResult:
        """
        Verify an account with its one-time code.

        A wrong code is reported before expiry is considered, and neither
        failure touches the stored code.
        """
        account = self.repository.get_by_national_id(national_id)
        if account is None:
            return self._not_found("verify", national_id)

        if account.is_verified:
            return self._rejected("verify", national_id, AccountError.ALREADY_VERIFIED)

        stored_code = account.verification_code or ""
        if not stored_code or not secrets.compare_digest(stored_code.encode(), code.encode()):
            return self._rejected("verify", national_id, AccountError.INVALID_CODE)

        now = self.clock()
        if account.is_code_expired(now):
            return self._rejected("verify", national_id, AccountError.EXPIRED)

        account.is_verified = True
        account.touch(now)
        self.repository.update(account)

        logger.info("Account verified: national_id=%s", national_id)
        return ServiceResult.ok("Account verified successfully")

    def agree_to_privacy_policy(self, national_id: str, agreed: bool) -> ServiceResult:
        """Record the customer's privacy-policy answer, true or false."""
        account = self.repository.get_by_national_id(national_id)
        if account is None:
            return self._not_found("agree_to_privacy_policy", national_id)

        if not account.is_verified:
            return self._rejected("agree_to_privacy_policy", national_id, AccountError.NOT_VERIFIED)

        account.privacy_policy_agreed = agreed
        account.touch(self.clock())
        self.repository.update(account)

        logger.info("Privacy policy answer recorded: national_id=%s agreed=%s", national_id, agreed)
        return ServiceResult.ok("Privacy policy agreement updated")

    def setup_pin(self, national_id: str, pin: str, confirm_pin: str) -> ServiceResult:
        """
        Accept a PIN for the account.

        The PIN is checked against its confirmation and then discarded;
        pin_hash is left unset.
        """
        account = self.repository.get_by_national_id(national_id)
        if account is None:
            return self._not_found("setup_pin", national_id)

        if not account.is_verified:
            return self._rejected("setup_pin", national_id, AccountError.NOT_VERIFIED)

        if not account.privacy_policy_agreed:
            return self._rejected("setup_pin", national_id, AccountError.POLICY_NOT_AGREED)

        if not secrets.compare_digest(pin.encode(), confirm_pin.encode()):
            return self._rejected("setup_pin", national_id, AccountError.PIN_MISMATCH)

        # TODO: hash the PIN into pin_hash once a credential store is chosen
        account.touch(self.clock())
        self.repository.update(account)

        logger.info("PIN accepted: national_id=%s", national_id)
        return ServiceResult.ok("PIN setup successfully")

    def setup_biometric(self, national_id: str, fingerprint_payload: str) -> ServiceResult:
        """
        Enable biometric sign-in for an account that has a PIN.

        The fingerprint payload is not stored.
        """
        account = self.repository.get_by_national_id(national_id)
        if account is None:
            return self._not_found("setup_biometric", national_id)

        if not account.is_verified:
            return self._rejected("setup_biometric", national_id, AccountError.NOT_VERIFIED)

        if not account.has_pin:
            return self._rejected("setup_biometric", national_id, AccountError.PIN_NOT_SETUP)

        account.is_biometric_set = True
        account.touch(self.clock())
        self.repository.update(account)

        logger.info("Biometric enabled: national_id=%s", national_id)
        return ServiceResult.ok("Biometric setup successfully")

    def _not_found(self, operation: str, national_id: str) -> ServiceResult:
        return self._rejected(operation, national_id, AccountError.NOT_FOUND)

    def _rejected(self, operation: str, national_id: str, error: AccountError) -> ServiceResult:
        logger.info("%s rejected: national_id=%s reason=%s", operation, national_id, error.value)
        return ServiceResult.fail(error)
