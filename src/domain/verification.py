"""
Verification code generation and dispatch.

Produces the 4-digit one-time code used to verify a newly registered
account and hands it to a VerificationSender. Delivery is simulated by
the console adapter; no code is retried here.
"""

import logging
import secrets
from dataclasses import dataclass

from .account import Account
from .ports import CodeGenerator, VerificationSender
from .results import AccountError, ServiceResult

logger = logging.getLogger(__name__)

CODE_MIN = 1000
CODE_MAX = 9999


def generate_verification_code() -> str:
    """
    Generate a cryptographically secure 4-digit verification code.

    Codes fall in 1000-9999 inclusive, so they never carry a leading zero.
    """
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


@dataclass
class VerificationCodeService:
    """
    Creates a verification code and dispatches it for an account.

    The code generator is injectable so tests can supply deterministic codes.
    """

    sender: VerificationSender
    code_generator: CodeGenerator = generate_verification_code

    def generate(self, account: Account) -> ServiceResult:
        """
        Create a code and send it to the account's mobile number and email.

        Args:
            account: Recipient account (may not be persisted yet)

        Returns:
            ok result with the code as data, or a DISPATCH_FAILURE result
            carrying the underlying error text
        """
        try:
            code = self.code_generator()
            self.sender.send_verification_code(account, code)
        except Exception as e:
            logger.error(
                "Verification code dispatch failed for national_id=%s: %s",
                account.national_id,
                e,
            )
            return ServiceResult.fail(
                AccountError.DISPATCH_FAILURE,
                f"Failed to send verification code: {e}",
            )
        return ServiceResult.ok("Verification code sent", data=code)
