"""
Console verification sender adapter - Implements VerificationSender protocol.

This module provides a console-based implementation of the domain's
verification sender port. SMS and email delivery are simulated by
logging the code, which is enough for demos and local development.
"""

import logging

from src.domain.account import Account

logger = logging.getLogger(__name__)


class ConsoleVerificationSender:
    """
    Implements VerificationSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def send_verification_code(self, account: Account, code: str) -> None:
        """
        Log the verification code for the account's mobile number and email.

        In production, this would be replaced with SMS and SMTP adapters.
        The code is logged at INFO level to be visible in container logs.

        Args:
            account: Recipient account
            code: 4-digit verification code
        """
        logger.info(
            "[VERIFICATION] Mobile: %s Email: %s Code: %s",
            account.mobile_number,
            account.email_address,
            code,
        )
