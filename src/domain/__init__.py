"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account onboarding lifecycle: registration,
code verification, privacy-policy consent, PIN and biometric setup.
It defines its own port interfaces for infrastructure abstraction.
"""

from .account import Account
from .exceptions import AccountAlreadyExists, AccountStoreError
from .lifecycle import AccountLifecycleService
from .ports import AccountRepository, Clock, CodeGenerator, VerificationSender
from .results import AccountError, ServiceResult
from .verification import VerificationCodeService, generate_verification_code

__all__ = [
    "Account",
    "AccountAlreadyExists",
    "AccountError",
    "AccountLifecycleService",
    "AccountRepository",
    "AccountStoreError",
    "Clock",
    "CodeGenerator",
    "ServiceResult",
    "VerificationCodeService",
    "VerificationSender",
    "generate_verification_code",
]
