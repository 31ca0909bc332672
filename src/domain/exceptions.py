"""
Domain exceptions - Semantic error types raised by infrastructure ports.

Business rule violations are reported as ServiceResult failures, not
exceptions. These types exist for the cases where an adapter has to tell
the domain something went wrong without leaking infrastructure details.
"""


class AccountStoreError(Exception):
    """Base class for account persistence errors."""

    pass


class AccountAlreadyExists(AccountStoreError):
    """The store rejected an insert because the national id is taken."""

    pass
