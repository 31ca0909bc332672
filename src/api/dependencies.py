"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from datetime import timedelta

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.messaging.console import ConsoleVerificationSender
from src.adapters.repository.postgres import PostgresAccountRepository
from src.config.settings import Settings, get_settings
from src.domain.lifecycle import AccountLifecycleService
from src.domain.verification import VerificationCodeService

# Module-level singleton - ConsoleVerificationSender is stateless
_verification_sender = ConsoleVerificationSender()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_verification_sender() -> ConsoleVerificationSender:
    """Get console verification sender (singleton)."""
    return _verification_sender


def get_app_settings() -> Settings:
    return get_settings()


def get_account_service(request: Request) -> AccountLifecycleService:
    """
    Create the account lifecycle service with injected dependencies.

    Wires together the repository, code dispatch and the configured code TTL.
    """
    settings = get_settings()
    repository = get_repository(request)
    verification = VerificationCodeService(sender=get_verification_sender())
    return AccountLifecycleService(
        repository=repository,
        verification=verification,
        code_ttl=timedelta(minutes=settings.verification_code_ttl_minutes),
    )
