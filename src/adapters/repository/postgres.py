"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness of the national identifier is enforced by the UNIQUE constraint
on accounts.national_id. A racing duplicate insert fails at commit time with
UniqueViolation, which is translated to AccountAlreadyExists so the domain
can report it like any other duplicate registration.
"""

import logging
from pathlib import Path

from psycopg import errors
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from src.domain.account import Account
from src.domain.exceptions import AccountAlreadyExists

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, customer_name, national_id, mobile_number, email_address, is_verified, "
    "verification_code, verification_code_expiry, privacy_policy_agreed, pin_hash, "
    "is_biometric_set, created_at, updated_at"
)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def get_by_national_id(self, national_id: str) -> Account | None:
        """
        Fetch an account by national identifier.

        Args:
            national_id: Business key of the account

        Returns:
            Account mapped from the row, or None if absent
        """
        sql = f"SELECT {_COLUMNS} FROM accounts WHERE national_id = %s"

        with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            cursor.execute(sql, (national_id,))
            row = cursor.fetchone()

        if row is None:
            return None
        return Account(**row)

    def add(self, account: Account) -> Account:
        """
        Insert a new account row.

        Args:
            account: Account without an id

        Returns:
            The account with id populated from the database

        Raises:
            AccountAlreadyExists: If the national_id UNIQUE constraint rejects the row
        """
        sql = """
            INSERT INTO accounts (
                customer_name, national_id, mobile_number, email_address, is_verified,
                verification_code, verification_code_expiry, privacy_policy_agreed,
                pin_hash, is_biometric_set, created_at, updated_at
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id
        """
        params = (
            account.customer_name,
            account.national_id,
            account.mobile_number,
            account.email_address,
            account.is_verified,
            account.verification_code,
            account.verification_code_expiry,
            account.privacy_policy_agreed,
            account.pin_hash,
            account.is_biometric_set,
            account.created_at,
            account.updated_at,
        )

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation:
            raise AccountAlreadyExists(account.national_id) from None

        account.id = row[0]
        return account

    def update(self, account: Account) -> None:
        """
        Write back every mutable field of an existing account.

        The surrogate id and created_at are never rewritten.

        Args:
            account: Account loaded from this repository
        """
        sql = """
            UPDATE accounts
            SET customer_name = %s,
                mobile_number = %s,
                email_address = %s,
                is_verified = %s,
                verification_code = %s,
                verification_code_expiry = %s,
                privacy_policy_agreed = %s,
                pin_hash = %s,
                is_biometric_set = %s,
                updated_at = %s
            WHERE national_id = %s
        """
        params = (
            account.customer_name,
            account.mobile_number,
            account.email_address,
            account.is_verified,
            account.verification_code,
            account.verification_code_expiry,
            account.privacy_policy_agreed,
            account.pin_hash,
            account.is_biometric_set,
            account.updated_at,
            account.national_id,
        )

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, params)
            conn.commit()
            if cursor.rowcount != 1:
                logger.warning(
                    "Update matched %d rows for national_id=%s",
                    cursor.rowcount,
                    account.national_id,
                )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
