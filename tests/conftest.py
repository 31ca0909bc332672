"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory AccountRepository mimicking the Postgres adapter
- A controllable clock
- A deterministic code generator
- A fully wired AccountLifecycleService
"""

import copy
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from unittest.mock import Mock

import pytest

from src.domain.account import Account
from src.domain.exceptions import AccountAlreadyExists
from src.domain.lifecycle import AccountLifecycleService
from src.domain.verification import VerificationCodeService

START_TIME = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)


class InMemoryAccountRepository:
    """In-memory repository enforcing the national_id uniqueness constraint."""

    def __init__(self) -> None:
        self._rows: dict[str, Account] = {}
        self._next_id = 1

    def get_by_national_id(self, national_id: str) -> Account | None:
        row = self._rows.get(national_id)
        # Return a copy so unsaved mutations are not visible, as with a database
        return copy.deepcopy(row) if row is not None else None

    def add(self, account: Account) -> Account:
        if account.national_id in self._rows:
            raise AccountAlreadyExists(account.national_id)
        account.id = self._next_id
        self._next_id += 1
        self._rows[account.national_id] = copy.deepcopy(account)
        return account

    def update(self, account: Account) -> None:
        self._rows[account.national_id] = copy.deepcopy(account)

    def stored(self, national_id: str) -> Account:
        """Direct view of the stored row for assertions."""
        return self._rows[national_id]

    def count(self) -> int:
        return len(self._rows)


class FakeClock:
    """Clock returning a fixed time until advanced."""

    def __init__(self, now: datetime = START_TIME) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class SequenceCodeGenerator:
    """Yields codes from a fixed sequence, then repeats the last one."""

    def __init__(self, *codes: str) -> None:
        self._codes: Iterator[str] = iter(codes)
        self._last = codes[-1]
        self.issued: list[str] = []

    def __call__(self) -> str:
        code = next(self._codes, self._last)
        self.issued.append(code)
        return code


@pytest.fixture
def repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def codes() -> SequenceCodeGenerator:
    return SequenceCodeGenerator("4821", "7350", "1999")


@pytest.fixture
def sender() -> Mock:
    return Mock()


@pytest.fixture
def service(
    repository: InMemoryAccountRepository,
    clock: FakeClock,
    codes: SequenceCodeGenerator,
    sender: Mock,
) -> AccountLifecycleService:
    verification = VerificationCodeService(sender=sender, code_generator=codes)
    return AccountLifecycleService(repository=repository, verification=verification, clock=clock)
