"""
Unit tests for InMemoryAccountRepository adapter.

Tests verify the repository implements the AddAccount protocol,
assigns identifiers and rejects duplicate emails.
"""

import logging
import re

import pytest

from src.adapters.repository.memory import InMemoryAccountRepository
from src.domain.exceptions import AccountCreationError
from src.domain.models import AccountModel, AddAccountModel

pytestmark = pytest.mark.asyncio


def make_input(email: str = "user@example.com") -> AddAccountModel:
    return AddAccountModel(name="User", email=email, password="secret123")


class TestAdd:
    """Tests for add."""

    async def test_returns_account_with_public_attributes(self) -> None:
        """Created account carries name and email but no password."""
        repo = InMemoryAccountRepository()

        account = await repo.add(make_input())

        assert isinstance(account, AccountModel)
        assert account.name == "User"
        assert account.email == "user@example.com"
        assert not hasattr(account, "password")

    async def test_assigns_hex_identifier(self) -> None:
        """Identifier is a 32-character uuid4 hex string."""
        repo = InMemoryAccountRepository()

        account = await repo.add(make_input())

        assert re.match(r"^[0-9a-f]{32}$", account.id)

    async def test_identifiers_are_unique(self) -> None:
        """Each account gets its own identifier."""
        repo = InMemoryAccountRepository()

        first = await repo.add(make_input("a@example.com"))
        second = await repo.add(make_input("b@example.com"))

        assert first.id != second.id
        assert len(repo) == 2

    async def test_stored_account_retrievable(self) -> None:
        """get returns the stored record by id."""
        repo = InMemoryAccountRepository()

        account = await repo.add(make_input())

        assert repo.get(account.id) == account
        assert repo.get("unknown") is None

    async def test_duplicate_email_rejected(self) -> None:
        """Second account with the same email raises AccountCreationError."""
        repo = InMemoryAccountRepository()
        await repo.add(make_input("user@example.com"))

        with pytest.raises(AccountCreationError):
            await repo.add(make_input("  USER@Example.com "))

        assert len(repo) == 1

    async def test_logs_creation_without_password(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Creation is logged at INFO with id and email only."""
        repo = InMemoryAccountRepository()

        with caplog.at_level(logging.INFO):
            account = await repo.add(make_input())

        assert "[ACCOUNT]" in caplog.text
        assert account.id in caplog.text
        assert "user@example.com" in caplog.text
        assert "secret123" not in caplog.text
