"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import AccountModel, AddAccountModel


class AddAccount(Protocol):
    """Port interface for the account-creation use case."""

    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Create an account from the validated signup data.

        Args:
            account: Name, email and password of the new account

        Returns:
            The created account record

        Raises:
            Exception: Any failure; callers treat it as unexpected
        """
        ...
