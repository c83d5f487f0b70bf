"""
Domain models - Account records exchanged with the account-creation port.

Plain dataclasses with no framework dependencies. The presentation layer
builds AddAccountModel from a signup payload; AccountModel is produced by
the AddAccount implementation and passed back untouched.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountModel:
    """Input for account creation (password confirmation is never included)."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountModel:
    """Created account record: identifier plus public attributes."""

    id: str
    name: str
    email: str
