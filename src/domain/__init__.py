"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account records and the account-creation port
consumed by the signup controller. It defines its own port interfaces
for infrastructure abstraction, ensuring true hexagonal architecture
decoupling.
"""

from .exceptions import AccountCreationError
from .models import AccountModel, AddAccountModel
from .ports import AddAccount

__all__ = [
    "AccountCreationError",
    "AccountModel",
    "AddAccount",
    "AddAccountModel",
]
