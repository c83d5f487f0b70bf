"""Repository adapters - AddAccount implementations."""

from .memory import InMemoryAccountRepository

__all__ = ["InMemoryAccountRepository"]
