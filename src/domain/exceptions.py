"""
Domain exceptions - Semantic error types for account creation.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class AccountCreationError(Exception):
    """Account could not be created (e.g. email already in use)."""

    pass
