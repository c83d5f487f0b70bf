"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
controllers and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Request

from src.adapters.repository.memory import InMemoryAccountRepository
from src.adapters.validation.email_syntax import EmailValidatorAdapter
from src.config.settings import get_settings
from src.presentation.controllers.signup import SignUpController


@lru_cache
def get_email_validator() -> EmailValidatorAdapter:
    """Get email validator adapter (singleton, stateless)."""
    settings = get_settings()
    return EmailValidatorAdapter(check_deliverability=settings.email_check_deliverability)


def get_account_repository(request: Request) -> InMemoryAccountRepository:
    """
    Get account repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.accounts


def get_signup_controller(request: Request) -> SignUpController:
    """
    Create signup controller with injected dependencies.

    Wires together the email validator and account repository.
    """
    return SignUpController(
        email_validator=get_email_validator(),
        add_account=get_account_repository(request),
    )
