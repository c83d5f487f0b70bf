"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid signup payload
- Mocked collaborators (email validator, account creator)
- A controller wired with those mocks
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.models import AccountModel
from src.presentation.controllers.signup import SignUpController


@pytest.fixture
def signup_body() -> dict[str, str]:
    """Signup payload that passes every check."""
    return {
        "name": "any_name",
        "email": "any_email@example.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }


@pytest.fixture
def fake_account() -> AccountModel:
    """Account record returned by the mocked account creator."""
    return AccountModel(id="valid_id", name="valid_name", email="valid_email@example.com")


@pytest.fixture
def email_validator() -> Mock:
    """Email validator stub reporting every address as valid."""
    validator = Mock()
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def add_account(fake_account: AccountModel) -> Mock:
    """Account creator stub resolving to fake_account."""
    creator = Mock()
    creator.add = AsyncMock(return_value=fake_account)
    return creator


@pytest.fixture
def controller(email_validator: Mock, add_account: Mock) -> SignUpController:
    """SignUpController wired with mocked collaborators."""
    return SignUpController(email_validator=email_validator, add_account=add_account)
