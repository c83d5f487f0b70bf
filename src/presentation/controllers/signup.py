"""
Signup controller - Validates a signup payload and dispatches account creation.

Validation runs in a fixed order and stops at the first failure:

1. name, email, password, passwordConfirmation present (non-empty)
2. email is well-formed (EmailValidator)
3. password equals passwordConfirmation
4. account created (AddAccount) -> 200 with the created record

Only the two collaborator calls are guarded; anything they raise is
logged and reported as an opaque 500.
"""

import logging
from dataclasses import dataclass

from src.domain.models import AddAccountModel
from src.domain.ports import AddAccount

from ..errors import InvalidParamError, MissingParamError
from ..helpers import bad_request, ok, server_error
from ..protocols import EmailValidator, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


@dataclass
class SignUpController:
    """
    Controller for the signup endpoint.

    Collaborators are injected at construction; the controller holds no
    per-request state, so one instance can serve any number of calls.
    """

    email_validator: EmailValidator
    add_account: AddAccount

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """
        Handle a signup request.

        Args:
            request: Envelope whose body holds the signup fields

        Returns:
            400 with MissingParamError/InvalidParamError, 500 with
            ServerError, or 200 with the created AccountModel
        """
        body = request.body or {}
        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return bad_request(MissingParamError(field))

        name = body["name"]
        email = body["email"]
        password = body["password"]

        try:
            email_is_valid = self.email_validator.is_valid(email)
        except Exception:
            logger.exception("Email validator failed")
            return server_error()
        if not email_is_valid:
            return bad_request(InvalidParamError("email"))

        if password != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            account = await self.add_account.add(
                AddAccountModel(name=name, email=email, password=password)
            )
        except Exception:
            logger.exception("Account creation failed")
            return server_error()
        return ok(account)
