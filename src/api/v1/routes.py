"""
API v1 routes.

Defines REST endpoints for the signup API.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from src.api.adapter import adapt_route
from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse
from src.presentation.controllers.signup import SignUpController

router = APIRouter(tags=["v1"])


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new account",
    description="Submit name, email, password and passwordConfirmation. "
    "Fields are checked in that order and the first problem is reported.",
)
async def signup(
    payload: dict[str, Any] = Body(...),
    controller: SignUpController = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create an account.

    - **name**: Display name
    - **email**: Well-formed email address
    - **password**: Password
    - **passwordConfirmation**: Must equal password

    Returns the created account on success.
    """
    return await adapt_route(controller, payload)
