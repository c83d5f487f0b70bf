"""
Presentation layer - Transport-agnostic controllers.

Controllers consume HttpRequest envelopes and return HttpResponse
envelopes. No web framework is imported here; the FastAPI adapter in
src.api translates to and from these types.
"""

from .controllers import SignUpController
from .errors import InvalidParamError, MissingParamError, PresentationError, ServerError
from .helpers import bad_request, ok, server_error
from .protocols import Controller, EmailValidator, HttpRequest, HttpResponse

__all__ = [
    "Controller",
    "EmailValidator",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "PresentationError",
    "ServerError",
    "SignUpController",
    "bad_request",
    "ok",
    "server_error",
]
