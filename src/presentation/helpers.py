"""Response builders for the three outcome categories."""

from typing import Any

from .errors import PresentationError, ServerError
from .protocols import HttpResponse


def bad_request(error: PresentationError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())


def ok(payload: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=payload)
