"""
Route adapter - Bridges FastAPI routes and transport-agnostic controllers.

Wraps the parsed JSON body in an HttpRequest, awaits the controller and
serializes its HttpResponse with the controller's status code.
"""

from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from src.presentation.errors import PresentationError
from src.presentation.protocols import Controller, HttpRequest


def serialize_body(body: Any) -> Any:
    """
    Convert a response body into JSON-compatible data.

    Error values become {"error": message}; dataclass records are
    converted field by field; anything else goes through FastAPI's encoder.
    """
    if isinstance(body, PresentationError):
        return {"error": body.message}
    if is_dataclass(body) and not isinstance(body, type):
        return asdict(body)
    return jsonable_encoder(body)


async def adapt_route(controller: Controller, body: Mapping[str, Any]) -> JSONResponse:
    """Run a controller against a request body and build the HTTP response."""
    response = await controller.handle(HttpRequest(body=body))
    return JSONResponse(status_code=response.status_code, content=serialize_body(response.body))
