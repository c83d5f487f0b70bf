"""
Presentation protocols - Transport-agnostic request/response envelopes and ports.

HttpRequest and HttpResponse carry no framework types so that controllers
can be driven by FastAPI, an in-process call or a test harness alike.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class HttpRequest:
    """Incoming request: a payload mapping of field name to value."""

    body: Mapping[str, Any] | None = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Outgoing response: status code plus an error value or payload."""

    status_code: int
    body: Any = None


class Controller(Protocol):
    """Port interface for request handlers."""

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Handle one request and build its response."""
        ...


class EmailValidator(Protocol):
    """Port interface for email format checks."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether a string is a well-formed email address.

        Args:
            email: Candidate address as submitted

        Returns:
            True if the address is well-formed
        """
        ...
