"""
Presentation errors - Values describing why a request was rejected.

These are carried inside HttpResponse bodies and compared by value;
controllers return them, they never raise them.
"""


class PresentationError(Exception):
    """Base class for errors reported back to the caller."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresentationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    @property
    def message(self) -> str:
        return str(self)


class MissingParamError(PresentationError):
    """A required field is absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(PresentationError):
    """A field is present but fails semantic validation."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(PresentationError):
    """Opaque unexpected failure."""

    def __init__(self) -> None:
        super().__init__("Internal server error")
