"""Controllers - One request handler per endpoint."""

from .signup import SignUpController

__all__ = ["SignUpController"]
