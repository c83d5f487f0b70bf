"""
API response models.

Pydantic models used for OpenAPI schema generation. Request bodies are
passed to the controller as raw mappings; the controller does all
validation so that missing fields yield 400 rather than 422.
"""

from pydantic import BaseModel, Field


class AccountResponse(BaseModel):
    """Response model for successful signup."""

    id: str = Field(..., description="Account identifier")
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., examples=["Missing param: email"])
