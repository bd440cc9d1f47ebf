"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body for domain exceptions (403, 404, 409, 422)."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["NOT_FOUND", "DUPLICATE_RESOURCE", "VALIDATION_ERROR", "FORBIDDEN"],
    )
