"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class FieldErrorResponse(BaseModel):
    """One broken rule on one input field."""

    field: str = Field(..., description="Dotted path of the offending field")
    rule: str = Field(..., description="Rule that was violated")
    message: str = Field(..., description="Human-readable explanation")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    errors: list[FieldErrorResponse] | None = Field(
        None,
        description="Per-field problems (validation errors only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "User not found", "code": "USER_NOT_FOUND"},
        },
    )
