"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["CREDIT_OWNERSHIP_MISMATCH"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["This credit does not belong to this customer"],
    )
    exception: str = Field(
        ...,
        description="Kind of exception that produced the error",
        examples=["CreditOwnershipException"],
    )
    details: dict[str, str] = Field(
        default_factory=dict,
        description="Field-level validation messages",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_CREDIT_REQUEST",
                    "message": "Bad Request! Consult the documentation",
                    "exception": "InvalidCreditRequestException",
                    "details": {
                        "number_of_installments": "number_of_installments must be between 1 and 48",
                    },
                    "request_id": "abc123",
                }
            ]
        }
    }
