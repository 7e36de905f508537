"""Credit-related Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import ID_MAX, ID_MIN


class CreditRequestSchema(BaseModel):
    """Schema for POST /v1/credits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "credit_value": "100.00",
                    "day_first_installment": "2025-12-01",
                    "number_of_installments": 15,
                    "customer_id": 1,
                }
            ]
        }
    )

    credit_value: Decimal = Field(
        ...,
        gt=0,
        max_digits=14,
        decimal_places=2,
        description="Amount of credit requested",
    )
    day_first_installment: date = Field(
        ...,
        description="Due date of the first installment (YYYY-MM-DD)",
    )
    number_of_installments: int = Field(
        ...,
        description="Number of monthly installments",
        examples=[15],
    )
    customer_id: int = Field(
        ...,
        ge=ID_MIN,
        le=ID_MAX,
        description="Identifier of the customer applying for the credit",
    )


class CreditResponseSchema(BaseModel):
    """Schema for a single credit, with its owner's contact data."""

    credit_code: str = Field(..., description="Public UUID of the credit")
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    status: str = Field(..., examples=["pending"])
    email_customer: Optional[str] = None
    income_customer: Optional[Decimal] = None


class CreditSummarySchema(BaseModel):
    """Schema for a credit in a customer's credit list."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int
