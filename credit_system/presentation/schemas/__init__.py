"""Pydantic schemas for API request/response validation."""

from .customer import (
    CustomerRequestSchema,
    CustomerUpdateSchema,
    CustomerResponseSchema,
)
from .credit import (
    CreditRequestSchema,
    CreditResponseSchema,
    CreditSummarySchema,
)
from .common import ID_MAX, ID_MIN
from .error import ErrorResponseSchema

__all__ = [
    "CustomerRequestSchema",
    "CustomerUpdateSchema",
    "CustomerResponseSchema",
    "CreditRequestSchema",
    "CreditResponseSchema",
    "CreditSummarySchema",
    "ErrorResponseSchema",
    "ID_MIN",
    "ID_MAX",
]
