"""Data Transfer Objects for application layer."""

from .customer import CustomerRequest, CustomerUpdateRequest, CustomerResponse
from .credit import CreditRequest, CreditResponse, CreditSummary

__all__ = [
    "CustomerRequest",
    "CustomerUpdateRequest",
    "CustomerResponse",
    "CreditRequest",
    "CreditResponse",
    "CreditSummary",
]
