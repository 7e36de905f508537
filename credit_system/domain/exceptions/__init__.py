"""Domain Exceptions - Business rule violations and domain errors."""

from .base import (
    DomainException,
    NotFoundException,
    BusinessRuleException,
    InvalidRequestException,
)
from .customer import (
    CustomerNotFoundException,
    InvalidCustomerRequestException,
)
from .credit import (
    CreditNotFoundException,
    CreditOwnershipException,
    InvalidCreditRequestException,
)

__all__ = [
    "DomainException",
    "NotFoundException",
    "BusinessRuleException",
    "InvalidRequestException",
    "CustomerNotFoundException",
    "InvalidCustomerRequestException",
    "CreditNotFoundException",
    "CreditOwnershipException",
    "InvalidCreditRequestException",
]
