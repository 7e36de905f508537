"""Repository implementations."""

from .customer_repository import SqlAlchemyCustomerRepository
from .credit_repository import SqlAlchemyCreditRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyCreditRepository",
]
