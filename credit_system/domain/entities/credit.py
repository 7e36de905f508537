"""Credit entity representing a customer's credit application."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from .customer import Customer


class CreditStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class Credit:
    """
    A credit granted to (or requested by) a customer.

    `credit_code` is the public identifier used in URLs; `id` is the
    store's surrogate key and stays internal.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int
    credit_code: UUID = field(default_factory=uuid4)
    status: CreditStatus = CreditStatus.PENDING
    id: Optional[int] = None
    customer: Optional[Customer] = None

    def belongs_to(self, customer_id: int) -> bool:
        """Check whether this credit is owned by the given customer."""
        return self.customer_id == customer_id
