"""Customer entity and its embedded address."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer. Has no identity of its own."""

    zip_code: str
    street: str


@dataclass
class Customer:
    """
    A registered customer who may apply for credits.

    `cpf` and `email` are unique across all customers; uniqueness is
    enforced by the store, not by this entity.
    """

    first_name: str
    last_name: str
    cpf: str
    email: str
    password: str
    income: Decimal
    address: Address
    id: Optional[int] = None
