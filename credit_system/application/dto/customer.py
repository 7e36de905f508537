"""Data transfer objects for customer operations."""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Dict, Optional

from credit_system.core.security import hash_password
from credit_system.domain.entities import Address, Customer

from .validators import is_blank, is_valid_cpf, is_valid_email


def _check_income(income: Optional[Decimal], errors: Dict[str, str]) -> None:
    if income is None:
        errors["income"] = "income is required"
    elif income < 0:
        errors["income"] = "income must not be negative"


@dataclass(frozen=True)
class CustomerRequest:
    """Input data for registering a customer."""

    first_name: str
    last_name: str
    cpf: str
    income: Optional[Decimal]
    email: str
    password: str
    zip_code: str
    street: str

    def validate(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for name in ("first_name", "last_name", "zip_code", "street", "password"):
            if is_blank(getattr(self, name)):
                errors[name] = f"{name} is required"

        if is_blank(self.cpf):
            errors["cpf"] = "cpf is required"
        elif not is_valid_cpf(self.cpf):
            errors["cpf"] = "cpf is invalid"

        if is_blank(self.email):
            errors["email"] = "email is required"
        elif not is_valid_email(self.email):
            errors["email"] = "email is invalid"

        _check_income(self.income, errors)

        return errors

    def to_entity(self) -> Customer:
        """Build a new customer. The password is hashed here."""
        return Customer(
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            cpf=self.cpf.strip().replace(".", "").replace("-", ""),
            email=self.email.strip().lower(),
            password=hash_password(self.password),
            income=self.income,
            address=Address(zip_code=self.zip_code.strip(), street=self.street.strip()),
        )


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Input data for updating a customer's profile."""

    first_name: str
    last_name: str
    income: Optional[Decimal]
    zip_code: str
    street: str

    def validate(self) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for name in ("first_name", "last_name", "zip_code", "street"):
            if is_blank(getattr(self, name)):
                errors[name] = f"{name} is required"

        _check_income(self.income, errors)

        return errors

    def apply_to(self, customer: Customer) -> Customer:
        """Return a copy of `customer` carrying the updated fields."""
        return replace(
            customer,
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            income=self.income,
            address=Address(zip_code=self.zip_code.strip(), street=self.street.strip()),
        )


@dataclass(frozen=True)
class CustomerResponse:
    """Public view of a customer. The password is never exposed."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            income=customer.income,
            email=customer.email,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )
