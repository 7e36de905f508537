"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from dateutil.relativedelta import relativedelta

from credit_system.core.config import settings
from credit_system.domain.entities import Credit


@dataclass(frozen=True)
class CreditRequest:
    """Input data for a credit application."""

    credit_value: Optional[Decimal]
    day_first_installment: Optional[date]
    number_of_installments: Optional[int]
    customer_id: Optional[int]

    def validate(self, today: Optional[date] = None) -> Dict[str, str]:
        """
        Check the application against the credit rules.

        The first installment must fall strictly after `today` and
        strictly before `today` plus the configured number of months.

        Returns:
            Mapping of field name to violation message, empty if valid
        """
        today = today or date.today()
        errors: Dict[str, str] = {}

        if self.credit_value is None:
            errors["credit_value"] = "credit_value is required"
        elif self.credit_value <= 0:
            errors["credit_value"] = "credit_value must be positive"

        min_installments = settings.credit_min_installments
        max_installments = settings.credit_max_installments
        if self.number_of_installments is None:
            errors["number_of_installments"] = "number_of_installments is required"
        elif not min_installments <= self.number_of_installments <= max_installments:
            errors["number_of_installments"] = (
                f"number_of_installments must be between "
                f"{min_installments} and {max_installments}"
            )

        if self.day_first_installment is None:
            errors["day_first_installment"] = "day_first_installment is required"
        elif self.day_first_installment <= today:
            errors["day_first_installment"] = "day_first_installment must be in the future"
        else:
            months = settings.first_installment_max_months
            limit = today + relativedelta(months=months)
            if self.day_first_installment >= limit:
                errors["day_first_installment"] = (
                    f"day_first_installment must be less than {months} months from today"
                )

        if self.customer_id is None:
            errors["customer_id"] = "customer_id is required"

        return errors

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_installment=self.day_first_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


@dataclass(frozen=True)
class CreditResponse:
    """Full view of a single credit, including owner contact data."""

    credit_code: str
    credit_value: Decimal
    day_first_installment: str
    number_of_installments: int
    status: str
    email_customer: Optional[str]
    income_customer: Optional[Decimal]

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditResponse":
        customer = credit.customer
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment.isoformat(),
            number_of_installments=credit.number_of_installments,
            status=credit.status.value,
            email_customer=customer.email if customer else None,
            income_customer=customer.income if customer else None,
        )


@dataclass(frozen=True)
class CreditSummary:
    """Brief view of a credit for customer listings."""

    credit_code: str
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditSummary":
        return cls(
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
        )
