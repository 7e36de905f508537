"""Credit service - handles credit application and lookup use cases."""

from typing import List
from uuid import UUID

import structlog

from credit_system.core.metrics import record_credit_application, record_credit_lookup_failure
from credit_system.domain.entities import Credit
from credit_system.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipException,
)
from credit_system.domain.interfaces import CreditRepository

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Application service for credit use cases.

    Lookups by credit code are scoped to the owning customer.
    """

    def __init__(self, credit_repository: CreditRepository):
        self._credit_repo = credit_repository

    async def save(self, credit: Credit) -> Credit:
        """
        Persist a new credit application.

        The owning customer is not checked for existence here.

        Args:
            credit: The credit to store

        Returns:
            The stored credit with its generated id, credit code and status
        """
        saved = await self._credit_repo.save(credit)

        record_credit_application(accepted=True, value=saved.credit_value)
        logger.info(
            "credit_saved",
            credit_code=str(saved.credit_code),
            customer_id=saved.customer_id,
            number_of_installments=saved.number_of_installments,
        )

        return saved

    async def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits owned by a customer.

        Returns:
            Credits in insertion order, empty if the customer has none
        """
        credits = await self._credit_repo.get_all_by_customer_id(customer_id)

        logger.info(
            "customer_credits_retrieved",
            customer_id=customer_id,
            count=len(credits),
        )

        return credits

    async def find_by_credit_code(self, customer_id: int, credit_code: UUID) -> Credit:
        """
        Retrieve a credit by its public code on behalf of a customer.

        Args:
            customer_id: The customer asking for the credit
            credit_code: The credit's public identifier

        Returns:
            The credit

        Raises:
            CreditNotFoundException: If no credit has this code
            CreditOwnershipException: If the credit belongs to another customer
        """
        credit = await self._credit_repo.get_by_credit_code(credit_code)

        if credit is None:
            record_credit_lookup_failure("not_found")
            logger.warning("credit_not_found", credit_code=str(credit_code))
            raise CreditNotFoundException(credit_code)

        if not credit.belongs_to(customer_id):
            record_credit_lookup_failure("ownership_mismatch")
            logger.warning(
                "credit_ownership_mismatch",
                credit_code=str(credit_code),
                customer_id=customer_id,
                owner_id=credit.customer_id,
            )
            raise CreditOwnershipException(credit_code, customer_id)

        return credit
