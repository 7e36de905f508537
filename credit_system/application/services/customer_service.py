"""Customer service - registration, lookup, update and removal."""

import structlog

from credit_system.application.dto import CustomerUpdateRequest
from credit_system.core.metrics import record_customer_operation
from credit_system.domain.entities import Customer
from credit_system.domain.exceptions import CustomerNotFoundException
from credit_system.domain.interfaces import CreditRepository, CustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """
    Application service for customer use cases.

    Uniqueness of cpf/email is left to the store; a violation surfaces
    from the repository as a persistence error.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        credit_repository: CreditRepository,
    ):
        self._customer_repo = customer_repository
        self._credit_repo = credit_repository

    async def save(self, customer: Customer) -> Customer:
        """
        Persist a new or updated customer.

        Args:
            customer: The customer to store; `id` None means a new record

        Returns:
            The stored customer with its id populated
        """
        is_new = customer.id is None
        saved = await self._customer_repo.save(customer)

        record_customer_operation("created" if is_new else "updated")
        logger.info(
            "customer_saved",
            customer_id=saved.id,
            created=is_new,
        )

        return saved

    async def find_by_id(self, customer_id: int) -> Customer:
        """
        Retrieve a customer by ID.

        Raises:
            CustomerNotFoundException: If no customer has this id
        """
        customer = await self._customer_repo.get_by_id(customer_id)

        if customer is None:
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        return customer

    async def update(
        self,
        customer_id: int,
        update: CustomerUpdateRequest,
    ) -> Customer:
        """
        Apply a profile update to an existing customer.

        Raises:
            CustomerNotFoundException: If no customer has this id
        """
        customer = await self.find_by_id(customer_id)
        return await self.save(update.apply_to(customer))

    async def delete(self, customer_id: int) -> None:
        """
        Remove a customer together with every credit it owns.

        Raises:
            CustomerNotFoundException: If no customer has this id
        """
        customer = await self.find_by_id(customer_id)

        removed_credits = await self._credit_repo.delete_all_by_customer_id(customer.id)
        await self._customer_repo.delete(customer)

        record_customer_operation("deleted")
        logger.info(
            "customer_deleted",
            customer_id=customer_id,
            credits_removed=removed_credits,
        )
