"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from credit_system.domain.entities import Credit, Customer


class CustomerRepository(ABC):
    """
    Abstract repository for Customer persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Persist a customer.

        Inserts when `customer.id` is None, updates the stored record
        otherwise.

        Args:
            customer: The customer to save

        Returns:
            The saved customer with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Retrieve a customer by ID.

        Args:
            customer_id: The customer's surrogate identifier

        Returns:
            The customer if found, None otherwise
        """
        ...

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """
        Remove a customer.

        Args:
            customer: The stored customer to remove
        """
        ...


class CreditRepository(ABC):
    """
    Abstract repository for Credit persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a credit.

        Args:
            credit: The credit to save

        Returns:
            The saved credit with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_id(self, credit_id: int) -> Optional[Credit]:
        """
        Retrieve a credit by its surrogate ID.

        Args:
            credit_id: The credit's surrogate identifier

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by its public credit code.

        Args:
            credit_code: The credit's public identifier

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits owned by a customer.

        Args:
            customer_id: The owning customer's identifier

        Returns:
            List of credits in insertion order, empty if none
        """
        ...

    @abstractmethod
    async def delete_all_by_customer_id(self, customer_id: int) -> int:
        """
        Remove every credit owned by a customer.

        Args:
            customer_id: The owning customer's identifier

        Returns:
            Number of credits removed
        """
        ...
