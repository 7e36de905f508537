"""SQLAlchemy implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.domain.entities import Address, Customer
from credit_system.domain.interfaces import CustomerRepository
from credit_system.infrastructure.database.models import CustomerModel


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    Relational implementation of the Customer repository.

    Uses SQLAlchemy async session for database operations. Unique
    constraint violations on cpf/email are raised from `save` as
    `sqlalchemy.exc.IntegrityError`.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Insert or update a customer depending on whether it has an id."""
        if customer.id is None:
            model = CustomerModel()
            self._session.add(model)
        else:
            model = await self._get_model(customer.id)
            if model is None:
                model = CustomerModel(id=customer.id)
                self._session.add(model)

        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.cpf = customer.cpf
        model.email = customer.email
        model.password = customer.password
        model.income = customer.income
        model.zip_code = customer.address.zip_code
        model.street = customer.address.street

        await self._session.flush()

        return self._to_entity(model)

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by ID."""
        model = await self._get_model(customer_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def delete(self, customer: Customer) -> None:
        """Delete a stored customer. Unknown ids are ignored."""
        model = await self._get_model(customer.id)

        if model is None:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def _get_model(self, customer_id: int) -> Optional[CustomerModel]:
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return customer_from_model(model)


def customer_from_model(model: CustomerModel) -> Customer:
    return Customer(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        cpf=model.cpf,
        email=model.email,
        password=model.password,
        income=model.income,
        address=Address(zip_code=model.zip_code, street=model.street),
    )
