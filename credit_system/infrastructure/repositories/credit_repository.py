"""SQLAlchemy implementation of CreditRepository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from credit_system.domain.entities import Credit, CreditStatus
from credit_system.domain.interfaces import CreditRepository
from credit_system.infrastructure.database.models import CreditModel

from .customer_repository import customer_from_model


class SqlAlchemyCreditRepository(CreditRepository):
    """
    Relational implementation of the Credit repository.

    Credits are always loaded together with their owning customer so
    views can show the owner's contact data.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, credit: Credit) -> Credit:
        """Persist a credit and return it with its owner loaded."""
        if credit.id is None:
            model = CreditModel(credit_code=str(credit.credit_code))
            self._session.add(model)
        else:
            model = await self._get_one(CreditModel.id == credit.id)
            if model is None:
                model = CreditModel(id=credit.id, credit_code=str(credit.credit_code))
                self._session.add(model)

        model.credit_value = credit.credit_value
        model.day_first_installment = credit.day_first_installment
        model.number_of_installments = credit.number_of_installments
        model.status = credit.status.value
        model.customer_id = credit.customer_id

        await self._session.flush()

        stored = await self._get_one(CreditModel.id == model.id, refresh=True)
        return self._to_entity(stored)

    async def get_by_id(self, credit_id: int) -> Optional[Credit]:
        """Retrieve a credit by its surrogate ID."""
        model = await self._get_one(CreditModel.id == credit_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_credit_code(self, credit_code: UUID) -> Optional[Credit]:
        """Retrieve a credit by its public credit code."""
        model = await self._get_one(CreditModel.credit_code == str(credit_code))

        if model is None:
            return None

        return self._to_entity(model)

    async def get_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        """Retrieve a customer's credits, oldest first."""
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(CreditModel.customer_id == customer_id)
            .order_by(CreditModel.id.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def delete_all_by_customer_id(self, customer_id: int) -> int:
        """Delete every credit owned by a customer."""
        stmt = delete(CreditModel).where(CreditModel.customer_id == customer_id)
        result = await self._session.execute(stmt)
        await self._session.flush()

        return result.rowcount or 0

    async def _get_one(self, criterion, refresh: bool = False) -> Optional[CreditModel]:
        stmt = (
            select(CreditModel)
            .options(selectinload(CreditModel.customer))
            .where(criterion)
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)

        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: CreditModel) -> Credit:
        """Convert database model to domain entity."""
        return Credit(
            id=model.id,
            credit_code=UUID(model.credit_code),
            credit_value=model.credit_value,
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            status=CreditStatus(model.status),
            customer_id=model.customer_id,
            customer=customer_from_model(model.customer) if model.customer else None,
        )
