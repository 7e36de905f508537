"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.infrastructure.database import get_db_session
from credit_system.infrastructure.repositories import (
    SqlAlchemyCreditRepository,
    SqlAlchemyCustomerRepository,
)
from credit_system.application.services import CreditService, CustomerService


# Repository dependencies
async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyCustomerRepository:
    """Get a CustomerRepository bound to the request session."""
    return SqlAlchemyCustomerRepository(session)


async def get_credit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlAlchemyCreditRepository:
    """Get a CreditRepository bound to the request session."""
    return SqlAlchemyCreditRepository(session)


# Service dependencies
async def get_customer_service(
    customer_repo: Annotated[SqlAlchemyCustomerRepository, Depends(get_customer_repository)],
    credit_repo: Annotated[SqlAlchemyCreditRepository, Depends(get_credit_repository)],
) -> CustomerService:
    """Get a CustomerService instance with all dependencies."""
    return CustomerService(
        customer_repository=customer_repo,
        credit_repository=credit_repo,
    )


async def get_credit_service(
    credit_repo: Annotated[SqlAlchemyCreditRepository, Depends(get_credit_repository)],
) -> CreditService:
    """Get a CreditService instance."""
    return CreditService(credit_repository=credit_repo)
