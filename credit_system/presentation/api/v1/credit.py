"""Credit API endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from credit_system.application.dto import CreditRequest, CreditResponse, CreditSummary
from credit_system.application.services import CreditService
from credit_system.core.dependencies import get_credit_service
from credit_system.core.metrics import record_credit_application
from credit_system.domain.exceptions import InvalidCreditRequestException
from credit_system.presentation.schemas import (
    CreditRequestSchema,
    CreditResponseSchema,
    CreditSummarySchema,
    ErrorResponseSchema,
    ID_MAX,
    ID_MIN,
)

credit_router = APIRouter(
    prefix="/credits",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


def _to_schema(credit) -> CreditResponseSchema:
    view = CreditResponse.from_entity(credit)
    return CreditResponseSchema(
        credit_code=view.credit_code,
        credit_value=view.credit_value,
        day_first_installment=view.day_first_installment,
        number_of_installments=view.number_of_installments,
        status=view.status,
        email_customer=view.email_customer,
        income_customer=view.income_customer,
    )


@credit_router.post(
    "",
    response_model=CreditResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Apply for Credit",
    description="""
    Register a credit application for a customer.

    The first installment must fall after today and less than three
    months from today; installments must be between 1 and 48.
    """,
)
async def save_credit(
    request: CreditRequestSchema,
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditResponseSchema:
    dto = CreditRequest(
        credit_value=request.credit_value,
        day_first_installment=request.day_first_installment,
        number_of_installments=request.number_of_installments,
        customer_id=request.customer_id,
    )

    errors = dto.validate()
    if errors:
        record_credit_application(accepted=False)
        raise InvalidCreditRequestException(errors)

    credit = await credit_service.save(dto.to_entity())
    return _to_schema(credit)


@credit_router.get(
    "",
    response_model=List[CreditSummarySchema],
    summary="List Customer Credits",
)
async def find_all_by_customer(
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX)],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> List[CreditSummarySchema]:
    credits = await credit_service.find_all_by_customer(customer_id)

    summaries = [CreditSummary.from_entity(credit) for credit in credits]
    return [
        CreditSummarySchema(
            credit_code=s.credit_code,
            credit_value=s.credit_value,
            number_of_installments=s.number_of_installments,
        )
        for s in summaries
    ]


@credit_router.get(
    "/{credit_code}",
    response_model=CreditResponseSchema,
    summary="Get Credit",
    description="""
    Retrieve a credit by its public code on behalf of a customer.

    Returns 404 if the code is unknown and 400 if the credit belongs
    to a different customer.
    """,
    responses={
        404: {"model": ErrorResponseSchema, "description": "Credit not found"},
    },
)
async def find_by_credit_code(
    credit_code: Annotated[UUID, Path(description="Public UUID of the credit")],
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX)],
    credit_service: Annotated[CreditService, Depends(get_credit_service)],
) -> CreditResponseSchema:
    credit = await credit_service.find_by_credit_code(customer_id, credit_code)
    return _to_schema(credit)
