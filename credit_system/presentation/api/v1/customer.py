"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from credit_system.application.dto import (
    CustomerRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from credit_system.application.services import CustomerService
from credit_system.core.dependencies import get_customer_service
from credit_system.domain.exceptions import InvalidCustomerRequestException
from credit_system.presentation.schemas import (
    CustomerRequestSchema,
    CustomerResponseSchema,
    CustomerUpdateSchema,
    ErrorResponseSchema,
    ID_MAX,
    ID_MIN,
)

customer_router = APIRouter(
    prefix="/customers",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Customer not found"},
    },
)


def _to_schema(customer) -> CustomerResponseSchema:
    view = CustomerResponse.from_entity(customer)
    return CustomerResponseSchema(
        id=view.id,
        first_name=view.first_name,
        last_name=view.last_name,
        cpf=view.cpf,
        income=view.income,
        email=view.email,
        zip_code=view.zip_code,
        street=view.street,
    )


@customer_router.post(
    "",
    response_model=CustomerResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register Customer",
    responses={
        409: {"model": ErrorResponseSchema, "description": "cpf or email already registered"},
    },
)
async def save_customer(
    request: CustomerRequestSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    dto = CustomerRequest(**request.model_dump())

    errors = dto.validate()
    if errors:
        raise InvalidCustomerRequestException(errors)

    customer = await customer_service.save(dto.to_entity())
    return _to_schema(customer)


@customer_router.get(
    "/{customer_id}",
    response_model=CustomerResponseSchema,
    summary="Get Customer",
)
async def find_customer(
    customer_id: Annotated[
        int,
        Path(ge=ID_MIN, le=ID_MAX, description="Surrogate id of the customer"),
    ],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    customer = await customer_service.find_by_id(customer_id)
    return _to_schema(customer)


@customer_router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Customer",
    description="Deletes the customer and every credit it owns.",
)
async def delete_customer(
    customer_id: Annotated[
        int,
        Path(ge=ID_MIN, le=ID_MAX, description="Surrogate id of the customer"),
    ],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    await customer_service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@customer_router.patch(
    "",
    response_model=CustomerResponseSchema,
    summary="Update Customer",
)
async def update_customer(
    customer_id: Annotated[int, Query(alias="customerId", ge=ID_MIN, le=ID_MAX)],
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> CustomerResponseSchema:
    dto = CustomerUpdateRequest(**request.model_dump())

    errors = dto.validate()
    if errors:
        raise InvalidCustomerRequestException(errors)

    customer = await customer_service.update(customer_id, dto)
    return _to_schema(customer)
