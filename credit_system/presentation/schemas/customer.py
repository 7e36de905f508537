"""Customer-related Pydantic schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CustomerRequestSchema(BaseModel):
    """Schema for POST /v1/customers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "first_name": "Cami",
                    "last_name": "Cavalcante",
                    "cpf": "28475934625",
                    "income": "1000.00",
                    "email": "camila@email.com",
                    "password": "1234",
                    "zip_code": "000000",
                    "street": "Rua da Cami, 123",
                }
            ]
        }
    )

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    cpf: str = Field(..., max_length=14, description="Taxpayer id, digits or 000.000.000-00")
    income: Decimal = Field(..., max_digits=14, decimal_places=2)
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1)
    zip_code: str = Field(..., max_length=20)
    street: str = Field(..., max_length=255)


class CustomerUpdateSchema(BaseModel):
    """Schema for PATCH /v1/customers request body."""

    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    income: Decimal = Field(..., max_digits=14, decimal_places=2)
    zip_code: str = Field(..., max_length=20)
    street: str = Field(..., max_length=255)


class CustomerResponseSchema(BaseModel):
    """Public customer view. Never includes the password."""

    id: int
    first_name: str
    last_name: str
    cpf: str
    income: Decimal
    email: str
    zip_code: str
    street: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "first_name": "Cami",
                    "last_name": "Cavalcante",
                    "cpf": "28475934625",
                    "income": "1000.00",
                    "email": "camila@email.com",
                    "zip_code": "000000",
                    "street": "Rua da Cami, 123",
                }
            ]
        }
    )
