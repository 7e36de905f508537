"""Credit-related domain exceptions."""

from uuid import UUID

from .base import BusinessRuleException, InvalidRequestException, NotFoundException


class CreditNotFoundException(NotFoundException):
    """Raised when no credit has the given credit code."""

    def __init__(self, credit_code: UUID):
        super().__init__(
            message=f"Credit code not found: {credit_code}",
            code="CREDIT_NOT_FOUND",
        )
        self.credit_code = credit_code


class CreditOwnershipException(BusinessRuleException):
    """Raised when a credit exists but is owned by a different customer."""

    def __init__(self, credit_code: UUID, customer_id: int):
        super().__init__(
            message="This credit does not belong to this customer",
            code="CREDIT_OWNERSHIP_MISMATCH",
        )
        self.credit_code = credit_code
        self.customer_id = customer_id


class InvalidCreditRequestException(InvalidRequestException):
    """Raised when a credit application is invalid."""

    def __init__(self, violations: dict[str, str]):
        super().__init__(violations, code="INVALID_CREDIT_REQUEST")
