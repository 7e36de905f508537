"""Customer-related domain exceptions."""

from .base import InvalidRequestException, NotFoundException


class CustomerNotFoundException(NotFoundException):
    """Raised when a customer cannot be found."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
        )
        self.customer_id = customer_id


class InvalidCustomerRequestException(InvalidRequestException):
    """Raised when a customer registration or update is invalid."""

    def __init__(self, violations: dict[str, str]):
        super().__init__(violations, code="INVALID_CUSTOMER_REQUEST")
