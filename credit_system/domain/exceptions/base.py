"""Base domain exceptions."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundException(DomainException):
    """Raised when a referenced entity does not exist."""


class BusinessRuleException(DomainException):
    """Raised when an existing entity violates a business rule."""

    def __init__(self, message: str, code: str = "BUSINESS_RULE_VIOLATION"):
        super().__init__(message=message, code=code)


class InvalidRequestException(DomainException):
    """
    Raised when request data fails validation.

    Carries the individual violations as a field -> message mapping.
    """

    def __init__(
        self,
        violations: dict[str, str],
        code: str = "INVALID_REQUEST",
    ):
        super().__init__(
            message="; ".join(f"{k}: {v}" for k, v in violations.items()),
            code=code,
        )
        self.violations = violations
