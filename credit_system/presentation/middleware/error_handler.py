"""Exception handlers translating errors into structured responses."""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from credit_system.domain.exceptions import (
    BusinessRuleException,
    DomainException,
    InvalidRequestException,
    NotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: str,
    exception: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """Build the standard error body."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "exception": exception,
            "details": details or {},
            "request_id": get_request_id(),
        },
    )


def _field_name(loc: tuple) -> str:
    # ("body", "credit_value") -> "credit_value"; ("query", "customerId") -> "customerId"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Not-found errors map to 404, validation and business-rule errors
    to 400, store constraint violations to 409.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed or incomplete request data."""
        details = {_field_name(err["loc"]): err["msg"] for err in exc.errors()}
        logger.info("request_validation_failed", fields=sorted(details))
        return error_response(
            status_code=400,
            error="VALIDATION_ERROR",
            message="Bad Request! Consult the documentation",
            exception=type(exc).__name__,
            details=details,
        )

    @app.exception_handler(InvalidRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidRequestException,
    ) -> JSONResponse:
        """Handle business validation failures on request DTOs."""
        return error_response(
            status_code=400,
            error=exc.code,
            message="Bad Request! Consult the documentation",
            exception=type(exc).__name__,
            details=exc.violations,
        )

    @app.exception_handler(NotFoundException)
    async def not_found_handler(
        request: Request,
        exc: NotFoundException,
    ) -> JSONResponse:
        return error_response(
            status_code=404,
            error=exc.code,
            message=exc.message,
            exception=type(exc).__name__,
        )

    @app.exception_handler(BusinessRuleException)
    async def business_rule_handler(
        request: Request,
        exc: BusinessRuleException,
    ) -> JSONResponse:
        """Handle an existing entity violating a business rule."""
        logger.warning("business_rule_violation", code=exc.code, message=exc.message)
        return error_response(
            status_code=400,
            error=exc.code,
            message=exc.message,
            exception=type(exc).__name__,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning("domain_exception", code=exc.code, message=exc.message)
        return error_response(
            status_code=400,
            error=exc.code,
            message=exc.message,
            exception=type(exc).__name__,
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        """Handle unique/foreign-key constraint violations from the store."""
        logger.warning("persistence_conflict", error=str(exc.orig))
        return error_response(
            status_code=409,
            error="CONFLICT",
            message="Conflict! Consult the documentation",
            exception=type(exc).__name__,
            details={"cause": str(exc.orig)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(
            status_code=500,
            error="INTERNAL_ERROR",
            message="An unexpected error occurred.",
            exception=type(exc).__name__,
        )
