"""
Exception handlers mapping application exceptions to the JSON error envelope.

    {"status": "ValidationError", "message": "...", "errors": [{"propertyName": ..., "errorMessage": ...}]}

ValidationError and malformed request bodies -> 400 with itemized errors,
ApplicationError -> 400, NotFoundError -> 404, anything else -> 500 with a
generic message (details are logged, never returned).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    ApplicationError,
    FieldError,
    NotFoundError,
    ValidationError,
    field_errors,
)
from app.schemas.common import ErrorResponse, FieldErrorItem

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


def _envelope(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _validation_response(errors: list[FieldError]) -> JSONResponse:
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            status="ValidationError",
            message="One or more validation errors occurred.",
            errors=[
                FieldErrorItem(property_name=e.property_name, error_message=e.error_message)
                for e in errors
            ],
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            sorted(exc.properties()),
        )
        return _validation_response(exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        return _validation_response(field_errors(exc.errors()))

    @app.exception_handler(ApplicationError)
    async def application_exception_handler(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        logger.warning(
            "Application error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _envelope(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(status="ApplicationError", message=exc.message),
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(
        request: Request,
        exc: NotFoundError,
    ) -> JSONResponse:
        return _envelope(
            status.HTTP_404_NOT_FOUND,
            ErrorResponse(status="NotFound", message=exc.message),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all: log the traceback, return a generic 500 with no internal detail."""
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(status="Error", message=GENERIC_ERROR_MESSAGE),
        )
