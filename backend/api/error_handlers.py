"""
Global exception handlers.

- SurveyWalletError subclasses map to 400/401/403/404/409/502 by base class
- RequestValidationError becomes 400 with field-level details
- Store failures and anything unhandled become a generic 500 that never
  leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from shared.exceptions import (
    SurveyWalletError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
    ConflictError,
    ExternalServiceError,
)
from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; first matching base class wins
_STATUS_BY_ERROR: tuple[tuple[type[SurveyWalletError], int], ...] = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY),
)


def status_for_error(exc: SurveyWalletError) -> int:
    """HTTP status code for a domain error."""
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _internal_error_response() -> JSONResponse:
    body = ErrorResponse(error="INTERNAL_ERROR", message="An unexpected error occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(SurveyWalletError)
    async def domain_error_handler(request: Request, exc: SurveyWalletError):
        status_code = status_for_error(exc)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return JSONResponse(
            status_code=status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        body = ValidationErrorResponse(
            details=[
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )

    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: PyMongoError):
        logger.error(
            f"Store failure on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "STORE_FAILURE", "path": request.url.path},
        )
        return _internal_error_response()

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _internal_error_response()
