"""
Custom exception classes and error handling for API Composer.

Provides the two domain error kinds (body validation and transport failure)
and consistent error responses across all API endpoints.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel


# Message shown whenever the request body is not well-formed JSON
INVALID_JSON_MESSAGE = "Invalid JSON in request body"


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None


class ComposerError(Exception):
    """Base exception for composer errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)


class ValidationError(ComposerError):
    """Exception raised when the request body is not valid JSON."""

    def __init__(self, detail: str = INVALID_JSON_MESSAGE):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error_code="VALIDATION_ERROR"
        )


class TransportError(ComposerError):
    """
    Exception raised when the outbound request fails.

    Covers non-2xx responses as well as network-level failures. ``payload``
    holds the decoded response body when the server replied at all.
    """

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        payload: Any = None,
        has_payload: bool = False
    ):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="TRANSPORT_ERROR"
        )
        self.upstream_status = status_code
        self.payload = payload
        self.has_payload = has_payload


async def composer_exception_handler(request: Request, exc: ComposerError) -> JSONResponse:
    """Handler for composer exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code}
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    errors = exc.errors()
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(l) for l in error["loc"])
        msg = error["msg"]
        error_messages.append(f"{loc}: {msg}")

    detail = "; ".join(error_messages) if error_messages else "Validation error"

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": detail, "error_code": "VALIDATION_ERROR"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(ComposerError, composer_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
