"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
Domain error messages are already safe for callers and are returned as-is.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.accounts.errors import (
    AccountsDomainError,
    DuplicateEmailError,
    InternalError,
    UserNotFoundError,
    UserValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserValidationError)
    async def handle_user_validation(
        _request: Request, exc: UserValidationError
    ) -> JSONResponse:
        """Handle user records that fail a validation rule."""
        logger.info("User validation failed: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.lookup)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(DuplicateEmailError)
    async def handle_duplicate_email(
        _request: Request, exc: DuplicateEmailError
    ) -> JSONResponse:
        """Handle email uniqueness conflicts."""
        logger.warning("Email already in use")
        return _error_response(HTTP_409, exc.message)

    @app.exception_handler(InternalError)
    async def handle_internal(
        _request: Request, exc: InternalError
    ) -> JSONResponse:
        """Handle storage and hashing failures already logged by the service."""
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(AccountsDomainError)
    async def handle_accounts_domain(
        _request: Request, exc: AccountsDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled accounts domain errors."""
        logger.error("Unhandled accounts domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
