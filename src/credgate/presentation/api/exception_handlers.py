"""Centralized exception handlers for the FastAPI application.

Infrastructure and configuration errors raised by the authentication flow
are mapped to 5xx responses with a consistent error format. Invalid
credentials never reach these handlers; they come back as a failed
LoginOutcome.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from credgate.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from credgate_auth import SigningConfigurationError, StoreUnavailableError

logger = logging.getLogger(__name__)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(
        request: Request,
        exc: StoreUnavailableError,
    ) -> JSONResponse:
        """Credential store failures are retryable, so answer 503."""
        logger.warning(
            "Credential store unavailable on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message="Authentication is temporarily unavailable. Please try again later.",
            code="STORE_UNAVAILABLE",
        )

    @app.exception_handler(SigningConfigurationError)
    async def signing_configuration_handler(
        request: Request,
        exc: SigningConfigurationError,
    ) -> JSONResponse:
        logger.error(
            "Token signing misconfigured on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Authentication is misconfigured",
            code="SIGNING_CONFIGURATION_ERROR",
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code="INTERNAL_ERROR",
        )
