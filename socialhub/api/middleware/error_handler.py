"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "errorMessage": "Post with id 'abc-123' not found",
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id 'abc-123' not found",
            "details": {}
        }
    }

``errorMessage`` is what clients display; ``error`` carries the
machine-readable code.

Exception Handling:
===================
1. SocialHubException subclasses → Use their status_code and to_dict()
2. Request validation (body, path, query) → 400 VALIDATION_ERROR,
   first failure as errorMessage
3. Pydantic ValidationError → 400 VALIDATION_ERROR
4. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from socialhub.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from socialhub.shared.core.exceptions import SocialHubException
from socialhub.shared.core.logging import logger


def _error_message(error: dict[str, Any]) -> str:
    """Human-readable text for one pydantic error."""
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])

    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    if loc:
        return f"{'.'.join(loc)}: {error.get('msg', 'Invalid value')}"
    return error.get("msg", "Invalid value")


def _validation_body(errors: Sequence[dict[str, Any]]) -> dict[str, Any]:
    """Error body for a list of pydantic errors."""
    message = _error_message(errors[0]) if errors else "Request validation failed"
    return {
        "errorMessage": message,
        "error": {
            "code": "VALIDATION_ERROR",
            "message": message,
            "details": {
                "errors": [
                    {
                        "loc": [str(part) for part in error.get("loc", ())],
                        "msg": _error_message(error),
                        "type": error.get("type"),
                    }
                    for error in errors
                ]
            },
        },
    }


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SocialHubException)
    async def socialhub_exception_handler(
        request: Request,
        exc: SocialHubException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from SocialHubException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body, path or query doesn't match the expected
        schema (missing content, weak password, malformed id, ...).
        """
        errors = list(exc.errors())
        body = _validation_body(errors)
        logger.warning(
            "Request validation error",
            message=body["errorMessage"],
            path=request.url.path,
        )
        return JSONResponse(status_code=400, content=body)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised outside request parsing.
        """
        body = _validation_body(list(exc.errors()))
        logger.warning(
            "Validation error",
            message=body["errorMessage"],
            path=request.url.path,
        )
        return JSONResponse(status_code=400, content=body)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "errorMessage": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            },
        )
