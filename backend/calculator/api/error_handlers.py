"""Error Handlers — global exception handlers for the Calculator API.

Invariants:
    - CalculatorError → {"errorMessage": ...} with the error's http_status
    - RequestValidationError → 400 (not FastAPI's default 422), same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CalculatorError), validation (Pydantic), catch-all (Exception)
    - Pydantic errors converted to the domain ValidationError so every 4xx shares one shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from calculator.core.errors import CalculatorError, ErrorSeverity, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_calculator_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_calculator_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        """Handle all Calculator domain/infrastructure errors."""
        log = logger.warning if exc.severity in (
            ErrorSeverity.INFO, ErrorSeverity.WARNING,
        ) else logger.error
        log(
            f"CalculatorError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        error = to_validation_error(exc)
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"errorMessage": "An unexpected error occurred"},
        )


def to_validation_error(exc: RequestValidationError) -> ValidationError:
    """Collapse Pydantic error details into one readable message."""
    fields = []
    parts = []
    for e in exc.errors():
        loc = [str(p) for p in e["loc"]]
        # "body" prefix is noise unless the whole body is the problem
        if len(loc) > 1 and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        field = ".".join(loc)
        fields.append(field)
        parts.append(f"{field}: {e['msg']}")
    return ValidationError("; ".join(parts) or "Invalid request data", fields)
