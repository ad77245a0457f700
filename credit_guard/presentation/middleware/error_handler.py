"""Exception handlers mapping domain errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from credit_guard.core.metrics import record_invalid_input
from credit_guard.domain.exceptions import (
    DomainException,
    HistoryEntryNotFoundException,
    InvalidInputException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build the {error, message, request_id} body shared by every error."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Status mapping:
        InvalidInputException           400
        HistoryEntryNotFoundException   404
        other DomainException           400
        anything else                   500
    Request bodies that fail schema validation keep FastAPI's 422 body.
    """

    @app.exception_handler(InvalidInputException)
    async def invalid_input_handler(
        request: Request,
        exc: InvalidInputException,
    ) -> JSONResponse:
        """Handle applicant records rejected by the scoring engine."""
        record_invalid_input()
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(HistoryEntryNotFoundException)
    async def history_entry_not_found_handler(
        request: Request,
        exc: HistoryEntryNotFoundException,
    ) -> JSONResponse:
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning("domain_exception", code=exc.code, message=exc.message)
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Count malformed bodies, then defer to FastAPI's 422 response."""
        logger.info(
            "request_validation_failed",
            path=request.url.path,
            error_count=len(exc.errors()),
        )
        if request.method == "POST":
            record_invalid_input()
        return await request_validation_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
