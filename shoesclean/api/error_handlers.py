# This file defines the API error types and the handlers that render them.
# It exists so every endpoint returns the same `{success: false, error}` shape with request trace fields.
# Validation problems become 400s, missing records 404s, and storage failures 500s.
# Centralized handling logs the message once and keeps stack traces out of response bodies.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class InvalidIdentifier(APIError):
    def __init__(self, message: str = "Invalid ID format") -> None:
        super().__init__(status_code=400, error_code="INVALID_IDENTIFIER", message=message)


class InvalidPayload(APIError):
    """Raised when a record body fails validation; `field` names the offending key."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(status_code=400, error_code="INVALID_PAYLOAD", message=message)


class InvalidPagination(APIError):
    def __init__(self, message: str = "Invalid pagination parameters") -> None:
        super().__init__(status_code=400, error_code="INVALID_PAGINATION", message=message)


class InvalidSortColumn(APIError):
    def __init__(self, message: str = "Invalid sort column") -> None:
        super().__init__(status_code=400, error_code="INVALID_SORT_COLUMN", message=message)


class InvalidSortOrder(APIError):
    def __init__(self, message: str = "Invalid sort order") -> None:
        super().__init__(status_code=400, error_code="INVALID_SORT_ORDER", message=message)


class NotFound(APIError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(status_code=404, error_code="NOT_FOUND", message=message)


class StorageFailure(APIError):
    def __init__(self, message: str = "Storage operation failed", *, status_code: int = 500) -> None:
        super().__init__(status_code=status_code, error_code="STORAGE_FAILURE", message=message)


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(*, request: Request, error_code: str, message: str) -> dict[str, Any]:
    return {
        "success": False,
        "error": message,
        "error_code": error_code,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def _log_error(request: Request, status_code: int, message: str) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(level, "%s %s -> %s: %s", request.method, request.url.path, status_code, message)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        _log_error(request, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = "Invalid request parameters."
        _log_error(request, 400, message)
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message=message,
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        _log_error(request, exc.status_code, str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="HTTP_ERROR",
                message=str(exc.detail),
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        _log_error(request, 500, f"{type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                error_code="INTERNAL_SERVER_ERROR",
                message="The server encountered an unexpected error.",
            ),
        )
