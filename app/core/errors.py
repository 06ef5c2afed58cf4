"""Domain conditions and their translation into HTTP error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Base condition carrying an HTTP status and a message safe to show clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(InventoryError):
    """Missing or invalid required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(InventoryError):
    """No item matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


class ServerError(InventoryError):
    """Unexpected failure while serving a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def request_target(request: Request) -> str:
    """Path plus query string, as logged."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Log a one-line error and build the `{"error": ...}` body."""
    logger.error(
        "[ERROR] %s %s %s - %s",
        status_code,
        request.method,
        request_target(request),
        message,
    )
    return JSONResponse(status_code=status_code, content={"error": message})


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    return error_response(request, exc.status_code, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown routes (404) and wrong methods (405) keep their headers, e.g. Allow
    response = error_response(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error translators to an application."""
    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
