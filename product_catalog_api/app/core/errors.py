"""
Error classification and translation to HTTP responses.

Every failure raised by the store, validator, query engine or auth gate
is a ``ProductAPIError`` carrying an ``ErrorKind``.  Handlers never
catch these errors; instead ``register_exception_handlers`` installs a
single set of FastAPI exception handlers that map the kind to a status
code and render the body as ``{"error": message}``.

Unclassified exceptions are logged with their traceback and reported to
the client as a generic internal error.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorKind(str, Enum):
    """Abstract error classifications used for status code mapping."""

    UNAUTHORIZED = "unauthorized"
    INVALID_PAYLOAD = "invalid_payload"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER = "invalid_parameter"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ProductAPIError(Exception):
    """Base class for classified errors.

    Subclasses set ``kind`` and a default ``message``; a more specific
    message may be passed to the constructor.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class UnauthorizedError(ProductAPIError):
    kind = ErrorKind.UNAUTHORIZED
    message = "Unauthorized: Invalid or missing API key"


class InvalidPayloadError(ProductAPIError):
    kind = ErrorKind.INVALID_PAYLOAD
    message = "Invalid product data"


class MissingParameterError(ProductAPIError):
    kind = ErrorKind.MISSING_PARAMETER
    message = "Missing required query parameter"


class InvalidParameterError(ProductAPIError):
    kind = ErrorKind.INVALID_PARAMETER
    message = "Invalid query parameter"


class NotFoundError(ProductAPIError):
    kind = ErrorKind.NOT_FOUND
    message = "Product not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, INTERNAL_ERROR_MESSAGE)
    logger.debug("%s on %s %s: %s", exc.kind.value, request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Fallback for parameters FastAPI validates itself.

    Product bodies and pagination parameters are validated explicitly,
    so this only fires for malformed input those paths do not cover.
    """
    logger.debug("Request validation failed on %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown routes and unsupported methods, rendered with the same body key.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translator on ``app``."""
    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
