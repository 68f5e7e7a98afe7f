"""
Shared API key authentication.

Every request whose path falls under ``/api/products`` requires the
``x-api-key`` header to match the configured secret.  ``authenticate``
is the pure comparison; ``enforce_api_key`` is an HTTP middleware that
applies it before routing, so unknown sub-paths, unsupported methods and
trailing-slash variants are rejected with 401 just like the real routes,
and no request body is read or store touched without a valid key.
"""

import hmac
import logging
from typing import Awaitable, Callable, Optional

from fastapi import Request
from starlette.responses import Response

from .errors import UnauthorizedError, error_response

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
PROTECTED_PREFIX = "/api/products"


def authenticate(supplied_key: Optional[str], secret: Optional[str]) -> bool:
    """Return True iff ``supplied_key`` is present and equals ``secret``.

    An empty or unset secret never authenticates.  The comparison is
    constant-time.
    """
    if not supplied_key or not secret:
        return False
    return hmac.compare_digest(supplied_key.encode("utf-8"), secret.encode("utf-8"))


def is_protected_path(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


async def enforce_api_key(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Middleware rejecting protected requests without a valid API key.

    The secret is ``settings.api_key`` of the running application.
    Rejections are answered here with the translated 401 body; the
    request never reaches the router.
    """
    if is_protected_path(request.url.path):
        supplied_key = request.headers.get(API_KEY_HEADER)
        if not authenticate(supplied_key, request.app.state.settings.api_key):
            error = UnauthorizedError()
            logger.debug("Rejected %s %s: %s", request.method, request.url.path, error.message)
            return error_response(error.status_code, error.message)
    return await call_next(request)
