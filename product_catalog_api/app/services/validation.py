"""
Validation of product payloads.

``validate_product`` checks a decoded JSON body against the product
rules (all five fields present, exact types, non-empty strings, finite
price) and returns a ``ProductCreate``.  It never touches the store.
Failures are reported with a single generic message; the pydantic
details are only logged at DEBUG level.
"""

import logging
from typing import Any

from fastapi import Request
from pydantic import ValidationError

from ..core.errors import InvalidPayloadError
from ..schemas.product import ProductCreate

logger = logging.getLogger(__name__)


def validate_product(payload: Any) -> ProductCreate:
    """Return ``payload`` as a ``ProductCreate`` or raise ``InvalidPayloadError``."""
    if not isinstance(payload, dict):
        raise InvalidPayloadError()
    try:
        return ProductCreate.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Rejected product payload: %s", exc.errors())
        raise InvalidPayloadError() from exc


async def product_payload(request: Request) -> ProductCreate:
    """Dependency that reads the JSON body and validates it."""
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidPayloadError() from exc
    return validate_product(payload)
