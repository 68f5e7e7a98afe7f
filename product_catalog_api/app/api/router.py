"""
Top-level API router.

Aggregates the info router (mounted at the root, no authentication) and
the products router under ``/api/products``.  New resources are added
here by including their routers with a prefix.
"""

from fastapi import APIRouter

from .endpoints import info, products

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(products.router, prefix="/api/products", tags=["products"])
