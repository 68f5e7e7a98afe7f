"""
Top-level package for the Product Catalog API.

All functionality lives in the ``app`` subpackage; the ASGI application
is importable as ``product_catalog_api.app.main:app``.
"""

__all__ = []
