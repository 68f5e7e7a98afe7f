"""
Business logic for products.

``ProductService`` sits between the route handlers and the in-memory
``ProductStore``.  Lookups that miss raise ``NotFoundError``; listing,
search and statistics delegate to the pure helpers in ``query`` over a
snapshot of the store.
"""

import logging
from typing import Dict, List, Optional

from ..core.errors import NotFoundError
from ..core.store import ProductStore
from ..schemas.product import ProductCreate, ProductPage, ProductRead
from . import query

logger = logging.getLogger(__name__)


class ProductService:
    """Service for managing products held in a ``ProductStore``."""

    @classmethod
    async def create_product(cls, store: ProductStore, data: ProductCreate) -> ProductRead:
        product = store.insert(data)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    @classmethod
    async def get_product(cls, store: ProductStore, product_id: str) -> ProductRead:
        """Return a single product or raise ``NotFoundError``."""
        product = store.find_by_id(product_id)
        if product is None:
            raise NotFoundError()
        return product

    @classmethod
    async def update_product(cls, store: ProductStore, product_id: str, data: ProductCreate) -> ProductRead:
        """Replace all fields of a product, keeping its id."""
        product = store.replace_by_id(product_id, data)
        logger.info("Updated product %s", product_id)
        return product

    @classmethod
    async def delete_product(cls, store: ProductStore, product_id: str) -> None:
        store.delete_by_id(product_id)
        logger.info("Deleted product %s", product_id)

    @classmethod
    async def list_products(
        cls,
        store: ProductStore,
        category: Optional[str] = None,
        page: int = query.DEFAULT_PAGE,
        limit: int = query.DEFAULT_LIMIT,
    ) -> ProductPage:
        """Return one page of products, optionally filtered by category.

        - ``category`` matches case-insensitively on the whole value.
        - ``page`` is 1-based; ``limit`` is the page size.
        - ``total`` in the result counts the filtered set before paging.
        """
        filtered = query.filter_by_category(store.list_all(), category)
        return query.paginate(filtered, page=page, limit=limit)

    @classmethod
    async def search_products(cls, store: ProductStore, q: Optional[str]) -> List[ProductRead]:
        return query.search_by_name(store.list_all(), q)

    @classmethod
    async def category_statistics(cls, store: ProductStore) -> Dict[str, int]:
        return query.category_stats(store.list_all())
