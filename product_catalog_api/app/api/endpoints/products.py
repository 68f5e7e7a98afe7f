"""
Product endpoints.

CRUD, search and statistics routes for products.  Requests reach these
handlers only after the ``enforce_api_key`` middleware has accepted
their ``x-api-key`` header.

The literal ``/search`` and ``/stats`` routes are declared before
``/{product_id}``; routes match in declaration order, and declaring them
later would make them unreachable.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from product_catalog_api.app.core.store import ProductStore, get_store
from product_catalog_api.app.schemas.product import ProductCreate, ProductPage, ProductRead
from product_catalog_api.app.services import query
from product_catalog_api.app.services.product_service import ProductService
from product_catalog_api.app.services.validation import product_payload

router = APIRouter()


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = Query(None),
    page: Optional[str] = Query(None, description="1-based page number, default 1"),
    limit: Optional[str] = Query(None, description="Page size, default 10"),
    store: ProductStore = Depends(get_store),
) -> ProductPage:
    """List products with optional category filter and pagination.

    - **category** matches case-insensitively on the full value.
    - **page**, **limit** must be positive integers; anything else is a 400.
    """
    return await ProductService.list_products(
        store,
        category=category,
        page=query.parse_positive_int(page, "page", query.DEFAULT_PAGE),
        limit=query.parse_positive_int(limit, "limit", query.DEFAULT_LIMIT),
    )


@router.get("/search", response_model=List[ProductRead])
async def search_products(
    q: Optional[str] = Query(None, description="Case-insensitive substring of the product name"),
    store: ProductStore = Depends(get_store),
) -> List[ProductRead]:
    """Search products by name.  A missing or empty ``q`` is a 400."""
    return await ProductService.search_products(store, q)


@router.get("/stats", response_model=Dict[str, int])
async def product_stats(store: ProductStore = Depends(get_store)) -> Dict[str, int]:
    """Return the number of products in each category."""
    return await ProductService.category_statistics(store)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)) -> ProductRead:
    return await ProductService.get_product(store, product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate = Depends(product_payload),
    store: ProductStore = Depends(get_store),
) -> ProductRead:
    """Create a product.  The id is generated by the server."""
    return await ProductService.create_product(store, data)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    data: ProductCreate = Depends(product_payload),
    store: ProductStore = Depends(get_store),
) -> ProductRead:
    """Replace all fields of a product.  The id never changes."""
    return await ProductService.update_product(store, product_id, data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)) -> None:
    await ProductService.delete_product(store, product_id)
    return None
