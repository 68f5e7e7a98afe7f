"""
Query helpers over a snapshot of the product store.

All functions are pure: they take a list of products (normally
``ProductStore.list_all()``) and return new values without mutating
their input.  Category comparison for filtering and name comparison for
search are case-insensitive; statistics keep categories exactly as
stored.
"""

from typing import Dict, List, Optional

from ..core.errors import InvalidParameterError, MissingParameterError
from ..schemas.product import ProductPage, ProductRead

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(raw: Optional[str], name: str, default: int) -> int:
    """Parse a query string value as an integer >= 1.

    Missing or empty values yield ``default``.  Anything that is not a
    positive base-10 integer raises ``InvalidParameterError``.
    """
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidParameterError(f"Query parameter '{name}' must be a positive integer") from None
    if value < 1:
        raise InvalidParameterError(f"Query parameter '{name}' must be a positive integer")
    return value


def filter_by_category(products: List[ProductRead], category: Optional[str]) -> List[ProductRead]:
    """Keep products whose category equals ``category`` ignoring case.

    An empty or missing category returns the input unfiltered.
    """
    if not category:
        return list(products)
    wanted = category.casefold()
    return [p for p in products if p.category.casefold() == wanted]


def paginate(products: List[ProductRead], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> ProductPage:
    """Return the ``page``-th window of ``limit`` products.

    Pages are 1-based.  A window past the end is empty rather than an
    error; ``total`` is always the size of ``products``.
    """
    start = (page - 1) * limit
    end = start + limit
    return ProductPage(page=page, limit=limit, total=len(products), data=products[start:end])


def search_by_name(products: List[ProductRead], q: Optional[str]) -> List[ProductRead]:
    """Return products whose name contains ``q`` ignoring case.

    Raises ``MissingParameterError`` when ``q`` is missing or empty.
    """
    if not q:
        raise MissingParameterError("Search query 'q' is required")
    needle = q.casefold()
    return [p for p in products if needle in p.name.casefold()]


def category_stats(products: List[ProductRead]) -> Dict[str, int]:
    """Count products per category as stored, in order of first appearance."""
    counts: Dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1
    return counts
