"""Product Catalog API client.

A thin wrapper around the product REST API using the ``requests``
library.  Every method returns a tuple ``(data, error)``: on success
``data`` holds the decoded JSON body and ``error`` is ``None``; on
failure ``data`` is empty and ``error`` is a dictionary with keys
``status_code`` and ``message``.  Nothing is raised for HTTP or
connection errors.

The client exposes one method per route:

* :meth:`info` – liveness information from ``GET /``.
* :meth:`list_products` – a page of products, optionally by category.
* :meth:`get_product` – a single product by id.
* :meth:`create_product` / :meth:`update_product` – write a product.
* :meth:`delete_product` – remove a product.
* :meth:`search_products` – products whose name contains a query.
* :meth:`product_stats` – product count per category.

The API key is sent in the ``x-api-key`` header on every request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ProductCatalogClient:
    """Client for interacting with the product catalog API."""

    PRODUCTS_PATH = "/api/products"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            api_key: Shared API key sent as ``x-api-key``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
            A successful response without a body yields ``(None, None)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _product_path(self, product_id: str) -> str:
        return f"{self.PRODUCTS_PATH}/{product_id}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def info(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/")

    def list_products(
        self,
        *,
        category: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of products.

        Returns:
            A tuple ``(envelope, error)`` where ``envelope`` has the keys
            ``page``, ``limit``, ``total`` and ``data``.
        """
        params = {
            key: value
            for key, value in {"category": category, "page": page, "limit": limit}.items()
            if value is not None
        }
        return self._request("GET", self.PRODUCTS_PATH, params=params or None)

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", self._product_path(product_id))

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a product from ``name``, ``description``, ``price``,
        ``category`` and ``inStock``."""
        return self._request("POST", self.PRODUCTS_PATH, json_body=payload)

    def update_product(
        self, product_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PUT", self._product_path(product_id), json_body=payload)

    def delete_product(self, product_id: str) -> Tuple[bool, Optional[ApiError]]:
        """Delete a product.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._product_path(product_id))
        return error is None, error

    def search_products(self, q: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", f"{self.PRODUCTS_PATH}/search", params={"q": q})
        if error:
            return [], error
        return data or [], None

    def product_stats(self) -> Tuple[Dict[str, int], Optional[ApiError]]:
        data, error = self._request("GET", f"{self.PRODUCTS_PATH}/stats")
        if error:
            return {}, error
        return data or {}, None
