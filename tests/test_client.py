"""Tests for ProductCatalogClient with a stubbed requests session."""

import json
from unittest import mock

import pytest
import requests

from product_catalog_client import ProductCatalogClient


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://catalog.test/api/products"
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return ProductCatalogClient(base_url="http://catalog.test/", api_key="k", session=session)


def test_sends_api_key_and_query(api, session):
    envelope = {"page": 2, "limit": 5, "total": 0, "data": []}
    session.request.return_value = make_response(200, envelope)

    data, error = api.list_products(category="Tools", page=2, limit=5)

    assert (data, error) == (envelope, None)
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://catalog.test/api/products"
    assert kwargs["params"] == {"category": "Tools", "page": 2, "limit": 5}
    assert kwargs["headers"] == {"x-api-key": "k"}


def test_create_posts_json(api, session):
    payload = {"name": "Pen", "description": "Blue pen", "price": 1.5, "category": "Stationery", "inStock": True}
    session.request.return_value = make_response(201, {"id": "abc", **payload})

    data, error = api.create_product(payload)

    assert error is None
    assert data["id"] == "abc"
    assert session.request.call_args.kwargs["json"] == payload


def test_http_error_is_returned_not_raised(api, session):
    session.request.return_value = make_response(404, {"error": "Product not found"})

    data, error = api.get_product("missing")

    assert data is None
    assert error == {"status_code": 404, "message": "Product not found"}


def test_delete_success_has_no_body(api, session):
    session.request.return_value = make_response(204)
    assert api.delete_product("abc") == (True, None)
    assert session.request.call_args.kwargs["url"] == "http://catalog.test/api/products/abc"


def test_search_and_stats_default_to_empty_on_error(api, session):
    session.request.return_value = make_response(401, {"error": "Unauthorized: Invalid or missing API key"})

    results, error = api.search_products("pen")
    assert results == []
    assert error["status_code"] == 401

    stats, error = api.product_stats()
    assert stats == {}
    assert error["message"] == "Unauthorized: Invalid or missing API key"


def test_connection_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = api.info()

    assert data is None
    assert error == {"status_code": None, "message": "connection refused"}
