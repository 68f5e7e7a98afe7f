"""
Shared fixtures: an isolated application per test.

Each test gets its own ``ProductStore`` and ``Settings`` so that state
never leaks between tests.
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.store import ProductStore
from product_catalog_api.app.main import create_app

API_KEY = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=API_KEY, log_level="WARNING")


@pytest.fixture
def store() -> ProductStore:
    return ProductStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"x-api-key": API_KEY}


@pytest.fixture
def pen_payload() -> Dict[str, Any]:
    return {
        "name": "Pen",
        "description": "Blue pen",
        "price": 1.5,
        "category": "Stationery",
        "inStock": True,
    }
