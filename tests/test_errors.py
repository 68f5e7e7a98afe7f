"""Tests for error classification and the exception handlers."""

import logging

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.errors import (
    ErrorKind,
    InvalidParameterError,
    InvalidPayloadError,
    MissingParameterError,
    NotFoundError,
    ProductAPIError,
    UnauthorizedError,
)


@pytest.mark.parametrize(
    "error_class, kind, status_code",
    [
        (UnauthorizedError, ErrorKind.UNAUTHORIZED, 401),
        (InvalidPayloadError, ErrorKind.INVALID_PAYLOAD, 400),
        (MissingParameterError, ErrorKind.MISSING_PARAMETER, 400),
        (InvalidParameterError, ErrorKind.INVALID_PARAMETER, 400),
        (NotFoundError, ErrorKind.NOT_FOUND, 404),
        (ProductAPIError, ErrorKind.INTERNAL, 500),
    ],
)
def test_kind_and_status(error_class, kind, status_code):
    error = error_class()
    assert error.kind is kind
    assert error.status_code == status_code
    assert str(error) == error.message


def test_custom_message():
    assert NotFoundError("Nope").message == "Nope"


def test_unknown_route_uses_error_key(client):
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unsupported_method_uses_error_key(client, auth_headers):
    response = client.patch("/api/products/some-id", headers=auth_headers)
    assert response.status_code == 405
    assert "error" in response.json()


def test_unhandled_exception_is_generic_and_logged(app, caplog):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as client:
        with caplog.at_level(logging.ERROR):
            response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "hunter2" not in response.text
    assert any("Unhandled error on GET /boom" in record.getMessage() for record in caplog.records)


def test_internal_classified_error_hides_message(app):
    @app.get("/internal")
    async def internal():
        raise ProductAPIError("store corrupted")

    with TestClient(app) as client:
        response = client.get("/internal")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
