"""Integration tests for cross-cutting HTTP behaviour."""

import inspect

import pytest
from storefront.api.middleware import NO_CACHE_HEADERS
from storefront.api.routes import login, register, reset_password


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "domain": "storefront"}


def test_success_responses_are_uncacheable(client, make_product):
    make_product()
    response = client.get("/products")
    for header, value in NO_CACHE_HEADERS.items():
        assert response.headers[header] == value


def test_error_responses_are_uncacheable(client):
    response = client.get("/products/missing")
    assert response.status_code == 404
    assert response.headers["Cache-Control"] == NO_CACHE_HEADERS["Cache-Control"]


def test_request_id_is_accepted(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.status_code == 200


@pytest.mark.parametrize("endpoint", [register, login, reset_password])
def test_password_hashing_endpoints_run_in_threadpool(endpoint):
    assert not inspect.iscoroutinefunction(endpoint)
