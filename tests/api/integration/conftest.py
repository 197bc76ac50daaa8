import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import include_api


@pytest.fixture()
def client():
    return TestClient(include_api(FastAPI()))


@pytest.fixture()
def login(client, make_user):
    """Create an account and return bearer headers for it."""

    def _login(role="user", **kwargs):
        password = kwargs.pop("password", "s3cret-pass")
        user = make_user(role=role, password=password, **kwargs)
        response = client.post("/login", json={"email": user.email, "password": password})
        assert response.status_code == 200
        return user, {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
