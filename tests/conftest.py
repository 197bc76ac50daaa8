import json
import os
from itertools import count
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Environment variables are set before any storefront module is imported, so
    config and adapters pick them up.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("BCRYPT_ROUNDS", "4")
    os.environ.setdefault("EMAIL_ADAPTER", "fake")
    os.environ.setdefault("SECRET_KEY", "test-secret-key")
    os.environ.setdefault("APP_BASE_URL", "https://shop.test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    bed = DomainFixture(storefront)
    bed.setup()
    setup_db(storefront)
    yield bed
    drop_db(storefront)
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def run_around_tests(_ctx):
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain
    from storefront.channel import reset_channels

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    reset_channels()


@pytest.fixture()
def outbox():
    """The fake email adapter every outgoing message is recorded on."""
    from storefront.channel import get_email_channel

    return get_email_channel()


# ---------------------------------------------------------------------------
# Data builders
# ---------------------------------------------------------------------------
_sku_counter = count(1)


def product_payload(**overrides):
    payload = {
        "title": "Trail Running Shoe",
        "brand": "Stride",
        "category": "footwear",
        "sku": f"SKU-{next(_sku_counter):05d}",
        "price": 50.0,
        "description": "Lightweight shoe with a grippy outsole.",
        "main_image": "https://cdn.example.com/shoe.jpg",
        "quantity": 10,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def make_product():
    """Add a product through the AddProduct command and return it."""
    from protean import current_domain
    from storefront.catalogue.creation import AddProduct
    from storefront.catalogue.product import Product

    def _make(**overrides):
        payload = product_payload(**overrides)
        if "thumbnails" in payload:
            payload["thumbnails"] = json.dumps(payload["thumbnails"])
        product_id = current_domain.process(AddProduct(**payload), asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _make


_email_counter = count(1)


@pytest.fixture()
def make_user():
    """Register a user (optionally an admin) and return the aggregate."""
    from protean import current_domain
    from storefront.user.registration import RegisterUser
    from storefront.user.roles import ChangeUserRole
    from storefront.user.user import User

    def _make(name="Ada Lovelace", email=None, password="s3cret-pass", role="user"):
        email = email or f"shopper{next(_email_counter)}@example.com"
        user_id = current_domain.process(
            RegisterUser(name=name, email=email, password=password),
            asynchronous=False,
        )
        if role != "user":
            current_domain.process(ChangeUserRole(user_id=user_id, role=role), asynchronous=False)
        return current_domain.repository_for(User).get(user_id)

    return _make


@pytest.fixture()
def shipping_details():
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "company": None,
        "country": "UK",
        "address": "12 Analytical Row",
        "city": "London",
        "phone": "+44 20 0000 0000",
        "email": "ada@example.com",
    }
