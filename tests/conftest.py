import os
from pathlib import Path
from uuid import uuid4

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config environment before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path) or "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(autouse=True)
def run_around_tests(storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def register_user():
    """Factory fixture: register a user and return its id."""
    from protean import current_domain
    from storefront.user.registration import RegisterUser

    def _register(balance=100.0, role="user", email=None):
        command = RegisterUser(
            email=email or f"shopper-{uuid4().hex[:8]}@example.com",
            first_name="Test",
            last_name="Shopper",
            balance=balance,
            role=role,
        )
        return current_domain.process(command, asynchronous=False)

    return _register


@pytest.fixture()
def add_product():
    """Factory fixture: add a product and return its id."""
    from protean import current_domain
    from storefront.product.creation import AddProduct

    def _add(name="Widget", price=20.0, stock=5, discount_rate=1.0):
        command = AddProduct(name=name, price=price, stock=stock, discount_rate=discount_rate)
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture()
def coordinator(storefront_domain):
    from storefront.order.placement import OrderCoordinator

    return OrderCoordinator(storefront_domain)


@pytest.fixture()
def shipping_address():
    return {"street": "221B Baker Street", "city": "London", "pin": "NW16XE", "state": "Greater London"}


@pytest.fixture()
def place(coordinator, shipping_address):
    """Place an order with default contact details."""

    def _place(user_id, items, **overrides):
        kwargs = {
            "user_id": user_id,
            "order_owner": "Jane Doe",
            "phone_number": "+441234567890",
            "card_number": "4242424242424242",
            "address": shipping_address,
            "items": items,
        }
        kwargs.update(overrides)
        return coordinator.place_order(**kwargs)

    return _place
