# tests/conftest.py
import os
import sys

import pytest

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from order_placement.config import Settings  # noqa: E402
from order_placement.services.order_service import OrderService  # noqa: E402
from order_placement.testing.builders import AddressBuilder, CustomerBuilder, OrderBuilder  # noqa: E402


@pytest.fixture
def order_service():
    # explicit defaults so a developer's .env / ORDER_* variables can't change thresholds
    return OrderService(settings=Settings(_env_file=None, EXPEDITE_MIN_PURCHASES=5000,
                                          EXPEDITE_MIN_CREDIT_RATING=500))


@pytest.fixture
def address_builder():
    return AddressBuilder()


@pytest.fixture
def customer_builder():
    return CustomerBuilder()


@pytest.fixture
def order_builder():
    return OrderBuilder()


@pytest.fixture
def order_for(order_builder):
    """
    Return a callable that wraps a customer in an otherwise valid new order.
    Usage: order = order_for(customer, amount=90)
    """
    def _fn(customer, amount=100):
        return order_builder.with_id(0).with_amount(amount).with_customer(customer).build()
    return _fn
