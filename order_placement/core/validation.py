from __future__ import annotations
from typing import Any, Optional, Tuple

from order_placement.core.exceptions import (
    InsufficientCredit,
    InvalidAddress,
    InvalidCustomer,
    InvalidOrder,
)
from order_placement.models.address import Address
from order_placement.models.customer import Customer
from order_placement.models.order import Order


# credit rating must be strictly greater; not configurable because the message quotes it
MIN_CREDIT_RATING = 200

# (attribute, label used in the error message); order matters, first failure wins.
# Labels are part of the public error contract and keep their historical casing.
REQUIRED_ADDRESS_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("street1", "StreetOne"),
    ("city", "City"),
    ("state", "State"),
    ("postal_code", "Postalcode"),
    ("country", "Country"),
)


def is_blank(value: Optional[Any]) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    return not str(value).strip()


def validate_order(order: Order) -> None:
    """
    Check the order, then its customer, then the customer's address.
    Raises on the first violated rule; nothing is mutated.
    """
    if order.id != 0:
        raise InvalidOrder("Order ID must be 0.")
    if order.total_amount <= 0:
        raise InvalidOrder("Order amount must be greater than 0.")
    if order.customer is None:
        raise InvalidOrder("Order cannot have null customer.")

    validate_customer(order.customer)


def validate_customer(customer: Customer) -> None:
    if customer.id <= 0:
        raise InvalidCustomer("Customer Id must be greater than zero")
    if customer.home_address is None:
        raise InvalidCustomer("Customer Address cannot be null")
    if is_blank(customer.first_name) or is_blank(customer.last_name):
        raise InvalidCustomer("Customer must have firstname and lastname")
    if customer.credit_rating <= MIN_CREDIT_RATING:
        raise InsufficientCredit(f"Credit rating must be greater than {MIN_CREDIT_RATING}")
    if customer.total_purchases < 0:
        raise InvalidCustomer("Total purchases must be zero or higher")

    validate_address(customer.home_address)


def validate_address(address: Address) -> None:
    for attr, label in REQUIRED_ADDRESS_FIELDS:
        if is_blank(getattr(address, attr)):
            raise InvalidAddress(f"{label} cannot be null or empty")
