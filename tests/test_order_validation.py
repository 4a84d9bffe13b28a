from decimal import Decimal

import pytest

from order_placement.core.exceptions import InvalidOrder, OrderPlacementError


@pytest.mark.parametrize("order_id", [123, 1, -1])
def test_existing_order_id_is_rejected(order_service, order_builder, customer_builder, order_id):
    customer = customer_builder.with_total_purchases(7).build()
    order = order_builder.with_id(order_id).with_customer(customer).build()

    with pytest.raises(InvalidOrder) as exc:
        order_service.place_order(order)
    assert str(exc.value) == "Order ID must be 0."

    # nothing was touched
    assert customer.order_history == []
    assert customer.total_purchases == Decimal("7")
    assert order.is_expedited is False


@pytest.mark.parametrize("amount", [0, -1, "-0.01"])
def test_non_positive_amount_is_rejected(order_service, order_builder, customer_builder, amount):
    order = order_builder.with_id(0).with_amount(amount).with_customer(customer_builder.build()).build()
    with pytest.raises(InvalidOrder) as exc:
        order_service.place_order(order)
    assert exc.value.message == "Order amount must be greater than 0."


def test_missing_customer_is_rejected(order_service, order_builder):
    order = order_builder.with_id(0).with_amount(100).build()
    with pytest.raises(InvalidOrder) as exc:
        order_service.place_order(order)
    assert str(exc.value) == "Order cannot have null customer."


def test_order_id_checked_before_amount_and_customer(order_service, order_builder):
    order = order_builder.with_id(5).with_amount(0).build()
    with pytest.raises(InvalidOrder, match=r"^Order ID must be 0\.$"):
        order_service.place_order(order)


def test_order_errors_share_a_common_base(order_service, order_builder):
    order = order_builder.with_id(0).build()
    with pytest.raises(OrderPlacementError):
        order_service.place_order(order)
    with pytest.raises(ValueError):
        order_service.place_order(order)


def test_fully_valid_order_is_accepted(order_service, order_builder, customer_builder, address_builder):
    address = (address_builder.with_street_one("street1").with_city("city").with_state("state")
               .with_postal_code("postalcode").with_country("country").build())
    customer = (customer_builder.with_id(1).with_home_address(address).with_first_name("Bob")
                .with_last_name("Doe").with_credit_rating(201).with_total_purchases(1).build())
    order = order_builder.with_id(0).with_amount(Decimal("100")).with_customer(customer).build()

    order_service.place_order(order)

    assert order in customer.order_history


@pytest.mark.parametrize("order_id,amount,with_customer,message", [
    (0, 0, False, "Order amount must be greater than 0."),
    (0, -5, True, "Order amount must be greater than 0."),
    (7, 100, False, "Order ID must be 0."),
])
def test_order_rules_fail_in_order(order_service, order_builder, customer_builder,
                                   order_id, amount, with_customer, message):
    customer = customer_builder.with_id(0).build() if with_customer else None
    order = order_builder.with_id(order_id).with_amount(amount).with_customer(customer).build()
    with pytest.raises(InvalidOrder) as exc:
        order_service.place_order(order)
    assert str(exc.value) == message


def test_order_rules_run_before_customer_rules(order_service, order_builder, customer_builder):
    # customer is invalid in every way, but the amount is reported first
    customer = (customer_builder.with_id(-1).with_home_address(None).with_credit_rating(0)
                .with_total_purchases(-1).build())
    order = order_builder.with_amount(0).with_customer(customer).build()
    with pytest.raises(InvalidOrder, match=r"^Order amount must be greater than 0\.$"):
        order_service.place_order(order)
