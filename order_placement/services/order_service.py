from __future__ import annotations
import logging
from decimal import Decimal
from typing import Optional

from order_placement.config import Settings, get_settings
from order_placement.core.validation import validate_order
from order_placement.models.order import Order

logger = logging.getLogger(__name__)


class OrderService:
    """
    Places new orders for customers.

    place_order runs a single linear pass: validate, expedite, record. Validation is
    fail-fast and happens before any mutation, so a rejected order leaves both the
    order and its customer exactly as they were.

    Not thread-safe. Two calls for the same Customer instance race on its
    order_history and total_purchases; callers must place orders for a given
    customer from one thread at a time (or hold their own lock).
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def place_order(self, order: Order) -> None:
        """
        Validate `order`, flag it expedited when the customer qualifies, then append it
        to the customer's history and recompute their total purchases.
        Raises InvalidOrder, InvalidCustomer, InsufficientCredit or InvalidAddress.
        """
        validate_order(order)
        self._expedite(order)
        self._record_in_history(order)

    def _expedite(self, order: Order) -> None:
        customer = order.customer
        # reads the total before this order is recorded; never resets the flag
        if (customer.total_purchases > self.settings.EXPEDITE_MIN_PURCHASES
                and customer.credit_rating > self.settings.EXPEDITE_MIN_CREDIT_RATING):
            order.is_expedited = True
            logger.debug("Order expedited for customer %s", customer.id)

    def _record_in_history(self, order: Order) -> None:
        customer = order.customer
        customer.order_history.append(order)
        # full recomputation so any drift in total_purchases is corrected
        customer.total_purchases = sum((o.total_amount for o in customer.order_history), Decimal("0"))
        logger.debug(
            "Recorded order for customer %s: %d orders, total purchases %s",
            customer.id, len(customer.order_history), customer.total_purchases,
        )


def place_order(order: Order) -> None:
    """
    Place `order` with a service built from the current settings.
    Same caller obligation as OrderService: one thread per customer at a time.
    """
    OrderService().place_order(order)
