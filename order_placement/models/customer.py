# order_placement/models/customer.py
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Dict, Any, List, TYPE_CHECKING

from order_placement.models.address import Address
from order_placement.models.common import to_decimal

if TYPE_CHECKING:
    from order_placement.models.order import Order


@dataclass
class Customer:
    """
    Customer domain model.
    `id` is assigned by whoever owns customer records; this package never generates one.
    `total_purchases` is recomputed from `order_history` each time an order is placed.
    """
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    home_address: Optional[Address] = None
    credit_rating: int = 0
    total_purchases: Decimal = Decimal("0")
    order_history: List["Order"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.total_purchases = to_decimal(self.total_purchases)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Customer":
        if d is None:
            raise ValueError("Cannot construct Customer from None")
        # local import: order.py references Customer for the back-link
        from order_placement.models.order import Order

        address_raw = d.get("home_address") or d.get("address")
        customer = cls(
            id=int(d.get("id") or d.get("customer_id") or 0),
            first_name=d.get("first_name") or d.get("firstname"),
            last_name=d.get("last_name") or d.get("lastname"),
            home_address=Address.from_dict(address_raw) if address_raw is not None else None,
            credit_rating=int(d.get("credit_rating") or 0),
            total_purchases=d.get("total_purchases") or 0,
        )
        for raw in d.get("order_history") or []:
            if isinstance(raw, Order):
                # copy so the caller's order keeps its own customer link
                order = Order(id=raw.id, total_amount=raw.total_amount, customer=customer,
                              is_expedited=raw.is_expedited)
            else:
                order = Order.from_dict(raw, customer=customer)
            customer.order_history.append(order)
        return customer

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain dict view. History orders are emitted without their customer to
        avoid following the order -> customer back-reference.
        """
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "home_address": self.home_address.to_dict() if self.home_address else None,
            "credit_rating": self.credit_rating,
            "total_purchases": str(self.total_purchases),
            "order_history": [o.to_dict(include_customer=False) for o in self.order_history],
        }
