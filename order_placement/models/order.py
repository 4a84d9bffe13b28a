# order_placement/models/order.py
from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Dict, Any

from order_placement.models.common import to_decimal
from order_placement.models.customer import Customer


@dataclass
class Order:
    """
    Order domain model. A new order carries id 0 until something outside this
    package assigns one.

    `customer` is a shared reference: after placement the same Customer holds this
    order in its history. It is excluded from repr/eq so the cycle is never walked.
    """
    id: int = 0
    total_amount: Decimal = Decimal("0")
    customer: Optional[Customer] = field(default=None, repr=False, compare=False)
    is_expedited: bool = False

    def __post_init__(self) -> None:
        self.total_amount = to_decimal(self.total_amount)

    @classmethod
    def from_dict(cls, d: Dict[str, Any], customer: Optional[Customer] = None) -> "Order":
        """
        Build an Order from a plain dict. When `customer` is given it is used as the
        back-reference and any nested customer payload is ignored.
        """
        if d is None:
            raise ValueError("Cannot construct Order from None")
        if customer is None:
            customer_raw = d.get("customer")
            customer = Customer.from_dict(customer_raw) if customer_raw is not None else None
        is_expedited_raw = d.get("is_expedited", False)
        if isinstance(is_expedited_raw, str):
            is_expedited = is_expedited_raw.strip().lower() in ("1", "true", "yes", "y", "t")
        else:
            is_expedited = bool(is_expedited_raw)
        return cls(
            id=int(d.get("id") or d.get("order_id") or 0),
            total_amount=d.get("total_amount") or d.get("amount") or 0,
            customer=customer,
            is_expedited=is_expedited,
        )

    def to_dict(self, include_customer: bool = True) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "total_amount": str(self.total_amount),
            "is_expedited": bool(self.is_expedited),
        }
        if include_customer:
            out["customer"] = self.customer.to_dict() if self.customer else None
        return out
