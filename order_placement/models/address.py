# order_placement/models/address.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class Address:
    """
    A customer's home address. Every field may be None so that incomplete
    addresses can be represented; the placement workflow decides what is required.
    """
    street1: Optional[str] = None
    street2: Optional[str] = None
    street3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Address":
        if d is None:
            raise ValueError("Cannot construct Address from None")
        return cls(
            street1=d.get("street1") or d.get("street_one"),
            street2=d.get("street2") or d.get("street_two"),
            street3=d.get("street3") or d.get("street_three"),
            city=d.get("city"),
            state=d.get("state"),
            postal_code=d.get("postal_code") or d.get("postalcode") or d.get("zip"),
            country=d.get("country"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
