from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from order_placement.models.address import Address
from order_placement.models.customer import Customer
from order_placement.models.order import Order


# Shape-only schemas: they coerce types but leave business rules to place_order,
# so an order with a non-zero id still parses and is rejected at placement time.


class AddressIn(BaseModel):
    street1: Optional[str] = Field(None, description="First street line (required at placement)")
    street2: Optional[str] = Field(None, description="Optional second street line")
    street3: Optional[str] = Field(None, description="Optional third street line")
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def to_model(self) -> Address:
        return Address(**self.model_dump())


class HistoricalOrderIn(BaseModel):
    """An order already in a customer's history; its customer is the enclosing one."""
    id: int = 0
    total_amount: Decimal = Field(..., description="Amount of the past order")
    is_expedited: bool = False

    model_config = ConfigDict(extra="ignore")


class CustomerIn(BaseModel):
    id: int = Field(0, description="Externally assigned customer id")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    home_address: Optional[AddressIn] = None
    credit_rating: int = 0
    total_purchases: Decimal = Decimal("0")
    order_history: List[HistoricalOrderIn] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def to_model(self) -> Customer:
        customer = Customer(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            home_address=self.home_address.to_model() if self.home_address else None,
            credit_rating=self.credit_rating,
            total_purchases=self.total_purchases,
        )
        for past in self.order_history:
            customer.order_history.append(
                Order(id=past.id, total_amount=past.total_amount, customer=customer,
                      is_expedited=past.is_expedited)
            )
        return customer


class OrderIn(BaseModel):
    id: int = Field(0, description="Must be 0 for a new order")
    total_amount: Decimal = Field(..., description="Order total")
    customer: Optional[CustomerIn] = None
    is_expedited: bool = False

    model_config = ConfigDict(extra="ignore")

    @field_validator("total_amount", mode="before")
    def _float_amount_via_str(cls, v):
        # avoid binary float artefacts such as 0.1 -> 0.1000000000000000055...
        if isinstance(v, float):
            return str(v)
        return v

    def to_model(self) -> Order:
        return Order(
            id=self.id,
            total_amount=self.total_amount,
            customer=self.customer.to_model() if self.customer else None,
            is_expedited=self.is_expedited,
        )
