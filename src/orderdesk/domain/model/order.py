"""Order record as fetched from the order service.

The dashboard never creates orders; it only reads them and asks the
backend to change their status.  The model therefore stays permissive:
a status string the enumeration does not know is kept as-is so that the
projection engines remain total over whatever the backend returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from orderdesk.domain.exceptions import ValidationError


class OrderStatus(Enum):
    """Order lifecycle, in display order.

    Values are the strings the backend stores.
    """

    ORDER_PLACED = "Order Placed"
    PACKING = "Packing"
    SHIPPED = "Shipped"
    OUT_FOR_DELIVERY = "Out for delivery"
    DELIVERED = "Delivered"

    @staticmethod
    def parse(raw: str | OrderStatus) -> OrderStatus:
        """Accept a backend value (``Out for delivery``) or a member name
        (``out_for_delivery``), case-insensitively."""
        if isinstance(raw, OrderStatus):
            return raw
        wanted = raw.strip().lower()
        for status in OrderStatus:
            if wanted in (status.value.lower(), status.name.lower()):
                return status
        raise ValidationError(
            f"Unknown order status '{raw}'. Expected one of: "
            + ", ".join(s.value for s in OrderStatus)
        )


def to_amount(value: str | float | int | Decimal) -> Decimal:
    """Coerce a monetary value to Decimal, rejecting negatives."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {value!r}") from exc
    if amount < 0:
        raise ValidationError(f"Order amount cannot be negative, got {amount}")
    return amount


@dataclass(frozen=True)
class OrderItem:
    name: str
    quantity: int
    size: str = ""


@dataclass(frozen=True)
class Address:
    first_name: str = ""
    last_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""
    country: str = ""
    phone: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def one_line(self) -> str:
        parts = [self.street, self.city, self.state, self.country, self.zipcode]
        return ", ".join(p for p in parts if p)


@dataclass
class Order:
    """A customer order.

    ``date`` is a naive local datetime (creation time).  ``status`` is the
    raw backend string; use :attr:`status_enum` when the enumeration is
    needed.
    """

    id: str
    date: datetime
    amount: Decimal
    status: str = OrderStatus.ORDER_PLACED.value
    items: list[OrderItem] = field(default_factory=list)
    address: Address = field(default_factory=Address)
    payment_method: str = ""
    payment_confirmed: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.status, OrderStatus):
            self.status = self.status.value
        self.amount = to_amount(self.amount)

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED.value

    @property
    def status_enum(self) -> OrderStatus | None:
        try:
            return OrderStatus(self.status)
        except ValueError:
            return None

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def customer_name(self) -> str:
        return self.address.full_name
