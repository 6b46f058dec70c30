"""
Domain Records

In-memory records held by the dish and order stores.

Orders carry value copies of dishes (OrderLine), not references, so a dish
can change after an order was placed without altering the order.

Author: Khalil Bannouri
Version: 3.0.0
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


class OrderStatus(str, enum.Enum):
    """Order status workflow."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @property
    def is_terminal(self) -> bool:
        """Delivered orders reject every further update."""
        return self is OrderStatus.DELIVERED

    @property
    def is_deletable(self) -> bool:
        return self is OrderStatus.PENDING


def _text(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass
class Dish:
    """A menu dish. Every field except id may be replaced."""
    id: str
    name: str
    description: str
    price: int
    image_url: str

    def __repr__(self):
        return f"<Dish #{self.id} - {self.name} - {self.price}>"


@dataclass
class OrderLine:
    """A dish as it was ordered, plus the quantity."""
    quantity: int
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Any = None

    @classmethod
    def from_payload(cls, line: dict[str, Any]) -> "OrderLine":
        """Copy a validated request line into a record."""
        line_id = line.get("id")
        return cls(
            id=str(line_id) if line_id is not None else None,
            name=_text(line.get("name")),
            description=_text(line.get("description")),
            image_url=_text(line.get("image_url")),
            price=line.get("price"),
            quantity=int(line["quantity"]),
        )


@dataclass
class Order:
    """
    A delivery order.

    Tracks the lifecycle from placement (pending) to delivery. Updates
    replace every mutable field at once.
    """
    id: str
    deliver_to: str
    mobile_number: str
    status: OrderStatus = OrderStatus.PENDING
    dishes: list[OrderLine] = field(default_factory=list)

    def __repr__(self):
        return f"<Order #{self.id} - {self.deliver_to} - {self.status.value}>"
