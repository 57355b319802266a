"""
Domain Entities

In-memory business objects, independent of persistence and transport shape.
They carry data only; rules live in the use cases.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


class OrderStatus(str, enum.Enum):
    """Order status workflow: Created -> InPreparation -> Finished."""
    CREATED = "Created"
    IN_PREPARATION = "InPreparation"
    FINISHED = "Finished"


class ItemCategory(str, enum.Enum):
    """Menu sections."""
    SNACK = "Snack"
    DRINK = "Drink"
    DESSERT = "Dessert"
    COMBO = "Combo"


# Statuses a client may request through an update
UPDATABLE_STATUSES = (OrderStatus.IN_PREPARATION, OrderStatus.FINISHED)

# Allowed transitions, keyed by current status
NEXT_STATUS = {
    OrderStatus.CREATED: OrderStatus.IN_PREPARATION,
    OrderStatus.IN_PREPARATION: OrderStatus.FINISHED,
}

# Largest amount a NUMERIC(10, 2) total column holds
MAX_ORDER_TOTAL = Decimal("99999999.99")


@dataclass
class Customer:
    cpf: str
    name: str
    email: str
    address: str
    phone: str
    id: Optional[int] = None


@dataclass
class Item:
    """
    A menu item.

    ``quantity`` is not an attribute of the menu item itself: it is 0 on a
    plain fetch and only carries a value when the item is a line of an order.
    """
    name: str
    description: str
    category: ItemCategory
    value: Decimal
    image: bytes = b""
    quantity: int = 0
    id: Optional[int] = None

    @property
    def line_total(self) -> Decimal:
        return self.value * self.quantity


@dataclass
class Order:
    status: OrderStatus
    total: Decimal
    created_at: datetime
    updated_at: datetime
    items: list[Item] = field(default_factory=list)
    client_id: Optional[int] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class OrderLine:
    """A requested (item id, quantity) pair."""
    item_id: int
    quantity: int
