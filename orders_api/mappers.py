"""
Model <-> Entity mapping.

Plain, side-effect-free translation functions between the SQLAlchemy records
in ``orders_api.models`` and the entities in ``orders_api.entities``.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional

from orders_api.entities import Customer, Item, Order
from orders_api.models import CustomerModel, ItemModel, OrderItemModel, OrderModel


# =============================================================================
# CUSTOMER
# =============================================================================

def customer_to_entity(model: CustomerModel) -> Customer:
    return Customer(
        id=model.id,
        cpf=model.cpf,
        name=model.name,
        email=model.email,
        address=model.address,
        phone=model.phone,
    )


def customers_to_entities(models: Iterable[CustomerModel]) -> list[Customer]:
    return [customer_to_entity(m) for m in models]


def customer_to_model(customer: Customer) -> CustomerModel:
    return CustomerModel(
        id=customer.id,
        cpf=customer.cpf,
        name=customer.name,
        email=customer.email,
        address=customer.address,
        phone=customer.phone,
    )


# =============================================================================
# ITEM
# =============================================================================

def item_to_entity(model: ItemModel, quantity: int = 0) -> Item:
    """Map an item row. ``quantity`` only has meaning for an order line."""
    return Item(
        id=model.id,
        name=model.name,
        description=model.description,
        category=model.category,
        value=Decimal(model.value),
        image=bytes(model.image or b""),
        quantity=quantity,
    )


def items_to_entities(models: Iterable[ItemModel]) -> list[Item]:
    return [item_to_entity(m) for m in models]


def item_to_model(item: Item) -> ItemModel:
    return ItemModel(
        id=item.id,
        name=item.name,
        description=item.description,
        category=item.category,
        value=item.value,
        image=item.image,
    )


def order_line_to_entity(line: OrderItemModel) -> Item:
    return item_to_entity(line.item, quantity=line.quantity)


# =============================================================================
# ORDER
# =============================================================================

def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands timestamps back naive; they were written in UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def order_to_entity(model: OrderModel) -> Order:
    return Order(
        id=model.id,
        status=model.status,
        client_id=model.client_id,
        total=Decimal(model.total),
        created_at=as_utc(model.created_at),
        updated_at=as_utc(model.updated_at),
        items=[order_line_to_entity(line) for line in model.lines],
    )


def orders_to_entities(models: Iterable[OrderModel]) -> list[Order]:
    return [order_to_entity(m) for m in models]


def order_to_model(order: Order) -> OrderModel:
    """
    Build a new order row with its lines.

    Lines reference items by id only; the item rows themselves are never
    written through an order.
    """
    return OrderModel(
        id=order.id,
        status=order.status,
        client_id=order.client_id,
        total=order.total,
        created_at=order.created_at,
        updated_at=order.updated_at,
        lines=[
            OrderItemModel(position=position, item_id=item.id, quantity=item.quantity)
            for position, item in enumerate(order.items)
        ],
    )
