"""
SQLAlchemy Database Models

Persistence-shaped records for customers, menu items and orders. An order
references items through ``order_items``, which carries the per-line
quantity so the shared item row never stores it.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    LargeBinary,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from orders_api.database import Base
from orders_api.entities import ItemCategory, OrderStatus


class CustomerModel(Base):
    """Registered customers. E-mail is unique."""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    cpf = Column(String(14), nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    address = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Customer #{self.id} - {self.email}>"


class ItemModel(Base):
    """Menu items. Name is unique."""
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    category = Column(Enum(ItemCategory), nullable=False, index=True)
    value = Column(Numeric(10, 2), nullable=False)
    image = Column(LargeBinary, nullable=False, default=b"")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Item #{self.id} - {self.name} - {self.category.value}>"


class OrderModel(Base):
    """
    Orders table.

    ``client_id`` is nullable (anonymous orders) and intentionally has no
    foreign key: removing a customer leaves their order history intact.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    status = Column(
        Enum(OrderStatus),
        default=OrderStatus.CREATED,
        nullable=False,
        index=True
    )
    client_id = Column(Integer, nullable=True, index=True)
    total = Column(Numeric(10, 2), nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    lines = relationship(
        "OrderItemModel",
        back_populates="order",
        order_by="OrderItemModel.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Order #{self.id} - {self.status.value} - {self.total}>"


class OrderItemModel(Base):
    """One line of an order: which item, in which position, how many."""
    __tablename__ = "order_items"

    order_id = Column(
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        primary_key=True
    )
    position = Column(Integer, primary_key=True)
    item_id = Column(
        Integer,
        ForeignKey("items.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )
    quantity = Column(Integer, nullable=False)

    order = relationship("OrderModel", back_populates="lines")
    item = relationship("ItemModel", lazy="selectin")

    def __repr__(self):
        return f"<OrderItem order={self.order_id} item={self.item_id} x{self.quantity}>"
