"""
Repositories Module

Data-access layer. Use cases depend on the abstract contracts; the
SQLAlchemy implementations are wired in by the controllers.
"""

from orders_api.repositories.base import (
    CustomerRepository,
    ItemRepository,
    OrderRepository,
)
from orders_api.repositories.sql import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyItemRepository,
    SQLAlchemyOrderRepository,
)

__all__ = [
    "CustomerRepository",
    "ItemRepository",
    "OrderRepository",
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyItemRepository",
    "SQLAlchemyOrderRepository",
]
