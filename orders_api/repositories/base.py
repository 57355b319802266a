"""
Repository Abstract Base Classes

Defines the data-access contract for every aggregate. Repositories deal in
persistence records (``orders_api.models``); translating them into entities
is the use cases' job.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from orders_api.entities import ItemCategory, OrderStatus
from orders_api.models import CustomerModel, ItemModel, OrderModel


class CustomerRepository(ABC):
    """Persistence contract for customers."""

    @abstractmethod
    async def create(self, customer: CustomerModel) -> CustomerModel:
        """Insert a customer and return it with its generated id."""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[CustomerModel]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[CustomerModel]:
        pass

    @abstractmethod
    async def remove(self, customer_id: int) -> None:
        pass


class ItemRepository(ABC):
    """Persistence contract for menu items."""

    @abstractmethod
    async def save(self, item: ItemModel) -> ItemModel:
        """Insert an item and return it with its generated id."""
        pass

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[ItemModel]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[ItemModel]:
        pass

    @abstractmethod
    async def find_by_params(
        self,
        category: Optional[ItemCategory] = None,
        name: Optional[str] = None,
    ) -> list[ItemModel]:
        pass

    @abstractmethod
    async def update(self, item_id: int, changes: dict[str, Any]) -> None:
        """Overwrite the given mutable columns."""
        pass

    @abstractmethod
    async def delete_by_id(self, item_id: int) -> None:
        pass

    @abstractmethod
    async def is_referenced(self, item_id: int) -> bool:
        """Whether any order line points at the item."""
        pass


class OrderRepository(ABC):
    """Persistence contract for orders and their lines."""

    @abstractmethod
    async def save(self, order: OrderModel) -> OrderModel:
        """Insert an order with its lines and return it with items loaded."""
        pass

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[OrderModel]:
        pass

    @abstractmethod
    async def find_by_params(
        self,
        client_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> list[OrderModel]:
        """Orders matching the filters, oldest first."""
        pass

    @abstractmethod
    async def update_status(
        self,
        order_id: int,
        expected_status: OrderStatus,
        status: OrderStatus,
        updated_at: datetime,
    ) -> bool:
        """Move the order only if it is still in ``expected_status``. True when a row changed."""
        pass
