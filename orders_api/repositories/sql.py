"""
SQLAlchemy Repository Implementations

Async implementations of the repository contracts on top of an
``AsyncSession``. Each write commits its own unit of work; unique-constraint
violations are translated into ``ConflictException``.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.exceptions import ConflictException
from orders_api.entities import ItemCategory, OrderStatus
from orders_api.models import CustomerModel, ItemModel, OrderItemModel, OrderModel
from orders_api.repositories.base import (
    CustomerRepository,
    ItemRepository,
    OrderRepository,
)

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """Shared session handling."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self, conflict_message: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity error translated to conflict: {e.orig}")
            raise ConflictException(conflict_message) from e


# =============================================================================
# CUSTOMERS
# =============================================================================

class SQLAlchemyCustomerRepository(SQLAlchemyRepository, CustomerRepository):

    async def create(self, customer: CustomerModel) -> CustomerModel:
        self.session.add(customer)
        await self._commit("E-mail already in use!")
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[CustomerModel]:
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.id == customer_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[CustomerModel]:
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.email == email)
        )
        return result.scalar_one_or_none()

    async def remove(self, customer_id: int) -> None:
        await self.session.execute(
            delete(CustomerModel).where(CustomerModel.id == customer_id)
        )
        await self.session.commit()


# =============================================================================
# ITEMS
# =============================================================================

class SQLAlchemyItemRepository(SQLAlchemyRepository, ItemRepository):

    async def save(self, item: ItemModel) -> ItemModel:
        self.session.add(item)
        await self._commit("Item already exists!")
        return item

    async def get_by_id(self, item_id: int) -> Optional[ItemModel]:
        result = await self.session.execute(
            select(ItemModel).where(ItemModel.id == item_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[ItemModel]:
        result = await self.session.execute(
            select(ItemModel).where(ItemModel.name == name)
        )
        return result.scalar_one_or_none()

    async def find_by_params(
        self,
        category: Optional[ItemCategory] = None,
        name: Optional[str] = None,
    ) -> list[ItemModel]:
        query = select(ItemModel).order_by(ItemModel.id)

        if category is not None:
            query = query.where(ItemModel.category == category)
        if name is not None:
            query = query.where(ItemModel.name == name)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update(self, item_id: int, changes: dict[str, Any]) -> None:
        await self.session.execute(
            update(ItemModel)
            .where(ItemModel.id == item_id)
            .values(**changes)
        )
        await self._commit("Item already exists!")

    async def delete_by_id(self, item_id: int) -> None:
        await self.session.execute(
            delete(ItemModel).where(ItemModel.id == item_id)
        )
        await self._commit("Item is referenced by existing orders!")

    async def is_referenced(self, item_id: int) -> bool:
        result = await self.session.execute(
            select(exists().where(OrderItemModel.item_id == item_id))
        )
        return bool(result.scalar())


# =============================================================================
# ORDERS
# =============================================================================

class SQLAlchemyOrderRepository(SQLAlchemyRepository, OrderRepository):

    async def save(self, order: OrderModel) -> OrderModel:
        self.session.add(order)
        await self._commit("Order could not be stored!")

        # Lines were written with item ids only; reload them with their items
        order_id = order.id
        self.session.expunge(order)
        return await self.get_by_id(order_id)

    async def get_by_id(self, order_id: int) -> Optional[OrderModel]:
        result = await self.session.execute(
            select(OrderModel).where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none()

    async def find_by_params(
        self,
        client_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> list[OrderModel]:
        query = select(OrderModel).order_by(OrderModel.created_at.asc(), OrderModel.id.asc())

        if client_id is not None:
            query = query.where(OrderModel.client_id == client_id)
        if status is not None:
            query = query.where(OrderModel.status == status)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_status(
        self,
        order_id: int,
        expected_status: OrderStatus,
        status: OrderStatus,
        updated_at: datetime,
    ) -> bool:
        result = await self.session.execute(
            update(OrderModel)
            .where(
                OrderModel.id == order_id,
                OrderModel.status == expected_status,
            )
            .values(status=status, updated_at=updated_at)
        )
        await self.session.commit()
        return result.rowcount == 1
