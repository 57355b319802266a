"""
Order Use Case

Order lifecycle: creation from requested lines, lookups, and status
transitions along Created -> InPreparation -> Finished. Every successful
write is reported to the preparation service without waiting for it.
"""

import dataclasses
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Union

from orders_api.core.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
)
from orders_api.entities import (
    MAX_ORDER_TOTAL,
    NEXT_STATUS,
    UPDATABLE_STATUSES,
    Item,
    Order,
    OrderLine,
    OrderStatus,
)
from orders_api.mappers import order_to_entity, order_to_model, orders_to_entities
from orders_api.repositories.base import OrderRepository
from orders_api.services.preparation.base import BasePreparationService
from orders_api.use_cases.item import ItemUseCase

logger = logging.getLogger(__name__)


def calculate_total(items: list[Item]) -> Decimal:
    """Sum of value x quantity over all lines."""
    return sum((item.line_total for item in items), Decimal("0"))


class OrderUseCase:

    def __init__(
        self,
        order_repository: OrderRepository,
        item_use_case: ItemUseCase,
        preparation_service: BasePreparationService,
    ):
        self.order_repository = order_repository
        self.item_use_case = item_use_case
        self.preparation_service = preparation_service

    async def create(self, lines: list[OrderLine], client_id: Optional[int] = None) -> Order:
        if not lines:
            raise BadRequestException("Validation error!", [
                {"loc": ["items"], "msg": "At least one item is required"}
            ])

        # Raises NotFound before anything is written
        items = await self.item_use_case.get_all_by_ids(lines)

        total = calculate_total(items)
        if total > MAX_ORDER_TOTAL:
            raise BadRequestException("Validation error!", [
                {"loc": ["items"], "msg": f"Order total must not exceed {MAX_ORDER_TOTAL}"}
            ])

        now = datetime.now(timezone.utc)
        order = Order(
            status=OrderStatus.CREATED,
            client_id=client_id,
            total=total,
            created_at=now,
            updated_at=now,
            items=items,
        )

        saved = await self.order_repository.save(order_to_model(order))
        created = order_to_entity(saved)
        logger.info(f"Order #{created.id} created: {len(items)} line(s), total {created.total}")

        self.preparation_service.notify(created.id, created.status)
        return created

    async def find_by_params(
        self,
        client_id: Optional[int] = None,
        status: Optional[OrderStatus] = None,
    ) -> list[Order]:
        orders = await self.order_repository.find_by_params(client_id=client_id, status=status)
        return orders_to_entities(orders)

    async def get_by_id(self, order_id: int) -> Order:
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise NotFoundException("Order not found!")
        return order_to_entity(order)

    async def update(self, current_order: Order, new_status: Union[OrderStatus, str]) -> Order:
        """
        Move an order to its next status.

        Only InPreparation and Finished may be requested, and only as the
        direct successor of the current status.
        """
        try:
            new_status = OrderStatus(new_status)
        except ValueError:
            new_status = None

        if new_status not in UPDATABLE_STATUSES:
            allowed = [s.value for s in UPDATABLE_STATUSES]
            raise BadRequestException("Validation error!", [
                {"loc": ["status"], "msg": f"Status must be one of: {allowed}"}
            ])

        if NEXT_STATUS.get(current_order.status) != new_status:
            raise ConflictException(
                f"Order cannot move from {current_order.status.value} to {new_status.value}!"
            )

        now = datetime.now(timezone.utc)
        moved = await self.order_repository.update_status(
            current_order.id, current_order.status, new_status, now
        )
        if not moved:
            # Another request changed the status since it was read
            raise ConflictException(
                f"Order cannot move from {current_order.status.value} to {new_status.value}!"
            )

        logger.info(
            f"Order #{current_order.id}: {current_order.status.value} -> {new_status.value}"
        )

        self.preparation_service.notify(current_order.id, new_status)
        return dataclasses.replace(current_order, status=new_status, updated_at=now)
