"""
Order Controller
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.controllers.validation import validate, validate_id
from orders_api.entities import OrderLine
from orders_api.presenters import OrderPresenter
from orders_api.repositories import SQLAlchemyItemRepository, SQLAlchemyOrderRepository
from orders_api.schemas import OrderCreate, OrderQuery, OrderResponse, OrderStatusUpdate
from orders_api.services.preparation.base import BasePreparationService
from orders_api.use_cases import ItemUseCase, OrderUseCase


class OrderController:

    def __init__(self, session: AsyncSession, preparation_service: BasePreparationService):
        self.order_repository = SQLAlchemyOrderRepository(session)
        self.item_repository = SQLAlchemyItemRepository(session)
        self.item_use_case = ItemUseCase(self.item_repository)
        self.order_use_case = OrderUseCase(
            self.order_repository,
            self.item_use_case,
            preparation_service,
        )

    async def create(self, body: Any) -> OrderResponse:
        data = validate(OrderCreate, body)

        lines = [OrderLine(item_id=line.item_id, quantity=line.quantity) for line in data.items]
        order = await self.order_use_case.create(lines, client_id=data.client_id)
        return OrderPresenter.entity_to_dto(order)

    async def find_by_params(self, query: Any) -> list[OrderResponse]:
        params = validate(OrderQuery, query)
        orders = await self.order_use_case.find_by_params(
            client_id=params.client_id,
            status=params.status,
        )
        return OrderPresenter.entities_to_dto(orders)

    async def get(self, identifier: Any) -> OrderResponse:
        order = await self.order_use_case.get_by_id(validate_id(identifier))
        return OrderPresenter.entity_to_dto(order)

    async def update(self, identifier: Any, body: Any) -> OrderResponse:
        data = validate(OrderStatusUpdate, body)
        order_id = validate_id(identifier)

        order = await self.order_use_case.get_by_id(order_id)
        updated = await self.order_use_case.update(order, data.status)
        return OrderPresenter.entity_to_dto(updated)
