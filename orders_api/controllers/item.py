"""
Item Controller
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.controllers.validation import validate, validate_id
from orders_api.entities import Item
from orders_api.presenters import ItemPresenter
from orders_api.repositories import SQLAlchemyItemRepository
from orders_api.schemas import ItemCreate, ItemQuery, ItemResponse, ItemUpdate
from orders_api.use_cases import ItemUseCase


class ItemController:

    def __init__(self, session: AsyncSession):
        self.item_repository = SQLAlchemyItemRepository(session)
        self.item_use_case = ItemUseCase(self.item_repository)

    async def create(self, body: Any) -> int:
        """Create an item and return its id."""
        data = validate(ItemCreate, body)

        item = await self.item_use_case.create(Item(
            name=data.name,
            description=data.description,
            category=data.category,
            value=data.value,
            image=data.image_bytes,
        ))
        return item.id

    async def get_by_id(self, identifier: Any) -> ItemResponse:
        item = await self.item_use_case.get_by_id(validate_id(identifier))
        return ItemPresenter.entity_to_dto(item)

    async def find_by_params(self, query: Any) -> list[ItemResponse]:
        params = validate(ItemQuery, query)
        items = await self.item_use_case.find_by_params(category=params.category)
        return ItemPresenter.entities_to_dto(items)

    async def update(self, identifier: Any, body: Any) -> None:
        item_id = validate_id(identifier)
        data = validate(ItemUpdate, body)
        await self.item_use_case.update(item_id, data.changes())

    async def delete(self, identifier: Any) -> None:
        await self.item_use_case.delete(validate_id(identifier))
