"""
Item Use Case

Business rules for the menu: unique names, existence checks, and resolving
the items of an order request.
"""

import logging
from typing import Any, Optional

from orders_api.core.exceptions import ConflictException, NotFoundException
from orders_api.entities import Item, ItemCategory, OrderLine
from orders_api.mappers import item_to_entity, item_to_model, items_to_entities
from orders_api.repositories.base import ItemRepository

logger = logging.getLogger(__name__)

# Columns a client may overwrite. Quantity is an order-line value, not an item attribute.
MUTABLE_FIELDS = ("name", "description", "category", "value", "image")


class ItemUseCase:

    def __init__(self, item_repository: ItemRepository):
        self.item_repository = item_repository

    async def create(self, item: Item) -> Item:
        if await self.item_repository.get_by_name(item.name) is not None:
            raise ConflictException("Item already exists!")

        created = await self.item_repository.save(item_to_model(item))
        logger.info(f"Item #{created.id} created: {created.name}")
        return item_to_entity(created)

    async def get_by_id(self, item_id: int) -> Item:
        item = await self.item_repository.get_by_id(item_id)
        if item is None:
            raise NotFoundException("Item not found!")
        return item_to_entity(item)

    async def find_by_params(
        self,
        category: Optional[ItemCategory] = None,
        name: Optional[str] = None,
    ) -> list[Item]:
        items = await self.item_repository.find_by_params(category=category, name=name)
        return items_to_entities(items)

    async def update(self, item_id: int, changes: dict[str, Any]) -> None:
        """Overwrite the supplied mutable fields; unknown keys are ignored."""
        item = await self.item_repository.get_by_id(item_id)
        if item is None:
            raise NotFoundException("Item not found!")

        values = {k: v for k, v in changes.items() if k in MUTABLE_FIELDS and v is not None}
        if not values:
            return

        new_name = values.get("name")
        if new_name is not None and new_name != item.name:
            if await self.item_repository.get_by_name(new_name) is not None:
                raise ConflictException("Item already exists!")

        await self.item_repository.update(item_id, values)
        logger.info(f"Item #{item_id} updated: {sorted(values)}")

    async def delete(self, item_id: int) -> None:
        item = await self.item_repository.get_by_id(item_id)
        if item is None:
            raise NotFoundException("Item not found!")

        if await self.item_repository.is_referenced(item_id):
            raise ConflictException("Item is referenced by existing orders!")

        await self.item_repository.delete_by_id(item_id)
        logger.info(f"Item #{item_id} deleted")

    async def get_all_by_ids(self, lines: list[OrderLine]) -> list[Item]:
        """
        Resolve every requested line to an item snapshot carrying the line
        quantity. Any unknown id aborts the whole lookup with NotFound.
        """
        items = []
        for line in lines:
            item = await self.get_by_id(line.item_id)
            item.quantity = line.quantity
            items.append(item)
        return items
