"""
Integration Tests for the SQLAlchemy Repositories
Each test runs against a fresh in-memory SQLite database.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from orders_api.core.exceptions import ConflictException
from orders_api.entities import ItemCategory, OrderStatus
from orders_api.mappers import order_to_entity
from orders_api.models import CustomerModel, OrderItemModel, OrderModel
from orders_api.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyItemRepository,
    SQLAlchemyOrderRepository,
)
from tests.factories import make_item_model


@pytest.fixture
def customers(session):
    return SQLAlchemyCustomerRepository(session)


@pytest.fixture
def items(session):
    return SQLAlchemyItemRepository(session)


@pytest.fixture
def orders(session):
    return SQLAlchemyOrderRepository(session)


def new_order(lines, client_id=None, status=OrderStatus.CREATED, created_at=None) -> OrderModel:
    created_at = created_at or datetime.now(timezone.utc)
    return OrderModel(
        status=status,
        client_id=client_id,
        total=Decimal("0"),
        created_at=created_at,
        updated_at=created_at,
        lines=[
            OrderItemModel(position=i, item_id=item_id, quantity=qty)
            for i, (item_id, qty) in enumerate(lines)
        ],
    )


class TestCustomerRepository:

    async def test_create_and_lookup(self, customers):
        created = await customers.create(CustomerModel(
            cpf="123", name="John", email="john@example.com", address="Rua A", phone="119"
        ))

        assert created.id is not None
        assert (await customers.get_by_email("john@example.com")).id == created.id
        assert (await customers.get_by_id(created.id)).name == "John"
        assert await customers.get_by_email("other@example.com") is None

    async def test_duplicate_email_is_a_conflict(self, customers):
        await customers.create(CustomerModel(
            cpf="1", name="A", email="same@example.com", address="x", phone="1"
        ))

        with pytest.raises(ConflictException, match="E-mail already in use!"):
            await customers.create(CustomerModel(
                cpf="2", name="B", email="same@example.com", address="y", phone="2"
            ))

    async def test_remove(self, customers):
        created = await customers.create(CustomerModel(
            cpf="1", name="A", email="a@example.com", address="x", phone="1"
        ))

        await customers.remove(created.id)

        assert await customers.get_by_id(created.id) is None


class TestItemRepository:

    async def test_save_assigns_id(self, items):
        saved = await items.save(make_item_model(item_id=None))

        assert saved.id is not None
        assert (await items.get_by_name("X Bacon")).id == saved.id

    async def test_duplicate_name_is_a_conflict(self, items):
        await items.save(make_item_model(item_id=None))

        with pytest.raises(ConflictException, match="Item already exists!"):
            await items.save(make_item_model(item_id=None))

    async def test_find_by_category(self, items):
        await items.save(make_item_model(None, "X Bacon"))
        await items.save(make_item_model(None, "Coke", "6.50", ItemCategory.DRINK))
        await items.save(make_item_model(None, "X Salad"))

        snacks = await items.find_by_params(category=ItemCategory.SNACK)
        everything = await items.find_by_params()

        assert [i.name for i in snacks] == ["X Bacon", "X Salad"]
        assert len(everything) == 3
        assert await items.find_by_params(category=ItemCategory.DESSERT) == []

    async def test_update_overwrites_given_columns(self, items, session):
        saved = await items.save(make_item_model(item_id=None))

        item_id = saved.id
        await items.update(item_id, {"value": Decimal("21.50"), "description": "New"})
        session.expire_all()
        reloaded = await items.get_by_id(item_id)

        assert reloaded.value == Decimal("21.50")
        assert reloaded.description == "New"
        assert reloaded.name == "X Bacon"

    async def test_delete_and_reference_check(self, items, orders):
        used = await items.save(make_item_model(None, "Used"))
        unused = await items.save(make_item_model(None, "Unused"))
        await orders.save(new_order([(used.id, 1)]))

        assert await items.is_referenced(used.id) is True
        assert await items.is_referenced(unused.id) is False

        await items.delete_by_id(unused.id)
        assert await items.get_by_id(unused.id) is None


class TestOrderRepository:

    async def test_save_reloads_lines_with_items(self, items, orders):
        burger = await items.save(make_item_model(None, "X Bacon", "19.00"))
        shake = await items.save(make_item_model(None, "Milkshake", "25.00", ItemCategory.DRINK))

        saved = await orders.save(new_order([(burger.id, 2), (shake.id, 1)], client_id=3))

        assert saved.id is not None
        assert saved.client_id == 3
        assert [(line.item.name, line.quantity) for line in saved.lines] == [
            ("X Bacon", 2),
            ("Milkshake", 1),
        ]

    async def test_same_item_on_two_lines(self, items, orders):
        burger = await items.save(make_item_model(None))

        saved = await orders.save(new_order([(burger.id, 1), (burger.id, 3)]))

        assert [line.quantity for line in saved.lines] == [1, 3]

    async def test_find_filters_and_orders_oldest_first(self, items, orders):
        burger = await items.save(make_item_model(None))
        base = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

        late = await orders.save(new_order([(burger.id, 1)], client_id=1, created_at=base + timedelta(hours=2)))
        early = await orders.save(new_order([(burger.id, 1)], client_id=1, created_at=base))
        other = await orders.save(new_order(
            [(burger.id, 1)], client_id=2, status=OrderStatus.FINISHED, created_at=base + timedelta(hours=1)
        ))

        assert [o.id for o in await orders.find_by_params()] == [early.id, other.id, late.id]
        assert [o.id for o in await orders.find_by_params(client_id=1)] == [early.id, late.id]
        assert [o.id for o in await orders.find_by_params(status=OrderStatus.FINISHED)] == [other.id]
        assert await orders.find_by_params(client_id=1, status=OrderStatus.FINISHED) == []

    async def test_update_status(self, items, orders, session):
        burger = await items.save(make_item_model(None))
        saved = await orders.save(new_order([(burger.id, 1)]))
        later = datetime(2030, 1, 1, tzinfo=timezone.utc)

        order_id = saved.id
        moved = await orders.update_status(order_id, OrderStatus.CREATED, OrderStatus.IN_PREPARATION, later)
        session.expire_all()
        reloaded = await orders.get_by_id(order_id)

        assert reloaded.status is OrderStatus.IN_PREPARATION
        assert moved is True
        assert reloaded.updated_at.replace(tzinfo=None) == later.replace(tzinfo=None)
        assert len(reloaded.lines) == 1

    async def test_update_status_from_stale_status_changes_nothing(self, items, orders, session):
        burger = await items.save(make_item_model(None))
        saved = await orders.save(new_order([(burger.id, 1)], status=OrderStatus.IN_PREPARATION))

        order_id = saved.id
        moved = await orders.update_status(
            order_id, OrderStatus.CREATED, OrderStatus.IN_PREPARATION, datetime.now(timezone.utc)
        )
        session.expire_all()
        reloaded = await orders.get_by_id(order_id)

        assert moved is False
        assert reloaded.status is OrderStatus.IN_PREPARATION

    async def test_reloaded_timestamps_are_utc(self, items, orders):
        burger = await items.save(make_item_model(None))
        created_at = datetime(2024, 1, 15, 18, 30, tzinfo=timezone.utc)
        saved = await orders.save(new_order([(burger.id, 1)], created_at=created_at))

        order = order_to_entity(saved)

        assert order.created_at == created_at
        assert order.updated_at.tzinfo is not None

    async def test_get_missing_order(self, orders):
        assert await orders.get_by_id(404) is None
