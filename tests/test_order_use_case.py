"""
Unit Tests for OrderUseCase
Covers totals, the status lifecycle and preparation notifications.
"""

import dataclasses
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from orders_api.core.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
)
from orders_api.entities import Item, ItemCategory, Order, OrderLine, OrderStatus
from orders_api.repositories.base import ItemRepository, OrderRepository
from orders_api.services.preparation import MockPreparationService
from orders_api.use_cases import ItemUseCase, OrderUseCase, calculate_total
from tests.factories import make_item_model, make_order_model


@pytest.fixture
def item_models():
    return {
        1: make_item_model(1, "X Bacon", "19.00"),
        2: make_item_model(2, "Milkshake", "25.00", ItemCategory.DRINK),
    }


@pytest.fixture
def item_repository(item_models):
    repository = AsyncMock(spec=ItemRepository)
    repository.get_by_id.side_effect = lambda item_id: item_models.get(item_id)
    return repository


@pytest.fixture
def order_repository(item_models):
    repository = AsyncMock(spec=OrderRepository)

    async def fake_save(model):
        # Mirror the reload: lines come back with their items attached
        model.id = 1
        for line in model.lines:
            line.item = item_models[line.item_id]
        return model

    repository.save.side_effect = fake_save
    repository.update_status.return_value = True
    return repository


@pytest.fixture
def use_case(order_repository, item_repository, preparation_service):
    return OrderUseCase(order_repository, ItemUseCase(item_repository), preparation_service)


def existing_order(status: OrderStatus = OrderStatus.CREATED) -> Order:
    created_at = datetime(2024, 1, 15, 18, 30, tzinfo=timezone.utc)
    return Order(
        id=5,
        status=status,
        total=Decimal("19.00"),
        created_at=created_at,
        updated_at=created_at,
        items=[Item("X Bacon", "bacon", ItemCategory.SNACK, Decimal("19.00"), quantity=1, id=1)],
    )


def test_calculate_total():
    items = [
        Item("A", "a", ItemCategory.SNACK, Decimal("19.00"), quantity=2),
        Item("B", "b", ItemCategory.DRINK, Decimal("25.00"), quantity=1),
    ]

    assert calculate_total(items) == Decimal("63.00")
    assert calculate_total([]) == Decimal("0")


class TestCreate:

    async def test_should_create_order(self, use_case, order_repository):
        order = await use_case.create([OrderLine(1, 2), OrderLine(2, 1)])

        order_repository.save.assert_awaited_once()
        assert order.id == 1
        assert order.status is OrderStatus.CREATED
        assert order.client_id is None
        assert order.total == Decimal("63.00")
        assert [(i.id, i.quantity) for i in order.items] == [(1, 2), (2, 1)]
        assert order.created_at == order.updated_at

    async def test_should_keep_client_id(self, use_case):
        order = await use_case.create([OrderLine(1, 1)], client_id=9)

        assert order.client_id == 9

    async def test_should_notify_preparation_service(self, use_case, preparation_service):
        await use_case.create([OrderLine(1, 1)])
        await preparation_service.drain()

        assert preparation_service.sent == [(1, OrderStatus.CREATED)]

    async def test_unknown_item_writes_nothing(self, use_case, order_repository, preparation_service):
        with pytest.raises(NotFoundException, match="Item not found!"):
            await use_case.create([OrderLine(1, 1), OrderLine(99, 1)])

        order_repository.save.assert_not_awaited()
        assert preparation_service.pending == 0

    async def test_empty_order_is_rejected(self, use_case, order_repository):
        with pytest.raises(BadRequestException):
            await use_case.create([])

        order_repository.save.assert_not_awaited()

    async def test_total_beyond_column_range_is_rejected(self, use_case, order_repository, item_models):
        item_models[3] = make_item_model(3, "Caviar", "99999999.99")

        with pytest.raises(BadRequestException, match="Validation error!"):
            await use_case.create([OrderLine(3, 2)])

        order_repository.save.assert_not_awaited()


class TestRead:

    async def test_should_get_by_id(self, use_case, order_repository):
        order_repository.get_by_id.return_value = make_order_model(
            3, lines=[(make_item_model(), 2)]
        )

        order = await use_case.get_by_id(3)

        assert order.id == 3
        assert order.items[0].quantity == 2

    async def test_should_fail_to_get_by_id(self, use_case, order_repository):
        order_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundException, match="Order not found!"):
            await use_case.get_by_id(3)

    async def test_should_find_by_params(self, use_case, order_repository):
        order_repository.find_by_params.return_value = [make_order_model(1), make_order_model(2)]

        orders = await use_case.find_by_params(client_id=4, status=OrderStatus.CREATED)

        order_repository.find_by_params.assert_awaited_once_with(
            client_id=4, status=OrderStatus.CREATED
        )
        assert [o.id for o in orders] == [1, 2]


class TestUpdate:

    @pytest.mark.parametrize(
        "current, requested",
        [
            (OrderStatus.CREATED, OrderStatus.IN_PREPARATION),
            (OrderStatus.IN_PREPARATION, OrderStatus.FINISHED),
        ],
    )
    async def test_should_advance_status(
        self, use_case, order_repository, preparation_service, current, requested
    ):
        order = existing_order(current)

        updated = await use_case.update(order, requested.value)
        await preparation_service.drain()

        assert updated.status is requested
        assert updated.updated_at > order.updated_at
        assert updated.created_at == order.created_at
        assert updated == dataclasses.replace(order, status=requested, updated_at=updated.updated_at)
        order_repository.update_status.assert_awaited_once_with(5, current, requested, updated.updated_at)
        assert preparation_service.sent == [(5, requested)]

    @pytest.mark.parametrize("requested", ["Created", "Cancelled", "", None])
    async def test_should_reject_unsupported_status(self, use_case, order_repository, requested):
        with pytest.raises(BadRequestException, match="Validation error!"):
            await use_case.update(existing_order(), requested)

        order_repository.update_status.assert_not_awaited()

    @pytest.mark.parametrize(
        "current, requested",
        [
            (OrderStatus.CREATED, OrderStatus.FINISHED),
            (OrderStatus.IN_PREPARATION, OrderStatus.IN_PREPARATION),
            (OrderStatus.FINISHED, OrderStatus.IN_PREPARATION),
            (OrderStatus.FINISHED, OrderStatus.FINISHED),
        ],
    )
    async def test_should_reject_out_of_sequence_transition(
        self, use_case, order_repository, preparation_service, current, requested
    ):
        with pytest.raises(ConflictException):
            await use_case.update(existing_order(current), requested)

        order_repository.update_status.assert_not_awaited()
        assert preparation_service.pending == 0


async def test_failing_preparation_service_does_not_break_create(order_repository, item_repository):
    preparation_service = MockPreparationService(failure_rate=1.0)
    use_case = OrderUseCase(order_repository, ItemUseCase(item_repository), preparation_service)

    order = await use_case.create([OrderLine(1, 1)])
    await preparation_service.drain()

    assert order.id == 1
    assert preparation_service.sent == []


async def test_concurrent_status_change_is_a_conflict(use_case, order_repository, preparation_service):
    order_repository.update_status.return_value = False

    with pytest.raises(ConflictException):
        await use_case.update(existing_order(OrderStatus.CREATED), OrderStatus.IN_PREPARATION)

    assert preparation_service.pending == 0
    assert preparation_service.sent == []
