"""
Unit Tests for Model <-> Entity Mapping
"""

from datetime import datetime, timezone
from decimal import Decimal

from orders_api.entities import Customer, Item, ItemCategory, Order, OrderStatus
from orders_api.mappers import (
    customer_to_entity,
    customer_to_model,
    customers_to_entities,
    item_to_entity,
    item_to_model,
    items_to_entities,
    order_to_entity,
    order_to_model,
    orders_to_entities,
)
from tests.factories import IMAGE_BYTES, make_item_model, make_order_model


class TestCustomerMapping:

    def test_round_trip_is_lossless(self):
        customer = Customer(
            id=7,
            cpf="123.456.789-00",
            name="John Doe",
            email="john@example.com",
            address="Rua A, 123",
            phone="11999999999",
        )

        assert customer_to_entity(customer_to_model(customer)) == customer

    def test_many(self):
        models = [customer_to_model(Customer("1", "A", "a@x.com", "addr", "1", id=1)),
                  customer_to_model(Customer("2", "B", "b@x.com", "addr", "2", id=2))]

        assert [c.id for c in customers_to_entities(models)] == [1, 2]
        assert customers_to_entities([]) == []


class TestItemMapping:

    def test_round_trip_is_lossless_except_quantity(self):
        item = Item(
            id=3,
            name="Coke",
            description="Can 350ml",
            category=ItemCategory.DRINK,
            value=Decimal("6.50"),
            image=IMAGE_BYTES,
            quantity=4,
        )

        mapped = item_to_entity(item_to_model(item))

        assert mapped.quantity == 0
        mapped.quantity = item.quantity
        assert mapped == item

    def test_plain_item_has_zero_quantity(self):
        entity = item_to_entity(make_item_model())

        assert entity.quantity == 0
        assert entity.value == Decimal("19.00")
        assert entity.category is ItemCategory.SNACK
        assert entity.image == IMAGE_BYTES

    def test_many(self):
        models = [make_item_model(1, "A"), make_item_model(2, "B")]

        assert [i.name for i in items_to_entities(models)] == ["A", "B"]


class TestOrderMapping:

    def test_lines_carry_their_quantity(self):
        burger = make_item_model(1, "X Bacon", "19.00")
        juice = make_item_model(2, "Juice", "25.00", ItemCategory.DRINK)
        model = make_order_model(lines=[(burger, 2), (juice, 1)], client_id=5)

        order = order_to_entity(model)

        assert order.id == 1
        assert order.client_id == 5
        assert order.status is OrderStatus.CREATED
        assert order.total == Decimal("63.00")
        assert [(i.id, i.quantity) for i in order.items] == [(1, 2), (2, 1)]

    def test_order_to_model_builds_positioned_lines(self):
        now = datetime.now(timezone.utc)
        order = Order(
            status=OrderStatus.CREATED,
            total=Decimal("44.00"),
            created_at=now,
            updated_at=now,
            items=[
                Item("A", "a", ItemCategory.SNACK, Decimal("19.00"), quantity=1, id=10),
                Item("B", "b", ItemCategory.DRINK, Decimal("25.00"), quantity=1, id=20),
            ],
        )

        model = order_to_model(order)

        assert model.id is None
        assert model.client_id is None
        assert [(line.position, line.item_id, line.quantity) for line in model.lines] == [
            (0, 10, 1),
            (1, 20, 1),
        ]

    def test_naive_timestamps_are_read_as_utc(self):
        naive = datetime(2024, 1, 15, 18, 30)

        order = order_to_entity(make_order_model(created_at=naive))

        assert order.created_at == naive.replace(tzinfo=timezone.utc)
        assert order.updated_at.tzinfo is timezone.utc

    def test_many(self):
        models = [make_order_model(1), make_order_model(2, status=OrderStatus.FINISHED)]

        orders = orders_to_entities(models)

        assert [o.status for o in orders] == [OrderStatus.CREATED, OrderStatus.FINISHED]
        assert orders[0].items == []
