"""
Presenters

Entity -> response DTO formatting.
"""

import base64

from orders_api.entities import Customer, Item, Order
from orders_api.schemas import CustomerResponse, ItemResponse, OrderResponse


class CustomerPresenter:

    @staticmethod
    def entity_to_dto(customer: Customer) -> CustomerResponse:
        return CustomerResponse(
            id=customer.id,
            cpf=customer.cpf,
            name=customer.name,
            email=customer.email,
            address=customer.address,
            phone=customer.phone,
        )


class ItemPresenter:

    @staticmethod
    def entity_to_dto(item: Item) -> ItemResponse:
        return ItemResponse(
            id=item.id,
            name=item.name,
            description=item.description,
            category=item.category,
            value=float(item.value),
            quantity=item.quantity,
            image=base64.b64encode(item.image).decode("ascii"),
        )

    @staticmethod
    def entities_to_dto(items: list[Item]) -> list[ItemResponse]:
        return [ItemPresenter.entity_to_dto(i) for i in items]


class OrderPresenter:

    @staticmethod
    def entity_to_dto(order: Order) -> OrderResponse:
        return OrderResponse(
            id=order.id,
            status=order.status,
            client_id=order.client_id,
            total=float(order.total),
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=ItemPresenter.entities_to_dto(order.items),
        )

    @staticmethod
    def entities_to_dto(orders: list[Order]) -> list[OrderResponse]:
        return [OrderPresenter.entity_to_dto(o) for o in orders]
