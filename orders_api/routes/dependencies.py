"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.controllers import CustomerController, ItemController, OrderController
from orders_api.database import get_db
from orders_api.services.preparation.base import BasePreparationService


def get_preparation_service(request: Request) -> BasePreparationService:
    return request.app.state.preparation_service


def get_customer_controller(db: AsyncSession = Depends(get_db)) -> CustomerController:
    return CustomerController(db)


def get_item_controller(db: AsyncSession = Depends(get_db)) -> ItemController:
    return ItemController(db)


def get_order_controller(
    db: AsyncSession = Depends(get_db),
    preparation_service: BasePreparationService = Depends(get_preparation_service),
) -> OrderController:
    return OrderController(db, preparation_service)
