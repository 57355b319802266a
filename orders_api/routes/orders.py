"""
Order routes: /api/v1/orders
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from orders_api.controllers import OrderController
from orders_api.routes.dependencies import get_order_controller
from orders_api.schemas import ErrorResponse, MessageResponse, OrderResponse

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    status_code=201,
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Create Order",
)
async def create_order(
    body: Any = Body(None),
    controller: OrderController = Depends(get_order_controller),
) -> OrderResponse:
    """
    Create an order from a list of ``{itemId, quantity}`` lines.

    Every item id must exist; the total is computed from current item prices.
    """
    return await controller.create(body)


@router.get(
    "",
    response_model=list[OrderResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Find Orders",
)
async def find_orders(
    request: Request,
    controller: OrderController = Depends(get_order_controller),
) -> list[OrderResponse]:
    """Orders filtered by ``clientId`` and/or ``status``, oldest first."""
    return await controller.find_by_params(dict(request.query_params))


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get Order",
)
async def get_order(
    order_id: str,
    controller: OrderController = Depends(get_order_controller),
) -> OrderResponse:
    return await controller.get(order_id)


@router.patch(
    "/{order_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update Order Status",
)
async def update_order(
    order_id: str,
    body: Any = Body(None),
    controller: OrderController = Depends(get_order_controller),
) -> MessageResponse:
    """Advance the order to ``InPreparation`` or ``Finished``."""
    await controller.update(order_id, body)
    return MessageResponse(message="Order updated successfully!")
