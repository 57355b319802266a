"""
Item routes: /api/v1/items
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from orders_api.controllers import ItemController
from orders_api.routes.dependencies import get_item_controller
from orders_api.schemas import (
    ErrorResponse,
    ItemCreatedResponse,
    ItemResponse,
    MessageResponse,
)

router = APIRouter(prefix="/items", tags=["Items"])


@router.post(
    "",
    status_code=201,
    response_model=ItemCreatedResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create Item",
)
async def create_item(
    body: Any = Body(None),
    controller: ItemController = Depends(get_item_controller),
) -> ItemCreatedResponse:
    item_id = await controller.create(body)
    return ItemCreatedResponse(message="Item successfully registered!", item_id=item_id)


@router.get(
    "",
    response_model=list[ItemResponse],
    responses={400: {"model": ErrorResponse}},
    summary="Find Items",
)
async def find_items(
    request: Request,
    controller: ItemController = Depends(get_item_controller),
) -> list[ItemResponse]:
    return await controller.find_by_params(dict(request.query_params))


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get Item",
)
async def get_item(
    item_id: str,
    controller: ItemController = Depends(get_item_controller),
) -> ItemResponse:
    return await controller.get_by_id(item_id)


@router.patch(
    "/{item_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update Item",
)
async def update_item(
    item_id: str,
    body: Any = Body(None),
    controller: ItemController = Depends(get_item_controller),
) -> MessageResponse:
    await controller.update(item_id, body)
    return MessageResponse(message="Item updated successfully!")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Delete Item",
)
async def delete_item(
    item_id: str,
    controller: ItemController = Depends(get_item_controller),
) -> MessageResponse:
    await controller.delete(item_id)
    return MessageResponse(message="Item deleted successfully!")
