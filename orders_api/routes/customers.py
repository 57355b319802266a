"""
Customer routes: /api/v1/customers
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from orders_api.controllers import CustomerController
from orders_api.routes.dependencies import get_customer_controller
from orders_api.schemas import CustomerCreatedResponse, ErrorResponse, MessageResponse

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post(
    "",
    status_code=201,
    response_model=CustomerCreatedResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Register Customer",
)
async def create_customer(
    body: Any = Body(None),
    controller: CustomerController = Depends(get_customer_controller),
) -> CustomerCreatedResponse:
    customer = await controller.create(body)
    return CustomerCreatedResponse(
        message="Customer successfully registered!",
        customer_id=customer.id,
    )


@router.delete(
    "/{customer_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Remove Customer",
)
async def delete_customer(
    customer_id: str,
    controller: CustomerController = Depends(get_customer_controller),
) -> MessageResponse:
    await controller.remove(customer_id)
    return MessageResponse(message="Customer successfully deleted!")
