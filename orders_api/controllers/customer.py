"""
Customer Controller
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.controllers.validation import validate, validate_id
from orders_api.entities import Customer
from orders_api.presenters import CustomerPresenter
from orders_api.repositories import SQLAlchemyCustomerRepository
from orders_api.schemas import CustomerCreate, CustomerResponse
from orders_api.use_cases import CustomerUseCase


class CustomerController:

    def __init__(self, session: AsyncSession):
        self.customer_repository = SQLAlchemyCustomerRepository(session)
        self.customer_use_case = CustomerUseCase(self.customer_repository)

    async def create(self, body: Any) -> CustomerResponse:
        data = validate(CustomerCreate, body)

        customer = await self.customer_use_case.create(Customer(
            cpf=data.cpf,
            name=data.name,
            email=data.email,
            address=data.address,
            phone=data.phone,
        ))
        return CustomerPresenter.entity_to_dto(customer)

    async def remove(self, identifier: Any) -> None:
        await self.customer_use_case.remove(validate_id(identifier))
