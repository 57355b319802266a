"""
Customer Use Case
"""

import logging

from orders_api.core.exceptions import ConflictException, NotFoundException
from orders_api.entities import Customer
from orders_api.mappers import customer_to_entity, customer_to_model
from orders_api.repositories.base import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerUseCase:

    def __init__(self, customer_repository: CustomerRepository):
        self.customer_repository = customer_repository

    async def create(self, customer: Customer) -> Customer:
        # The unique constraint on email still guards concurrent registrations
        if await self.customer_repository.get_by_email(customer.email) is not None:
            raise ConflictException("E-mail already in use!")

        created = await self.customer_repository.create(customer_to_model(customer))
        logger.info(f"Customer #{created.id} registered")
        return customer_to_entity(created)

    async def get_by_id(self, customer_id: int) -> Customer:
        customer = await self.customer_repository.get_by_id(customer_id)
        if customer is None:
            raise NotFoundException("Customer not found!")
        return customer_to_entity(customer)

    async def remove(self, customer_id: int) -> None:
        await self.get_by_id(customer_id)
        await self.customer_repository.remove(customer_id)
        logger.info(f"Customer #{customer_id} removed")
