"""
Use Cases Module

Business rules for each aggregate, orchestrating repositories and the
preparation service.
"""

from orders_api.use_cases.customer import CustomerUseCase
from orders_api.use_cases.item import ItemUseCase
from orders_api.use_cases.order import OrderUseCase, calculate_total

__all__ = ["CustomerUseCase", "ItemUseCase", "OrderUseCase", "calculate_total"]
