"""
Controllers Module

Validate raw input, call the use cases and present the result.
"""

from orders_api.controllers.customer import CustomerController
from orders_api.controllers.item import ItemController
from orders_api.controllers.order import OrderController

__all__ = ["CustomerController", "ItemController", "OrderController"]
