"""
HTTP routes, mounted under /api/v1.
"""

from fastapi import APIRouter

from orders_api.routes import customers, health, items, orders

API_PREFIX = "/api/v1"

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(customers.router)
api_router.include_router(items.router)
api_router.include_router(orders.router)
api_router.include_router(health.router)

__all__ = ["api_router", "API_PREFIX"]
