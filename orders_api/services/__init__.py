"""
                        Services Module

Outbound collaborators, each with a Mock (development) and a Real
(staging/production) implementation.

Services:
    - preparation: kitchen preparation microservice notifications
"""

from orders_api.services.preparation import build_preparation_service

__all__ = ["build_preparation_service"]
