"""
Mock Preparation Service

Simulates the preparation microservice for development.
No HTTP call is made - notifications are logged and kept in memory.
"""

import random
import logging

from orders_api.entities import OrderStatus
from orders_api.services.preparation.base import (
    BasePreparationService,
    PreparationResult,
)

logger = logging.getLogger(__name__)


class MockPreparationService(BasePreparationService):
    """Mock preparation service for development and tests."""

    def __init__(self, failure_rate: float = 0.0):
        super().__init__()
        self.failure_rate = failure_rate
        self.sent: list[tuple[int, OrderStatus]] = []
        logger.info(f"MockPreparationService initialized (failure_rate={failure_rate:.0%})")

    @property
    def provider_name(self) -> str:
        return "mock"

    def _should_fail(self) -> bool:
        return random.random() < self.failure_rate

    async def send_order_status(
        self,
        order_id: int,
        status: OrderStatus,
    ) -> PreparationResult:
        """Record the notification instead of sending it."""
        if self._should_fail():
            logger.warning(f"Mock preparation notification failed (simulated) for order #{order_id}")
            return PreparationResult(
                success=False,
                error_message="Simulated preparation service failure",
                provider="mock"
            )

        self.sent.append((order_id, status))
        logger.debug(f"Mock preparation notification: order #{order_id} -> {status.value}")

        return PreparationResult(success=True, status_code=201, provider="mock")

    async def health_check(self) -> bool:
        """Mock always returns healthy."""
        return True
