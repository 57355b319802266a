"""
Preparation Service Abstract Base Class

Defines the interface for notifying the kitchen preparation microservice
about order status changes. Supports both Mock (development) and Real
(staging/production) implementations.

Notifications are fire-and-forget: ``notify`` schedules the call on the
running event loop and returns immediately. A failed or slow preparation
service is logged and never reaches the caller.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from orders_api.entities import OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class PreparationResult:
    """Result from notifying the preparation service."""
    success: bool
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    provider: str = "unknown"


class BasePreparationService(ABC):
    """Abstract base class for preparation services."""

    def __init__(self):
        self._pending: set[asyncio.Task] = set()

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""
        pass

    @abstractmethod
    async def send_order_status(
        self,
        order_id: int,
        status: OrderStatus,
    ) -> PreparationResult:
        """Deliver one status notification and report the outcome."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check service connectivity."""
        pass

    def notify(self, order_id: int, status: OrderStatus) -> None:
        """Schedule a status notification without waiting for it."""
        task = asyncio.get_running_loop().create_task(
            self._send_safely(order_id, status),
            name=f"preparation-notify-{order_id}",
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _send_safely(self, order_id: int, status: OrderStatus) -> None:
        try:
            result = await self.send_order_status(order_id, status)
        except Exception:
            logger.exception(f"Preparation notification for order #{order_id} crashed")
            return

        if result.success:
            logger.info(
                f"Preparation service notified: order #{order_id} -> {status.value} "
                f"({result.provider})"
            )
        else:
            logger.warning(
                f"Preparation notification failed for order #{order_id}: "
                f"{result.error_message}"
            )

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled notification to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
