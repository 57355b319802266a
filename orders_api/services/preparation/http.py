"""
HTTP Preparation Service

Production implementation: POSTs status changes to the preparation
microservice at ``{PREPARATION_MS_HOST}/ms-preparation/api/v1/orders``.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from orders_api.entities import OrderStatus
from orders_api.services.preparation.base import (
    BasePreparationService,
    PreparationResult,
)

logger = logging.getLogger(__name__)

ORDERS_PATH = "/ms-preparation/api/v1/orders"


class HttpPreparationService(BasePreparationService):
    """Preparation service client using httpx."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )
        logger.info(f"HttpPreparationService initialized ({self.base_url})")

    @property
    def provider_name(self) -> str:
        return "http"

    @staticmethod
    def build_payload(order_id: int, status: OrderStatus) -> dict:
        return {
            "idOrder": order_id,
            "status": status.value,
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }

    async def send_order_status(
        self,
        order_id: int,
        status: OrderStatus,
    ) -> PreparationResult:
        """POST the status change; HTTP errors become a failed result."""
        try:
            response = await self.client.post(
                ORDERS_PATH,
                json=self.build_payload(order_id, status),
            )
        except httpx.HTTPError as e:
            logger.error(f"Preparation service unreachable: {e}")
            return PreparationResult(
                success=False,
                error_message=str(e),
                provider="http"
            )

        if response.is_success:
            return PreparationResult(
                success=True,
                status_code=response.status_code,
                provider="http"
            )

        return PreparationResult(
            success=False,
            status_code=response.status_code,
            error_message=f"Status Code - {response.status_code}",
            provider="http"
        )

    async def health_check(self) -> bool:
        """The preparation service is reachable at all."""
        try:
            await self.client.get("/")
            return True
        except httpx.HTTPError:
            return False

    async def aclose(self) -> None:
        await super().aclose()
        await self.client.aclose()
