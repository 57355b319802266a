"""
Preparation Service Factory

Returns Mock or HTTP preparation service based on ENV_MODE.
"""

import logging
from typing import Optional

from orders_api.core.config import Settings, get_settings
from orders_api.services.preparation.base import (
    BasePreparationService,
    PreparationResult,
)
from orders_api.services.preparation.http import HttpPreparationService
from orders_api.services.preparation.mock import MockPreparationService

logger = logging.getLogger(__name__)


def build_preparation_service(settings: Optional[Settings] = None) -> BasePreparationService:
    """Build the preparation service for the configured environment."""
    settings = settings or get_settings()

    if settings.is_development or not settings.preparation_ms_host:
        logger.info("Preparation Service: Using MockPreparationService")
        return MockPreparationService()

    logger.info(f"Preparation Service: Using HttpPreparationService ({settings.env_mode.value} mode)")
    return HttpPreparationService(
        base_url=settings.preparation_ms_host,
        timeout=settings.preparation_timeout_seconds,
    )


__all__ = [
    "build_preparation_service",
    "BasePreparationService",
    "PreparationResult",
    "MockPreparationService",
    "HttpPreparationService",
]
