"""
Core module initialization.
Exports configuration, logging utilities and application exceptions.
"""

from orders_api.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from orders_api.core.exceptions import (
    AppException,
    BadRequestException,
    ConflictException,
    NotFoundException,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "AppException",
    "BadRequestException",
    "ConflictException",
    "NotFoundException",
]
