"""
Core module initialization.
Exports configuration, logging utilities and application errors.
"""

from app.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from app.core.exceptions import ApplicationError, ValidationError, NotFoundError

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "ApplicationError",
    "ValidationError",
    "NotFoundError",
]
