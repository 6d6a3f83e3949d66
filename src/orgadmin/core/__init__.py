"""Core OrgAdmin utilities.

This module exports core utilities for use throughout the application.
"""

from orgadmin.core.config import Settings, get_settings
from orgadmin.core.exceptions import ApiError, ConflictError, NotFoundError
from orgadmin.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "ApiError",
    "ConflictError",
    "NotFoundError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
]
