"""Structured logging and request tracking."""

from dpi_admin.core.logging.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
    get_client_ip,
)


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_client_ip",
]
