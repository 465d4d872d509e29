"""Core infrastructure: config, logging, middleware, exceptions."""

from sales_analytics.core.config import Settings, get_settings
from sales_analytics.core.exceptions import SalesAnalyticsError
from sales_analytics.core.logging import configure_logging, get_logger, request_id_ctx

__all__ = [
    "SalesAnalyticsError",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "request_id_ctx",
]
