"""API middleware."""

from vigie.presentation.api.middleware.error_handler import vigie_exception_handler
from vigie.presentation.api.middleware.metrics_middleware import MetricsMiddleware

__all__ = ["MetricsMiddleware", "vigie_exception_handler"]
