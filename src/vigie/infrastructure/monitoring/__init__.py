"""
Monitoring and observability infrastructure.
"""

from vigie.infrastructure.monitoring import metrics
from vigie.infrastructure.monitoring.logger import (
    get_logger,
    get_refresh_generation,
    log_performance,
    set_refresh_generation,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_refresh_generation",
    "set_refresh_generation",
    "setup_logging",
    "log_performance",
]
