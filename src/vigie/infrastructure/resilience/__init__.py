"""
Resilience patterns for upstream calls.
"""

from vigie.infrastructure.resilience.retry import (
    BackoffStrategy,
    Retry,
    RetryConfig,
)

__all__ = [
    "BackoffStrategy",
    "Retry",
    "RetryConfig",
]
