"""
Retry pattern with configurable backoff.

Retries only the failures the caller classifies as transient; anything
else propagates on the first attempt. When attempts run out the last
error is re-raised unchanged so callers can still inspect it.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class BackoffStrategy(str, Enum):
    """Backoff strategy for retries."""

    CONSTANT = "constant"
    LINEAR = "linear"
    EXPONENTIAL = "exponential"


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 3
    """Maximum number of attempts (including initial attempt)"""

    initial_delay: float = 1.0
    """Delay before the first retry in seconds"""

    max_delay: float = 10.0
    """Maximum delay between retries in seconds"""

    backoff_strategy: BackoffStrategy = BackoffStrategy.CONSTANT
    """Backoff strategy: constant, linear, or exponential"""

    backoff_multiplier: float = 2.0
    """Multiplier for exponential/linear backoff"""

    jitter: bool = False
    """Add random jitter to the delay"""

    jitter_factor: float = 0.1
    """Jitter factor (0.0-1.0). 0.1 means +/-10% randomness"""

    retry_on: tuple = (Exception,)
    """Exception types eligible for retry"""

    retry_if: Optional[Callable[[Exception], bool]] = None
    """Further filter on eligible exceptions (True = retry)"""

    on_retry: Optional[Callable[[Exception, int], None]] = None
    """Called with the error and failed attempt number before each retry"""


class Retry:
    """
    Async retry handler.

    Example:
        retry = Retry(RetryConfig(
            max_attempts=3,
            retry_on=(UpstreamError,),
            retry_if=lambda e: getattr(e, "is_transient", True),
        ))
        data = await retry.execute(client.fetch, url)
    """

    def __init__(self, config: Optional[RetryConfig] = None):
        self.config = config or RetryConfig()

    def calculate_delay(self, attempt: int) -> float:
        """
        Calculate delay after a failed attempt.

        Args:
            attempt: Failed attempt number (0-indexed)

        Returns:
            Delay in seconds
        """
        if self.config.backoff_strategy == BackoffStrategy.EXPONENTIAL:
            delay = self.config.initial_delay * (
                self.config.backoff_multiplier**attempt
            )
        elif self.config.backoff_strategy == BackoffStrategy.LINEAR:
            delay = self.config.initial_delay + (
                self.config.backoff_multiplier * attempt
            )
        else:
            delay = self.config.initial_delay

        delay = min(delay, self.config.max_delay)

        if self.config.jitter:
            jitter_range = delay * self.config.jitter_factor
            delay = max(0.0, delay + random.uniform(-jitter_range, jitter_range))

        return delay

    def should_retry(self, exception: Exception) -> bool:
        """Check whether an exception is worth another attempt."""
        if not isinstance(exception, self.config.retry_on):
            return False
        if self.config.retry_if is None:
            return True
        return self.config.retry_if(exception)

    async def execute(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute an async function with retry logic.

        Args:
            func: Async function to execute
            *args: Positional arguments for func
            **kwargs: Keyword arguments for func

        Returns:
            Function result

        Raises:
            Exception: The first non-retryable error, or the last error
                once all attempts are exhausted
        """
        attempts = max(1, self.config.max_attempts)

        for attempt in range(attempts):
            try:
                result = await func(*args, **kwargs)
                if attempt > 0:
                    logger.info(
                        f"Operation succeeded on attempt {attempt + 1}/{attempts}"
                    )
                return result

            except Exception as e:
                if not self.should_retry(e):
                    logger.debug(f"Non-retryable {type(e).__name__}: {e}")
                    raise

                if attempt >= attempts - 1:
                    logger.warning(
                        f"All {attempts} attempts exhausted. "
                        f"Last error: {type(e).__name__}: {e}"
                    )
                    raise

                delay = self.calculate_delay(attempt)
                logger.warning(
                    f"{type(e).__name__}: {e}. "
                    f"Attempt {attempt + 1}/{attempts}. "
                    f"Retrying in {delay:.2f}s..."
                )
                if self.config.on_retry is not None:
                    self.config.on_retry(e, attempt)
                await asyncio.sleep(delay)

        raise RuntimeError("Unexpected retry exhaustion")


__all__ = [
    "BackoffStrategy",
    "Retry",
    "RetryConfig",
]
