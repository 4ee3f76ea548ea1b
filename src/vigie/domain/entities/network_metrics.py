"""
NetworkMetrics entity - per-network normalized view of USDC.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vigie.domain.value_objects.network import Network

# USDC is assumed to hold its peg when the API reports no price.
DEFAULT_USDC_PRICE = 1.0


@dataclass(frozen=True)
class NetworkMetrics:
    """
    Normalized USDC metrics for one network.

    Business rules:
    - total_supply is in human units (raw amount / 10**decimals)
    - price falls back to 1.0 when the API has no price
    - holder_count and daily_volume are not exposed by the API and stay 0
    """

    network: Network
    total_supply: float = 0.0
    holder_count: int = 0
    price: float = DEFAULT_USDC_PRICE
    market_cap: float = 0.0
    daily_volume: float = 0.0

    @classmethod
    def placeholder(cls, network: Network) -> "NetworkMetrics":
        """Zeroed record used when a network cannot be measured."""
        return cls(network=network)

    @property
    def has_supply(self) -> bool:
        """True when a nonzero supply was measured."""
        return self.total_supply > 0


class FetchFailureReason(str, Enum):
    """Why a per-network fetch produced no metrics."""

    UPSTREAM_ERROR = "upstream_error"
    NO_MATCHING_TOKEN = "no_matching_token"
    INVALID_PAYLOAD = "invalid_payload"


@dataclass(frozen=True)
class MetricsResult:
    """
    Tagged result of measuring one network.

    Exactly one of metrics / reason is set.
    """

    network: Network
    metrics: Optional[NetworkMetrics] = None
    reason: Optional[FetchFailureReason] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, metrics: NetworkMetrics) -> "MetricsResult":
        return cls(network=metrics.network, metrics=metrics)

    @classmethod
    def failure(
        cls,
        network: Network,
        reason: FetchFailureReason,
        error: Optional[Exception] = None,
    ) -> "MetricsResult":
        return cls(network=network, reason=reason, error=error)

    @property
    def ok(self) -> bool:
        return self.metrics is not None

    def unwrap_or_placeholder(self) -> NetworkMetrics:
        """Metrics when measured, else the zeroed record."""
        return self.metrics or NetworkMetrics.placeholder(self.network)
