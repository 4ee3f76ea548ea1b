"""
Get All Networks Metrics use case.

Measures every supported network concurrently and applies the display
filter.
"""

import asyncio
from typing import List, Optional, Sequence

from vigie.application.use_cases.get_network_metrics import GetNetworkMetrics
from vigie.domain.entities.network_metrics import MetricsResult, NetworkMetrics
from vigie.domain.value_objects.network import Network


def select_display_metrics(results: Sequence[MetricsResult]) -> List[NetworkMetrics]:
    """
    Pick the metrics to display.

    Failed networks are dropped. When at least one network has a nonzero
    supply only nonzero-supply networks are kept, otherwise every success
    is kept (zeros included).
    """
    successes = [r.metrics for r in results if r.ok]
    with_supply = [m for m in successes if m.has_supply]
    return with_supply if with_supply else successes


class GetAllNetworksMetrics:
    """Get USDC metrics for all supported networks."""

    def __init__(
        self,
        get_network_metrics: GetNetworkMetrics,
        networks: Optional[Sequence[Network]] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            get_network_metrics: Per-network use case
            networks: Networks to measure (defaults to all, in table order)
        """
        self.get_network_metrics = get_network_metrics
        self.networks = list(networks) if networks else list(Network)

    async def fetch_all(self) -> List[MetricsResult]:
        """Measure every network concurrently; one result per network."""
        return list(
            await asyncio.gather(
                *(self.get_network_metrics.fetch(n) for n in self.networks)
            )
        )

    async def execute(self) -> List[NetworkMetrics]:
        """Get displayable metrics for all networks."""
        return select_display_metrics(await self.fetch_all())
