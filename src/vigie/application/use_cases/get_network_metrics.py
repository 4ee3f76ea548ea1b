"""
Get Network Metrics use case.

Measures USDC on one network through the balances of its representative
wallet.
"""

from typing import Mapping, Optional, Union

from vigie.domain.entities.network_metrics import (
    DEFAULT_USDC_PRICE,
    FetchFailureReason,
    MetricsResult,
    NetworkMetrics,
)
from vigie.domain.exceptions.network import NoMatchingTokenError
from vigie.domain.exceptions.upstream import UpstreamError
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import (
    NETWORK_CONFIGS,
    Network,
    NetworkConfig,
    get_network_config,
)
from vigie.infrastructure.monitoring.logger import get_logger
from vigie.infrastructure.monitoring.metrics import network_fetch_failures_total

logger = get_logger(__name__)


class GetNetworkMetrics:
    """
    Get USDC metrics for one network.

    Business rules:
    - The USDC entry is located by contract address (case-insensitive)
    - Supply is the representative wallet's balance in human units
    - Price defaults to 1.0 when the API reports none
    - Upstream failures are absorbed into a tagged failure result
    """

    def __init__(
        self,
        token_api: ITokenApi,
        network_configs: Optional[Mapping[Network, NetworkConfig]] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            token_api: Token API client
            network_configs: Network table (defaults to NETWORK_CONFIGS)
        """
        self.token_api = token_api
        self.network_configs = network_configs or NETWORK_CONFIGS

    async def fetch(self, network: Union[str, Network]) -> MetricsResult:
        """
        Measure one network.

        Args:
            network: Network name or Network

        Returns:
            MetricsResult carrying metrics or the failure reason

        Raises:
            UnknownNetworkError: If network is not supported
        """
        config = get_network_config(network, self.network_configs)

        try:
            balances = await self.token_api.get_balances(
                config.representative_wallet, config.network_id
            )
        except UpstreamError as e:
            logger.warning(f"Balance fetch failed for {config.network.value}: {e}")
            return self._failure(config, FetchFailureReason.UPSTREAM_ERROR, e)

        usdc = next(
            (b for b in balances if config.matches_contract(b.contract)), None
        )
        if usdc is None:
            return self._failure(
                config,
                FetchFailureReason.NO_MATCHING_TOKEN,
                NoMatchingTokenError(config.network.value, config.contract_address),
            )

        try:
            supply = usdc.human_amount
        except ValueError as e:
            logger.warning(f"Unreadable USDC amount on {config.network.value}: {e}")
            return self._failure(config, FetchFailureReason.INVALID_PAYLOAD, e)

        price = usdc.price_usd if usdc.price_usd is not None else DEFAULT_USDC_PRICE
        market_cap = usdc.value_usd if usdc.value_usd is not None else supply * price

        return MetricsResult.success(
            NetworkMetrics(
                network=config.network,
                total_supply=supply,
                holder_count=0,
                price=price,
                market_cap=market_cap,
                daily_volume=0.0,
            )
        )

    async def execute(self, network: Union[str, Network]) -> NetworkMetrics:
        """
        Get metrics for one network, zeroed when it cannot be measured.

        Raises:
            UnknownNetworkError: If network is not supported
        """
        result = await self.fetch(network)
        return result.unwrap_or_placeholder()

    @staticmethod
    def _failure(
        config: NetworkConfig,
        reason: FetchFailureReason,
        error: Exception,
    ) -> MetricsResult:
        network_fetch_failures_total.labels(
            network=config.network.value, reason=reason.value
        ).inc()
        return MetricsResult.failure(config.network, reason, error)
