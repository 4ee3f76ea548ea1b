"""
Dependency Injection Container for Vigie.

Manages all service instances and their dependencies.
"""

from typing import Dict, Optional

from vigie.application.state.dashboard_state import DashboardState
from vigie.application.use_cases.get_all_networks_metrics import (
    GetAllNetworksMetrics,
)
from vigie.application.use_cases.get_current_price import GetCurrentPrice
from vigie.application.use_cases.get_historical_series import GetHistoricalSeries
from vigie.application.use_cases.get_large_transfers import GetLargeTransfers
from vigie.application.use_cases.get_network_metrics import GetNetworkMetrics
from vigie.application.use_cases.lookup_wallet_balances import (
    LookupWalletBalances,
)
from vigie.config.settings import Settings, get_settings
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import (
    Network,
    NetworkConfig,
    build_network_configs,
)
from vigie.infrastructure.monitoring.logger import get_logger
from vigie.infrastructure.resilience import RetryConfig
from vigie.infrastructure.token_api import TokenApiClient

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of the token API client, the use cases
    and the dashboard state. Everything is built lazily from settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_api: Optional[ITokenApi] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Settings to build from (defaults to get_settings())
            token_api: Prebuilt token API (tests inject fakes)
        """
        self._settings = settings

        # Infrastructure
        self._token_api: Optional[ITokenApi] = token_api
        self._network_configs: Optional[Dict[Network, NetworkConfig]] = None

        # Use Cases
        self._get_network_metrics: Optional[GetNetworkMetrics] = None
        self._get_all_networks_metrics: Optional[GetAllNetworksMetrics] = None
        self._get_large_transfers: Optional[GetLargeTransfers] = None
        self._get_current_price: Optional[GetCurrentPrice] = None
        self._get_historical_series: Optional[GetHistoricalSeries] = None
        self._lookup_wallet_balances: Optional[LookupWalletBalances] = None

        # State
        self._dashboard_state: Optional[DashboardState] = None

    async def initialize(self) -> None:
        """Build the object graph eagerly so misconfiguration fails at startup."""
        _ = self.dashboard_state
        logger.info(
            "Container initialized",
            extra={"historical_mode": self.settings.HISTORICAL_MODE},
        )

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._token_api:
            await self._token_api.close()

    # Infrastructure Getters

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def network_configs(self) -> Dict[Network, NetworkConfig]:
        """Network table with configured representative wallets."""
        if self._network_configs is None:
            self._network_configs = build_network_configs(
                self.settings.REPRESENTATIVE_WALLETS
            )
        return self._network_configs

    @property
    def token_api(self) -> ITokenApi:
        """Get token API client instance."""
        if self._token_api is None:
            settings = self.settings
            self._token_api = TokenApiClient(
                base_url=settings.TOKEN_API_URL,
                api_key=settings.TOKEN_API_KEY,
                timeout=settings.TOKEN_API_TIMEOUT,
                retry_config=RetryConfig(
                    max_attempts=settings.RETRY_MAX_ATTEMPTS,
                    initial_delay=settings.RETRY_INITIAL_DELAY,
                    max_delay=settings.RETRY_MAX_DELAY,
                    backoff_strategy=settings.RETRY_BACKOFF_STRATEGY,
                    jitter=settings.RETRY_JITTER,
                ),
            )
        return self._token_api

    # Use Case Getters

    @property
    def get_network_metrics(self) -> GetNetworkMetrics:
        if self._get_network_metrics is None:
            self._get_network_metrics = GetNetworkMetrics(
                token_api=self.token_api,
                network_configs=self.network_configs,
            )
        return self._get_network_metrics

    @property
    def get_all_networks_metrics(self) -> GetAllNetworksMetrics:
        if self._get_all_networks_metrics is None:
            self._get_all_networks_metrics = GetAllNetworksMetrics(
                get_network_metrics=self.get_network_metrics,
            )
        return self._get_all_networks_metrics

    @property
    def get_large_transfers(self) -> GetLargeTransfers:
        if self._get_large_transfers is None:
            self._get_large_transfers = GetLargeTransfers(
                token_api=self.token_api,
                network_configs=self.network_configs,
                priority=self.settings.transfer_priority,
            )
        return self._get_large_transfers

    @property
    def get_current_price(self) -> GetCurrentPrice:
        if self._get_current_price is None:
            self._get_current_price = GetCurrentPrice(
                token_api=self.token_api,
                network_configs=self.network_configs,
            )
        return self._get_current_price

    @property
    def get_historical_series(self) -> GetHistoricalSeries:
        if self._get_historical_series is None:
            settings = self.settings
            self._get_historical_series = GetHistoricalSeries(
                mode=settings.HISTORICAL_MODE,
                amplitude=settings.SYNTHETIC_AMPLITUDE,
                period=settings.SYNTHETIC_PERIOD,
                wallet_count_base=settings.SYNTHETIC_WALLET_COUNT_BASE,
                mint_base=settings.SYNTHETIC_MINT_BASE,
                burn_base=settings.SYNTHETIC_BURN_BASE,
            )
        return self._get_historical_series

    @property
    def lookup_wallet_balances(self) -> LookupWalletBalances:
        if self._lookup_wallet_balances is None:
            self._lookup_wallet_balances = LookupWalletBalances(
                token_api=self.token_api,
                network_configs=self.network_configs,
            )
        return self._lookup_wallet_balances

    # State Getters

    @property
    def dashboard_state(self) -> DashboardState:
        """Get the dashboard state (one per process)."""
        if self._dashboard_state is None:
            settings = self.settings
            self._dashboard_state = DashboardState(
                all_networks_metrics=self.get_all_networks_metrics,
                large_transfers=self.get_large_transfers,
                current_price=self.get_current_price,
                historical_series=self.get_historical_series,
                api_key=settings.TOKEN_API_KEY,
                transfers_limit=settings.LARGE_TRANSFERS_LIMIT,
                supply_days=settings.HISTORICAL_SUPPLY_DAYS,
                wallet_days=settings.HISTORICAL_WALLET_DAYS,
                mint_burn_days=settings.MINT_BURN_DAYS,
            )
        return self._dashboard_state


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def override_container(container: Optional[DIContainer]) -> None:
    """Replace the global container (for testing)."""
    global _container
    _container = container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()
