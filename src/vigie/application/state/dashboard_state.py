"""
Dashboard state container.

Owns the single DashboardSnapshot served by the API and is the only
place that mutates it. A refresh fetches metrics, transfers and price
concurrently, builds the historical series and publishes a new snapshot
unless a newer refresh has started meanwhile.
"""

import asyncio
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable, Iterable, List, Optional, TypeVar

from vigie.application.use_cases.get_all_networks_metrics import (
    GetAllNetworksMetrics,
    select_display_metrics,
)
from vigie.application.use_cases.get_current_price import (
    GetCurrentPrice,
    PriceLookup,
)
from vigie.application.use_cases.get_historical_series import GetHistoricalSeries
from vigie.application.use_cases.get_large_transfers import (
    GetLargeTransfers,
    TransferLookup,
)
from vigie.domain.entities.dashboard import (
    DashboardSnapshot,
    DashboardStatus,
    ErrorCategory,
)
from vigie.domain.entities.network_metrics import (
    DEFAULT_USDC_PRICE,
    MetricsResult,
)
from vigie.domain.exceptions.base import MissingCredentialError
from vigie.domain.exceptions.upstream import UpstreamHttpError
from vigie.infrastructure.monitoring.logger import (
    get_logger,
    log_performance,
    set_refresh_generation,
)
from vigie.infrastructure.monitoring.metrics import (
    dashboard_refresh_duration_seconds,
    dashboard_refreshes_total,
    networks_reporting,
)

logger = get_logger(__name__)

T = TypeVar("T")

PLACEHOLDER_API_KEYS = frozenset(
    {
        "your_graph_token_api_key_here",
        "your_actual_api_key_here",
    }
)


def is_api_key_configured(api_key: Optional[str]) -> bool:
    """False for a missing, blank or placeholder key."""
    if not api_key or not api_key.strip():
        return False
    return api_key.strip() not in PLACEHOLDER_API_KEYS


def classify_error(errors: Iterable[Exception]) -> ErrorCategory:
    """
    Map the errors of a failed refresh to a user-visible category.

    Any 401 wins over any 404, everything else is generic.
    """
    errors = list(errors)
    if any(isinstance(e, MissingCredentialError) for e in errors):
        return ErrorCategory.NOT_CONFIGURED

    statuses = {e.status for e in errors if isinstance(e, UpstreamHttpError)}
    if 401 in statuses:
        return ErrorCategory.AUTHENTICATION
    if 404 in statuses:
        return ErrorCategory.NOT_FOUND
    return ErrorCategory.GENERIC


class DashboardState:
    """
    Aggregate dashboard state.

    Lifecycle: idle -> loading -> ready | error. Every refresh re-enters
    loading and bumps the generation; results of a refresh whose
    generation is no longer current are discarded.
    """

    def __init__(
        self,
        all_networks_metrics: GetAllNetworksMetrics,
        large_transfers: GetLargeTransfers,
        current_price: GetCurrentPrice,
        historical_series: GetHistoricalSeries,
        api_key: Optional[str],
        transfers_limit: int = 10,
        supply_days: int = 30,
        wallet_days: int = 30,
        mint_burn_days: int = 7,
    ):
        """
        Initialize dashboard state.

        Args:
            all_networks_metrics: Metrics aggregator
            large_transfers: Transfer resolver
            current_price: Price lookup
            historical_series: Historical series builder
            api_key: Token API key checked before any request
            transfers_limit: Number of large transfers to keep
            supply_days: Length of the supply series
            wallet_days: Length of the wallet-count series
            mint_burn_days: Length of the mint/burn series
        """
        self.all_networks_metrics = all_networks_metrics
        self.large_transfers = large_transfers
        self.current_price = current_price
        self.historical_series = historical_series
        self.api_key = api_key
        self.transfers_limit = transfers_limit
        self.supply_days = supply_days
        self.wallet_days = wallet_days
        self.mint_burn_days = mint_burn_days

        self._snapshot = DashboardSnapshot()
        self._generation = 0

    @property
    def snapshot(self) -> DashboardSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self) -> DashboardSnapshot:
        """
        Reload every dashboard section.

        Returns:
            Snapshot produced by this refresh, or the current snapshot when
            a newer refresh superseded it
        """
        self._generation += 1
        generation = self._generation
        set_refresh_generation(generation)
        start_time = time.time()

        self._snapshot = DashboardSnapshot(
            status=DashboardStatus.LOADING,
            network_metrics=self._snapshot.network_metrics,
            large_transfers=self._snapshot.large_transfers,
            historical_supply=self._snapshot.historical_supply,
            historical_wallet_count=self._snapshot.historical_wallet_count,
            mint_burn=self._snapshot.mint_burn,
            current_price=self._snapshot.current_price,
            generation=generation,
            updated_at=self._snapshot.updated_at,
        )
        logger.info("Dashboard refresh started")

        try:
            if not is_api_key_configured(self.api_key):
                logger.warning("Token API key missing, skipping refresh")
                return self._fail(generation, [MissingCredentialError()], "not_configured")

            results, transfers, price = await asyncio.gather(
                self._guard(
                    "network metrics",
                    self.all_networks_metrics.fetch_all,
                    lambda e: [],
                ),
                self._guard(
                    "large transfers",
                    lambda: self.large_transfers.fetch(self.transfers_limit),
                    lambda e: TransferLookup(errors=[e]),
                ),
                self._guard(
                    "current price",
                    self.current_price.fetch,
                    lambda e: PriceLookup(DEFAULT_USDC_PRICE, e),
                ),
            )

            if self._is_stale(generation):
                logger.info("Discarding superseded refresh results")
                return self._snapshot

            if self._batch_failed(results, transfers, price):
                errors = self._collect_errors(results, transfers, price)
                return self._fail(generation, errors, "failed")

            return self._publish(generation, results, transfers, price)
        finally:
            dashboard_refresh_duration_seconds.observe(time.time() - start_time)
            log_performance(logger, "dashboard_refresh", start_time)
            set_refresh_generation(None)

    # ============================================================
    # Internals
    # ============================================================

    async def _guard(
        self,
        section: str,
        call: Callable[[], Awaitable[T]],
        on_error: Callable[[Exception], T],
    ) -> T:
        try:
            return await call()
        except Exception as e:
            logger.error(f"Unexpected failure loading {section}: {e}", exc_info=True)
            return on_error(e)

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    @staticmethod
    def _batch_failed(
        results: List[MetricsResult],
        transfers: TransferLookup,
        price: PriceLookup,
    ) -> bool:
        return (
            not any(r.ok for r in results)
            and not transfers.transfers
            and price.error is not None
        )

    @staticmethod
    def _collect_errors(
        results: List[MetricsResult],
        transfers: TransferLookup,
        price: PriceLookup,
    ) -> List[Exception]:
        errors = [r.error for r in results if r.error is not None]
        errors.extend(transfers.errors)
        if price.error is not None:
            errors.append(price.error)
        return errors

    def _fail(
        self,
        generation: int,
        errors: List[Exception],
        outcome: str,
    ) -> DashboardSnapshot:
        category = classify_error(errors)
        self._snapshot = DashboardSnapshot(
            status=DashboardStatus.ERROR,
            error=category,
            network_metrics=self._snapshot.network_metrics,
            large_transfers=self._snapshot.large_transfers,
            historical_supply=self._snapshot.historical_supply,
            historical_wallet_count=self._snapshot.historical_wallet_count,
            mint_burn=self._snapshot.mint_burn,
            current_price=self._snapshot.current_price,
            generation=generation,
            updated_at=datetime.now(timezone.utc),
        )
        dashboard_refreshes_total.labels(outcome=outcome).inc()
        logger.warning(f"Dashboard refresh failed: {category.value}")
        return self._snapshot

    def _publish(
        self,
        generation: int,
        results: List[MetricsResult],
        transfers: TransferLookup,
        price: PriceLookup,
    ) -> DashboardSnapshot:
        network_metrics = select_display_metrics(results)
        total_supply = sum(m.total_supply for m in network_metrics)
        total_holders = sum(m.holder_count for m in network_metrics)

        supply_series = self._series(
            "supply",
            lambda: self.historical_series.supply(total_supply, self.supply_days),
        )
        wallet_series = self._series(
            "wallet count",
            lambda: self.historical_series.wallet_count(
                total_holders or None, self.wallet_days
            ),
        )
        mint_burn = self._series(
            "mint/burn",
            lambda: self.historical_series.mint_burn(self.mint_burn_days),
        )

        self._snapshot = DashboardSnapshot(
            status=DashboardStatus.READY,
            network_metrics=network_metrics,
            large_transfers=transfers.transfers,
            historical_supply=supply_series,
            historical_wallet_count=wallet_series,
            mint_burn=mint_burn,
            current_price=price.price,
            generation=generation,
            updated_at=datetime.now(timezone.utc),
        )

        networks_reporting.set(len(network_metrics))
        dashboard_refreshes_total.labels(outcome="ready").inc()
        logger.info(
            "Dashboard refresh completed",
            extra={
                "networks": len(network_metrics),
                "transfers": len(transfers.transfers),
            },
        )
        return self._snapshot

    @staticmethod
    def _series(name: str, build: Callable[[], List[T]]) -> List[T]:
        try:
            return build()
        except Exception as e:
            logger.error(f"Failed to build {name} series: {e}", exc_info=True)
            return []
