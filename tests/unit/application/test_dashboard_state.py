"""
Unit tests for DashboardState.

Covers the credential gate, error classification, stale refresh
handling and per-section isolation.

Usage:
    pytest tests/unit/application/test_dashboard_state.py
"""

import asyncio
from typing import List, Optional

import pytest

from vigie.application.state import (
    DashboardState,
    classify_error,
    is_api_key_configured,
)
from vigie.application.use_cases import (
    GetAllNetworksMetrics,
    GetCurrentPrice,
    GetHistoricalSeries,
    GetLargeTransfers,
    GetNetworkMetrics,
    PriceLookup,
    TransferLookup,
)
from vigie.domain.entities.dashboard import DashboardStatus, ErrorCategory
from vigie.domain.entities.network_metrics import MetricsResult, NetworkMetrics
from vigie.domain.exceptions import (
    MissingCredentialError,
    UpstreamConnectionError,
    UpstreamHttpError,
)
from vigie.domain.value_objects.network import Network
from tests.helpers import FakeTokenApi, failing_everywhere, usdc_balance, usdc_transfer


# ================================================================
# Helper Methods
# ================================================================


def _state(
    token_api: FakeTokenApi,
    api_key: Optional[str] = "real-key",
    historical: Optional[GetHistoricalSeries] = None,
) -> DashboardState:
    return DashboardState(
        all_networks_metrics=GetAllNetworksMetrics(GetNetworkMetrics(token_api)),
        large_transfers=GetLargeTransfers(token_api),
        current_price=GetCurrentPrice(token_api),
        historical_series=historical or GetHistoricalSeries(mode="empty"),
        api_key=api_key,
    )


class GatedMetrics:
    """Metrics aggregator whose first call blocks until released."""

    def __init__(self):
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.calls = 0

    async def fetch_all(self) -> List[MetricsResult]:
        self.calls += 1
        if self.calls == 1:
            self.started.set()
            await self.release.wait()
            supply = 1.0
        else:
            supply = 2.0
        return [MetricsResult.success(NetworkMetrics(Network.ETHEREUM, supply))]


class StubTransfers:
    async def fetch(self, limit: int = 10) -> TransferLookup:
        return TransferLookup()


class StubPrice:
    async def fetch(self) -> PriceLookup:
        return PriceLookup()


class TestCredentialGate:
    """A missing or placeholder key never reaches the network."""

    @pytest.mark.parametrize(
        "api_key",
        [None, "", "   ", "your_graph_token_api_key_here", "your_actual_api_key_here"],
    )
    async def test_not_configured(self, api_key):
        """Test a missing or placeholder key fails with zero calls."""
        token_api = FakeTokenApi()
        state = _state(token_api, api_key=api_key)

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.ERROR
        assert snapshot.error == ErrorCategory.NOT_CONFIGURED
        assert snapshot.error_message == "API key not configured"
        assert token_api.call_count == 0

    def test_is_api_key_configured(self):
        """Test placeholder and blank keys count as unset."""
        assert is_api_key_configured("abc123")
        assert not is_api_key_configured("your_actual_api_key_here")


class TestErrorClassification:
    """Tests for classify_error and fully failed refreshes."""

    def test_unauthorized_wins_over_not_found(self):
        """Test any 401 outranks a 404."""
        errors = [UpstreamHttpError(404), UpstreamHttpError(401), UpstreamHttpError(500)]
        assert classify_error(errors) == ErrorCategory.AUTHENTICATION

    def test_not_found(self):
        """Test a 404 without 401 is classified as not found."""
        errors = [UpstreamHttpError(500), UpstreamHttpError(404)]
        assert classify_error(errors) == ErrorCategory.NOT_FOUND

    def test_generic(self):
        """Test other failures are generic."""
        errors = [UpstreamConnectionError("refused"), UpstreamHttpError(503)]
        assert classify_error(errors) == ErrorCategory.GENERIC

    def test_missing_credential(self):
        """Test a missing credential reads as not configured."""
        assert classify_error([MissingCredentialError()]) == ErrorCategory.NOT_CONFIGURED

    def test_message_text_is_ignored(self):
        """Test only status codes drive the category."""
        errors = [UpstreamConnectionError("401 Unauthorized")]
        assert classify_error(errors) == ErrorCategory.GENERIC

    async def test_all_unauthorized(self):
        """Test every call rejected with 401."""
        state = _state(failing_everywhere(UpstreamHttpError(401, "bad key")))

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.ERROR
        assert snapshot.error_message == "Authentication failed"

    async def test_all_not_found(self):
        """Test every call answered with 404."""
        state = _state(failing_everywhere(UpstreamHttpError(404)))

        snapshot = await state.refresh()

        assert snapshot.error == ErrorCategory.NOT_FOUND

    async def test_all_unreachable(self):
        """Test every call failing to connect."""
        state = _state(failing_everywhere(UpstreamConnectionError("refused")))

        snapshot = await state.refresh()

        assert snapshot.error == ErrorCategory.GENERIC
        assert snapshot.error_message == "Failed to load data"


class TestRefresh:
    """Tests for successful and partial refreshes."""

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_ready_with_partial_data(self):
        """Test one reporting network is enough to be ready."""
        not_found = UpstreamHttpError(404)
        token_api = FakeTokenApi(
            balances={
                "mainnet": [usdc_balance(Network.ETHEREUM, "5000000", price_usd=0.9996)]
            },
            balance_errors={
                "matic": not_found,
                "arbitrum-one": not_found,
                "optimism": not_found,
                "base": not_found,
            },
            transfers={"mainnet": [usdc_transfer(Network.ETHEREUM, "7000000", "0x1")]},
        )
        state = _state(token_api)

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.READY
        assert snapshot.error is None
        assert [m.network for m in snapshot.network_metrics] == [Network.ETHEREUM]
        assert snapshot.network_metrics[0].total_supply == 5.0
        assert [t.amount for t in snapshot.large_transfers] == [7.0]
        assert snapshot.current_price == 0.9996
        assert snapshot.historical_supply == []
        assert snapshot.generation == 1
        assert snapshot.updated_at is not None
        assert state.snapshot is snapshot

    async def test_metrics_failed_but_transfers_found_is_ready(self):
        """Test transfers alone keep the batch ready."""
        token_api = FakeTokenApi(
            balance_errors={"mainnet": UpstreamHttpError(401)},
            transfers={"mainnet": [usdc_transfer(Network.ETHEREUM, "1000000", "0x1")]},
        )

        snapshot = await _state(token_api).refresh()

        assert snapshot.status == DashboardStatus.READY
        assert snapshot.network_metrics == []

    async def test_synthetic_series_use_current_totals(self, fixed_today):
        """Test synthetic series are built around the fresh totals."""
        token_api = FakeTokenApi(
            balances={"mainnet": [usdc_balance(Network.ETHEREUM, "5000000")]},
        )
        historical = GetHistoricalSeries(
            mode="synthetic", amplitude=0.0, today=lambda: fixed_today
        )

        snapshot = await _state(token_api, historical=historical).refresh()

        assert len(snapshot.historical_supply) == 30
        assert snapshot.historical_supply[-1].value == 5.0
        assert snapshot.historical_wallet_count[-1].value == 500_000.0
        assert len(snapshot.mint_burn) == 7
        assert all(p.synthetic for p in snapshot.historical_supply)

    async def test_failing_series_is_isolated(self):
        """Test a failing series empties itself only."""
        token_api = FakeTokenApi(
            balances={"mainnet": [usdc_balance(Network.ETHEREUM, "5000000")]},
        )
        historical = GetHistoricalSeries(mode="synthetic")
        historical.mint_burn = lambda days=7: 1 / 0

        snapshot = await _state(token_api, historical=historical).refresh()

        assert snapshot.status == DashboardStatus.READY
        assert snapshot.mint_burn == []
        assert len(snapshot.historical_supply) == 30

    async def test_unexpected_section_error_degrades(self):
        """Test an unexpected error in one section leaves the others."""
        state = DashboardState(
            all_networks_metrics=GatedMetrics(),
            large_transfers=StubTransfers(),
            current_price=StubPrice(),
            historical_series=GetHistoricalSeries(),
            api_key="real-key",
        )

        async def broken_fetch(limit: int = 10):
            raise RuntimeError("bug")

        state.large_transfers.fetch = broken_fetch
        state.all_networks_metrics.release.set()

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.READY
        assert snapshot.large_transfers == []

    async def test_error_keeps_previous_data(self):
        """Test a failed refresh keeps the last good data."""
        token_api = FakeTokenApi(
            balances={"mainnet": [usdc_balance(Network.ETHEREUM, "5000000")]},
        )
        state = _state(token_api)
        await state.refresh()

        token_api.balance_errors = {
            nid: UpstreamHttpError(401)
            for nid in ("mainnet", "matic", "arbitrum-one", "optimism", "base")
        }
        token_api.transfer_errors = dict(token_api.balance_errors)

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.ERROR
        assert snapshot.error == ErrorCategory.AUTHENTICATION
        assert snapshot.network_metrics[0].total_supply == 5.0
        assert snapshot.generation == 2

    async def test_recovers_after_error(self):
        """Test a good refresh clears the error."""
        token_api = failing_everywhere(UpstreamHttpError(401))
        state = _state(token_api)
        assert (await state.refresh()).status == DashboardStatus.ERROR

        token_api.balance_errors = {}
        token_api.transfer_errors = {}
        token_api.balances = {"base": [usdc_balance(Network.BASE, "3000000")]}

        snapshot = await state.refresh()

        assert snapshot.status == DashboardStatus.READY
        assert snapshot.error is None


class TestStaleRefresh:
    """A superseded refresh never overwrites newer state."""

    async def test_older_refresh_discarded(self):
        """Test a superseded refresh does not overwrite a newer one."""
        metrics = GatedMetrics()
        state = DashboardState(
            all_networks_metrics=metrics,
            large_transfers=StubTransfers(),
            current_price=StubPrice(),
            historical_series=GetHistoricalSeries(),
            api_key="real-key",
        )

        first = asyncio.create_task(state.refresh())
        await metrics.started.wait()
        assert state.snapshot.is_loading

        second = await state.refresh()
        metrics.release.set()
        first_result = await first

        assert second.generation == 2
        assert second.network_metrics[0].total_supply == 2.0
        assert state.snapshot is second
        assert first_result is second
        assert state.generation == 2

    async def test_initial_state_is_idle(self):
        """Test a fresh state is idle and empty."""
        state = _state(FakeTokenApi())

        assert state.snapshot.status == DashboardStatus.IDLE
        assert state.generation == 0
