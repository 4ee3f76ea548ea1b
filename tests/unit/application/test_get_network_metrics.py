"""
Unit tests for GetNetworkMetrics and GetAllNetworksMetrics.

Usage:
    pytest tests/unit/application/test_get_network_metrics.py
"""

from unittest.mock import AsyncMock

import pytest

from vigie.application.use_cases import (
    GetAllNetworksMetrics,
    GetNetworkMetrics,
    select_display_metrics,
)
from vigie.domain.entities.network_metrics import (
    FetchFailureReason,
    MetricsResult,
    NetworkMetrics,
)
from vigie.domain.exceptions import (
    UnknownNetworkError,
    UpstreamConnectionError,
    UpstreamHttpError,
)
from vigie.domain.value_objects.network import DEFAULT_REPRESENTATIVE_WALLET, Network
from vigie.domain.value_objects.token_balance import TokenBalance
from tests.helpers import FakeTokenApi, other_balance, usdc_balance


class TestGetNetworkMetrics:
    """Unit tests for GetNetworkMetrics."""

    # ================================================================
    # Success
    # ================================================================

    async def test_measures_representative_wallet(self):
        """Test supply comes from the representative wallet's USDC entry."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [
            other_balance(Network.ETHEREUM),
            usdc_balance(Network.ETHEREUM, "5000000"),
        ]

        metrics = await GetNetworkMetrics(token_api).execute("ethereum")

        assert metrics == NetworkMetrics(
            network=Network.ETHEREUM,
            total_supply=5.0,
            holder_count=0,
            price=1.0,
            market_cap=5.0,
            daily_volume=0.0,
        )
        token_api.get_balances.assert_awaited_once_with(
            DEFAULT_REPRESENTATIVE_WALLET, "mainnet"
        )

    async def test_uses_reported_price_and_value(self):
        """Test reported price and value are used as is."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [
            usdc_balance(Network.BASE, "2000000", price_usd=0.999, value_usd=1.998)
        ]

        metrics = await GetNetworkMetrics(token_api).execute(Network.BASE)

        assert metrics.price == 0.999
        assert metrics.market_cap == 1.998

    async def test_market_cap_from_supply_times_price(self):
        """Test market cap falls back to supply times price."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [
            usdc_balance(Network.POLYGON, "10000000", price_usd=0.5)
        ]

        metrics = await GetNetworkMetrics(token_api).execute("polygon")

        assert metrics.market_cap == pytest.approx(5.0)

    async def test_missing_decimals_scaled_as_usdc(self):
        """Test a USDC entry without decimals is scaled by 6."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [
            usdc_balance(Network.ETHEREUM, "5000000", decimals=None)
        ]

        metrics = await GetNetworkMetrics(token_api).execute("ethereum")

        assert metrics.total_supply == 5.0
        assert metrics.market_cap == 5.0

    # ================================================================
    # Failures
    # ================================================================

    async def test_upstream_error_becomes_placeholder(self):
        """Test an HTTP error yields a failure and a zeroed record."""
        token_api = AsyncMock()
        token_api.get_balances.side_effect = UpstreamHttpError(404, "not found")

        use_case = GetNetworkMetrics(token_api)
        result = await use_case.fetch("arbitrum")

        assert not result.ok
        assert result.reason == FetchFailureReason.UPSTREAM_ERROR
        assert result.error.status == 404
        assert await use_case.execute("arbitrum") == NetworkMetrics.placeholder(
            Network.ARBITRUM
        )

    async def test_connection_error_absorbed(self):
        """Test transport failures are absorbed as upstream errors."""
        token_api = AsyncMock()
        token_api.get_balances.side_effect = UpstreamConnectionError("timeout")

        result = await GetNetworkMetrics(token_api).fetch("base")

        assert result.reason == FetchFailureReason.UPSTREAM_ERROR

    async def test_no_usdc_entry(self):
        """Test a wallet without the USDC contract yields no matching token."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [other_balance(Network.OPTIMISM)]

        result = await GetNetworkMetrics(token_api).fetch("optimism")

        assert result.reason == FetchFailureReason.NO_MATCHING_TOKEN
        assert result.error.code == "NO_MATCHING_TOKEN"

    async def test_usdc_of_another_network_does_not_match(self):
        """Test another network's USDC contract is not accepted."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [usdc_balance(Network.ETHEREUM, "1")]

        result = await GetNetworkMetrics(token_api).fetch("base")

        assert result.reason == FetchFailureReason.NO_MATCHING_TOKEN

    async def test_unparsable_amount(self):
        """Test an unreadable amount yields an invalid payload failure."""
        token_api = AsyncMock()
        token_api.get_balances.return_value = [
            TokenBalance(
                contract="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
                amount="not-a-number",
                decimals=6,
            )
        ]

        result = await GetNetworkMetrics(token_api).fetch("ethereum")

        assert result.reason == FetchFailureReason.INVALID_PAYLOAD

    async def test_unknown_network_raises(self):
        """Test unknown networks raise before any call."""
        token_api = AsyncMock()

        with pytest.raises(UnknownNetworkError):
            await GetNetworkMetrics(token_api).execute("solana")

        token_api.get_balances.assert_not_called()


class TestSelectDisplayMetrics:
    """Tests for the display filter."""

    def test_failures_dropped_and_zero_supply_hidden(self):
        """Test failures and zero supplies are hidden when one is nonzero."""
        results = [
            MetricsResult.success(NetworkMetrics(Network.ETHEREUM, total_supply=5.0)),
            MetricsResult.success(NetworkMetrics(Network.BASE, total_supply=0.0)),
            MetricsResult.failure(Network.POLYGON, FetchFailureReason.UPSTREAM_ERROR),
        ]

        selected = select_display_metrics(results)

        assert [m.network for m in selected] == [Network.ETHEREUM]

    def test_all_zero_keeps_every_success(self):
        """Test zero supplies are shown when nothing is nonzero."""
        results = [
            MetricsResult.success(NetworkMetrics(Network.ETHEREUM)),
            MetricsResult.success(NetworkMetrics(Network.BASE)),
            MetricsResult.failure(Network.POLYGON, FetchFailureReason.NO_MATCHING_TOKEN),
        ]

        selected = select_display_metrics(results)

        assert [m.network for m in selected] == [Network.ETHEREUM, Network.BASE]

    def test_all_failed_is_empty(self):
        """Test nothing is shown when every network failed."""
        results = [
            MetricsResult.failure(n, FetchFailureReason.UPSTREAM_ERROR) for n in Network
        ]
        assert select_display_metrics(results) == []


class TestGetAllNetworksMetrics:
    """Unit tests for GetAllNetworksMetrics."""

    async def test_one_network_reporting_others_not_found(self):
        """Test one reporting network among four 404s."""
        not_found = UpstreamHttpError(404, "not found")
        token_api = FakeTokenApi(
            balances={"mainnet": [usdc_balance(Network.ETHEREUM, "5000000")]},
            balance_errors={
                "matic": not_found,
                "arbitrum-one": not_found,
                "optimism": not_found,
                "base": not_found,
            },
        )
        use_case = GetAllNetworksMetrics(GetNetworkMetrics(token_api))

        metrics = await use_case.execute()

        assert len(metrics) == 1
        assert metrics[0].network == Network.ETHEREUM
        assert metrics[0].total_supply == 5.0
        assert metrics[0].price == 1.0
        assert len(token_api.balance_calls) == 5

    async def test_fetch_all_returns_result_per_network_in_table_order(self):
        """Test one result per network, in table order."""
        token_api = FakeTokenApi()
        use_case = GetAllNetworksMetrics(GetNetworkMetrics(token_api))

        results = await use_case.fetch_all()

        assert [r.network for r in results] == list(Network)
        assert all(r.reason == FetchFailureReason.NO_MATCHING_TOKEN for r in results)

    async def test_zero_balances_are_kept_when_nothing_is_nonzero(self):
        """Test zero balances survive the display filter."""
        token_api = FakeTokenApi(
            balances={
                "mainnet": [usdc_balance(Network.ETHEREUM, "0")],
                "base": [usdc_balance(Network.BASE, "0")],
            }
        )
        use_case = GetAllNetworksMetrics(GetNetworkMetrics(token_api))

        metrics = await use_case.execute()

        assert {m.network for m in metrics} == {Network.ETHEREUM, Network.BASE}
        assert all(m.total_supply == 0.0 for m in metrics)
