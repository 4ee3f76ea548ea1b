"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from vigie.application.state.dashboard_state import DashboardState
from vigie.application.use_cases.get_network_metrics import GetNetworkMetrics
from vigie.application.use_cases.lookup_wallet_balances import (
    LookupWalletBalances,
)
from vigie.config.settings import Settings
from vigie.di.container import get_container

# ================================================================
# State Dependencies
# ================================================================


def get_dashboard_state() -> DashboardState:
    """Get DashboardState dependency."""
    return get_container().dashboard_state


# ================================================================
# Use Case Dependencies
# ================================================================


def get_network_metrics_use_case() -> GetNetworkMetrics:
    """Get GetNetworkMetrics use case dependency."""
    return get_container().get_network_metrics


def get_lookup_wallet_balances() -> LookupWalletBalances:
    """Get LookupWalletBalances use case dependency."""
    return get_container().lookup_wallet_balances


# ================================================================
# Settings Dependencies
# ================================================================


def get_app_settings() -> Settings:
    """Get settings the container was built with."""
    return get_container().settings
