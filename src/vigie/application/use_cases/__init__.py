"""
Application use cases.
"""

from vigie.application.use_cases.get_all_networks_metrics import (
    GetAllNetworksMetrics,
    select_display_metrics,
)
from vigie.application.use_cases.get_current_price import GetCurrentPrice, PriceLookup
from vigie.application.use_cases.get_historical_series import GetHistoricalSeries
from vigie.application.use_cases.get_large_transfers import (
    DEFAULT_TRANSFER_PRIORITY,
    GetLargeTransfers,
    TransferLookup,
)
from vigie.application.use_cases.get_network_metrics import GetNetworkMetrics
from vigie.application.use_cases.lookup_wallet_balances import (
    LookupWalletBalances,
    validate_address,
)

__all__ = [
    "DEFAULT_TRANSFER_PRIORITY",
    "GetAllNetworksMetrics",
    "GetCurrentPrice",
    "GetHistoricalSeries",
    "GetLargeTransfers",
    "GetNetworkMetrics",
    "LookupWalletBalances",
    "PriceLookup",
    "TransferLookup",
    "select_display_metrics",
    "validate_address",
]
