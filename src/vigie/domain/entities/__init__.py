"""
Domain entities for Vigie.
"""

from vigie.domain.entities.dashboard import (
    DashboardSnapshot,
    DashboardStatus,
    ErrorCategory,
)
from vigie.domain.entities.dashboard_summary import (
    DashboardSummary,
    NetworkShare,
    summarize_dashboard,
)
from vigie.domain.entities.historical import (
    HistoricalMode,
    HistoricalPoint,
    MintBurnPoint,
)
from vigie.domain.entities.network_metrics import (
    DEFAULT_USDC_PRICE,
    FetchFailureReason,
    MetricsResult,
    NetworkMetrics,
)
from vigie.domain.entities.transfer_record import TransferRecord

__all__ = [
    "DashboardSnapshot",
    "DashboardStatus",
    "ErrorCategory",
    "DashboardSummary",
    "NetworkShare",
    "summarize_dashboard",
    "HistoricalMode",
    "HistoricalPoint",
    "MintBurnPoint",
    "DEFAULT_USDC_PRICE",
    "FetchFailureReason",
    "MetricsResult",
    "NetworkMetrics",
    "TransferRecord",
]
