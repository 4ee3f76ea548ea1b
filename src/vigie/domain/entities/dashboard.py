"""
Dashboard aggregate - everything the presentation layer renders.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from vigie.domain.entities.historical import HistoricalPoint, MintBurnPoint
from vigie.domain.entities.network_metrics import DEFAULT_USDC_PRICE, NetworkMetrics
from vigie.domain.entities.transfer_record import TransferRecord


class DashboardStatus(str, Enum):
    """Dashboard lifecycle states."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """User-visible error categories."""

    NOT_CONFIGURED = "API key not configured"
    AUTHENTICATION = "Authentication failed"
    NOT_FOUND = "API endpoint not found"
    GENERIC = "Failed to load data"


@dataclass(frozen=True)
class DashboardSnapshot:
    """
    Immutable view of the dashboard state.

    Business rules:
    - network_metrics holds successes only
    - error is set only in ERROR status
    - generation identifies the refresh that produced the snapshot
    """

    status: DashboardStatus = DashboardStatus.IDLE
    error: Optional[ErrorCategory] = None
    network_metrics: List[NetworkMetrics] = field(default_factory=list)
    large_transfers: List[TransferRecord] = field(default_factory=list)
    historical_supply: List[HistoricalPoint] = field(default_factory=list)
    historical_wallet_count: List[HistoricalPoint] = field(default_factory=list)
    mint_burn: List[MintBurnPoint] = field(default_factory=list)
    current_price: float = DEFAULT_USDC_PRICE
    generation: int = 0
    updated_at: Optional[datetime] = None

    @property
    def is_loading(self) -> bool:
        return self.status == DashboardStatus.LOADING

    @property
    def error_message(self) -> Optional[str]:
        return self.error.value if self.error else None
