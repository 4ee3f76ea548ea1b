"""
API schemas for the dashboard.

Response models for the dashboard snapshot and summary endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from vigie.domain.entities.dashboard import DashboardSnapshot
from vigie.domain.entities.dashboard_summary import DashboardSummary
from vigie.domain.entities.historical import HistoricalPoint, MintBurnPoint
from vigie.domain.entities.network_metrics import NetworkMetrics
from vigie.domain.entities.transfer_record import TransferRecord


class NetworkMetricsResponse(BaseModel):
    """USDC metrics for one network."""

    network: str = Field(..., description="Network name", examples=["ethereum"])
    total_supply: float = Field(
        ...,
        description="USDC held by the representative wallet (human units)",
        examples=[5.0],
    )
    holder_count: int = Field(..., description="Holder count (0 if unknown)")
    price: float = Field(..., description="USDC price in USD", examples=[1.0])
    market_cap: float = Field(..., description="Supply valued in USD")
    daily_volume: float = Field(..., description="Daily volume (0 if unknown)")

    @classmethod
    def from_entity(cls, metrics: NetworkMetrics) -> "NetworkMetricsResponse":
        return cls(
            network=metrics.network.value,
            total_supply=metrics.total_supply,
            holder_count=metrics.holder_count,
            price=metrics.price,
            market_cap=metrics.market_cap,
            daily_volume=metrics.daily_volume,
        )


class TransferResponse(BaseModel):
    """One large USDC transfer."""

    from_address: str = Field(..., description="Sender address")
    to_address: str = Field(..., description="Recipient address")
    amount: float = Field(..., description="USDC amount (human units)")
    timestamp: str = Field(..., description="Transfer time as reported")
    transaction_id: str = Field(..., description="Transaction hash")
    network: str = Field(..., description="Network", examples=["base"])

    @classmethod
    def from_entity(cls, record: TransferRecord) -> "TransferResponse":
        return cls(
            from_address=record.from_address,
            to_address=record.to_address,
            amount=record.amount,
            timestamp=record.timestamp,
            transaction_id=record.transaction_id,
            network=record.network.value,
        )


class HistoricalPointResponse(BaseModel):
    """One point of a supply or wallet-count series."""

    date: str = Field(..., description="Day (YYYY-MM-DD)", examples=["2024-05-01"])
    value: float = Field(..., description="Value on that day")
    synthetic: bool = Field(..., description="True when the point is synthesized")

    @classmethod
    def from_entity(cls, point: HistoricalPoint) -> "HistoricalPointResponse":
        return cls(date=point.date, value=point.value, synthetic=point.synthetic)


class MintBurnPointResponse(BaseModel):
    """Minted and burned USDC for one day."""

    date: str = Field(..., description="Day (YYYY-MM-DD)")
    minted: float = Field(..., description="USDC minted")
    burned: float = Field(..., description="USDC burned")
    net: float = Field(..., description="minted - burned")
    synthetic: bool = Field(..., description="True when the point is synthesized")

    @classmethod
    def from_entity(cls, point: MintBurnPoint) -> "MintBurnPointResponse":
        return cls(
            date=point.date,
            minted=point.minted,
            burned=point.burned,
            net=point.net,
            synthetic=point.synthetic,
        )


class DashboardResponse(BaseModel):
    """
    Response schema for the dashboard snapshot.

    network_metrics only lists networks that could be measured.
    """

    status: str = Field(
        ...,
        description="idle, loading, ready or error",
        examples=["ready"],
    )
    is_loading: bool = Field(..., description="True while a refresh runs")
    error: Optional[str] = Field(
        None,
        description="User-visible error message",
        examples=["Authentication failed"],
    )
    generation: int = Field(..., description="Refresh that produced the snapshot")
    updated_at: Optional[datetime] = Field(None, description="Last refresh end")
    current_price: float = Field(..., description="USDC price in USD")
    network_metrics: List[NetworkMetricsResponse] = Field(default_factory=list)
    large_transfers: List[TransferResponse] = Field(default_factory=list)
    historical_supply: List[HistoricalPointResponse] = Field(default_factory=list)
    historical_wallet_count: List[HistoricalPointResponse] = Field(
        default_factory=list
    )
    mint_burn: List[MintBurnPointResponse] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: DashboardSnapshot) -> "DashboardResponse":
        return cls(
            status=snapshot.status.value,
            is_loading=snapshot.is_loading,
            error=snapshot.error_message,
            generation=snapshot.generation,
            updated_at=snapshot.updated_at,
            current_price=snapshot.current_price,
            network_metrics=[
                NetworkMetricsResponse.from_entity(m) for m in snapshot.network_metrics
            ],
            large_transfers=[
                TransferResponse.from_entity(t) for t in snapshot.large_transfers
            ],
            historical_supply=[
                HistoricalPointResponse.from_entity(p)
                for p in snapshot.historical_supply
            ],
            historical_wallet_count=[
                HistoricalPointResponse.from_entity(p)
                for p in snapshot.historical_wallet_count
            ],
            mint_burn=[MintBurnPointResponse.from_entity(p) for p in snapshot.mint_burn],
        )


class PegResponse(BaseModel):
    """Peg stability of USDC."""

    price: float = Field(..., description="Observed price", examples=[0.9993])
    deviation_pct: float = Field(
        ..., description="Absolute deviation from $1.00 in percent", examples=[0.07]
    )
    status: str = Field(
        ...,
        description="Stable, Slight Deviation or Unstable",
        examples=["Stable"],
    )


class NetworkShareResponse(BaseModel):
    """Share of total supply held on one network."""

    network: str = Field(..., description="Network name")
    supply: float = Field(..., description="Supply on the network")
    share_pct: float = Field(..., description="Share of the total in percent")


class DashboardSummaryResponse(BaseModel):
    """Response schema for the headline dashboard figures."""

    total_supply: float = Field(..., description="Supply summed over networks")
    total_holders: int = Field(..., description="Holders summed over networks")
    supply_change_pct: float = Field(
        ..., description="Change between the last two supply points"
    )
    holder_change_pct: float = Field(
        ..., description="Change between the last two wallet-count points"
    )
    price_deviation_pct: float = Field(
        ..., description="Signed deviation of price from $1.00 in percent"
    )
    peg: PegResponse
    distribution: List[NetworkShareResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "DashboardSummaryResponse":
        return cls(
            total_supply=summary.total_supply,
            total_holders=summary.total_holders,
            supply_change_pct=summary.supply_change_pct,
            holder_change_pct=summary.holder_change_pct,
            price_deviation_pct=summary.price_deviation_pct,
            peg=PegResponse(
                price=summary.peg.price,
                deviation_pct=summary.peg.deviation_pct,
                status=summary.peg.status.value,
            ),
            distribution=[
                NetworkShareResponse(
                    network=share.network.value,
                    supply=share.supply,
                    share_pct=share.share_pct,
                )
                for share in summary.distribution
            ],
        )
