"""
DashboardSummary entity - headline figures derived from a snapshot.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from vigie.domain.entities.dashboard import DashboardSnapshot
from vigie.domain.entities.historical import HistoricalPoint
from vigie.domain.value_objects.network import Network
from vigie.domain.value_objects.peg_stability import (
    PEG_TARGET,
    PegStability,
    assess_peg,
)


@dataclass(frozen=True)
class NetworkShare:
    """Share of total supply held on one network."""

    network: Network
    supply: float
    share_pct: float


@dataclass(frozen=True)
class DashboardSummary:
    """
    Headline dashboard figures.

    Attributes:
        total_supply: Supply summed over reporting networks
        total_holders: Holder count summed over reporting networks
        supply_change_pct: Change between the last two supply points
        holder_change_pct: Change between the last two wallet-count points
        price_deviation_pct: Signed deviation of price from $1.00
        peg: Peg stability assessment
        distribution: Per-network share of total supply
    """

    total_supply: float
    total_holders: int
    supply_change_pct: float
    holder_change_pct: float
    price_deviation_pct: float
    peg: PegStability
    distribution: List[NetworkShare] = field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: DashboardSnapshot) -> "DashboardSummary":
        """Derive the summary from a dashboard snapshot."""
        metrics = snapshot.network_metrics
        total_supply = sum(m.total_supply for m in metrics)
        total_holders = sum(m.holder_count for m in metrics)

        distribution = [
            NetworkShare(
                network=m.network,
                supply=m.total_supply,
                share_pct=(m.total_supply / total_supply * 100)
                if total_supply
                else 0.0,
            )
            for m in metrics
        ]

        return cls(
            total_supply=total_supply,
            total_holders=total_holders,
            supply_change_pct=_last_change_pct(snapshot.historical_supply),
            holder_change_pct=_last_change_pct(snapshot.historical_wallet_count),
            price_deviation_pct=(snapshot.current_price - PEG_TARGET)
            / PEG_TARGET
            * 100,
            peg=assess_peg(snapshot.current_price),
            distribution=distribution,
        )


def _last_change_pct(series: Sequence[HistoricalPoint]) -> float:
    if len(series) < 2:
        return 0.0
    previous = series[-2].value
    if not previous:
        return 0.0
    return (series[-1].value - previous) / previous * 100


def summarize_dashboard(snapshot: DashboardSnapshot) -> DashboardSummary:
    return DashboardSummary.from_snapshot(snapshot)
