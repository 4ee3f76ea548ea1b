"""
Get Historical Series use case.

The token API exposes no history. Depending on the deployment mode the
series are either empty or synthesized around a current value, with
every synthesized point flagged.
"""

import math
from datetime import date, timedelta
from typing import Callable, List, Optional, Union

from vigie.domain.entities.historical import (
    HistoricalMode,
    HistoricalPoint,
    MintBurnPoint,
)

DEFAULT_AMPLITUDE = 0.02
DEFAULT_PERIOD = 5.0
DEFAULT_WALLET_COUNT_BASE = 500_000
DEFAULT_MINT_BASE = 100_000_000.0
DEFAULT_BURN_BASE = 90_000_000.0


class GetHistoricalSeries:
    """
    Build supply, wallet-count and mint/burn series.

    In synthetic mode point i (0 = oldest) is
    base * (1 + amplitude * sin(i / period)); burns use cos. Dates end
    today and are ordered oldest first.
    """

    def __init__(
        self,
        mode: Union[str, HistoricalMode] = HistoricalMode.EMPTY,
        amplitude: float = DEFAULT_AMPLITUDE,
        period: float = DEFAULT_PERIOD,
        wallet_count_base: int = DEFAULT_WALLET_COUNT_BASE,
        mint_base: float = DEFAULT_MINT_BASE,
        burn_base: float = DEFAULT_BURN_BASE,
        today: Optional[Callable[[], date]] = None,
    ):
        if period <= 0:
            raise ValueError(f"Synthetic period must be positive: {period}")
        self.mode = HistoricalMode(mode)
        self.amplitude = amplitude
        self.period = period
        self.wallet_count_base = wallet_count_base
        self.mint_base = mint_base
        self.burn_base = burn_base
        self._today = today or date.today

    @property
    def synthetic(self) -> bool:
        return self.mode == HistoricalMode.SYNTHETIC

    def supply(self, current_supply: float, days: int = 30) -> List[HistoricalPoint]:
        """Daily supply series; empty when there is no current supply."""
        if not self.synthetic or current_supply <= 0:
            return []
        return [
            HistoricalPoint(day, self._wave(current_supply, i, math.sin), True)
            for i, day in enumerate(self._dates(days))
        ]

    def wallet_count(
        self,
        current_count: Optional[int] = None,
        days: int = 30,
    ) -> List[HistoricalPoint]:
        """Daily wallet-count series around current_count or the configured base."""
        if not self.synthetic:
            return []
        base = current_count if current_count else self.wallet_count_base
        return [
            HistoricalPoint(day, float(round(self._wave(base, i, math.sin))), True)
            for i, day in enumerate(self._dates(days))
        ]

    def mint_burn(self, days: int = 7) -> List[MintBurnPoint]:
        """Daily minted and burned volumes."""
        if not self.synthetic:
            return []
        return [
            MintBurnPoint(
                date=day,
                minted=self._wave(self.mint_base, i, math.sin),
                burned=self._wave(self.burn_base, i, math.cos),
                synthetic=True,
            )
            for i, day in enumerate(self._dates(days))
        ]

    def _wave(self, base: float, i: int, fn: Callable[[float], float]) -> float:
        return base * (1 + self.amplitude * fn(i / self.period))

    def _dates(self, days: int) -> List[str]:
        if days <= 0:
            return []
        today = self._today()
        return [
            (today - timedelta(days=days - 1 - i)).isoformat() for i in range(days)
        ]
