"""
Historical series entities.

The token API has no historical endpoint. Series are either empty or
synthesized from a single current value; synthesized points carry
synthetic=True so they are never mistaken for measurements.
"""

from dataclasses import dataclass
from enum import Enum


class HistoricalMode(str, Enum):
    """Deployment-wide policy for unavailable history."""

    EMPTY = "empty"
    SYNTHETIC = "synthetic"


@dataclass(frozen=True)
class HistoricalPoint:
    """One dated value of a supply or wallet-count series."""

    date: str
    value: float
    synthetic: bool = False


@dataclass(frozen=True)
class MintBurnPoint:
    """Minted and burned USDC for one day."""

    date: str
    minted: float
    burned: float
    synthetic: bool = False

    @property
    def net(self) -> float:
        return self.minted - self.burned
