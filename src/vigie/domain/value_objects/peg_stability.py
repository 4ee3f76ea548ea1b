"""
PegStability value object - how far USDC trades from its $1.00 target.
"""

from dataclasses import dataclass
from enum import Enum

PEG_TARGET = 1.0
STABLE_THRESHOLD_PCT = 0.1
UNSTABLE_THRESHOLD_PCT = 0.5


class PegStatus(str, Enum):
    """Peg health buckets."""

    STABLE = "Stable"
    SLIGHT_DEVIATION = "Slight Deviation"
    UNSTABLE = "Unstable"


@dataclass(frozen=True)
class PegStability:
    """
    Observed price relative to the peg.

    Business rules:
    - Deviation up to 0.1% is stable
    - Deviation up to 0.5% is a slight deviation
    - Anything beyond is unstable
    """

    price: float
    deviation_pct: float
    status: PegStatus


def assess_peg(price: float) -> PegStability:
    """Classify a price against the $1.00 peg."""
    deviation_pct = abs(price - PEG_TARGET) / PEG_TARGET * 100
    if deviation_pct > UNSTABLE_THRESHOLD_PCT:
        status = PegStatus.UNSTABLE
    elif deviation_pct > STABLE_THRESHOLD_PCT:
        status = PegStatus.SLIGHT_DEVIATION
    else:
        status = PegStatus.STABLE
    return PegStability(price=price, deviation_pct=deviation_pct, status=status)
