"""
Token balance and transfer value objects as reported by the token API.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

USDC_SYMBOL = "USDC"
USDC_DECIMALS = 6


def normalize_amount(raw_amount: Union[str, int, Decimal], decimals: int) -> float:
    """
    Convert a raw token amount (smallest unit) to human units.

    Args:
        raw_amount: Decimal string or integer in the token's smallest unit
        decimals: Token decimal count

    Returns:
        raw_amount / 10**decimals as float

    Raises:
        ValueError: If the amount cannot be parsed or decimals is negative
    """
    if decimals < 0:
        raise ValueError(f"Invalid decimals: {decimals}")
    try:
        amount = Decimal(str(raw_amount).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid token amount: {raw_amount!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid token amount: {raw_amount!r}")
    return float(amount.scaleb(-decimals))


@dataclass(frozen=True)
class TokenBalance:
    """
    Holdings of one token by one address on one network.

    Attributes:
        contract: Token contract address
        amount: Raw amount as decimal string (smallest unit)
        decimals: Token decimal count, None when not reported
        symbol: Token symbol
        name: Token name
        price_usd: USD price when the API provides it
        value_usd: USD value of the holding when the API provides it
        network_id: Token API network id
    """

    contract: str
    amount: str
    decimals: Optional[int]
    symbol: str = ""
    name: str = ""
    price_usd: Optional[float] = None
    value_usd: Optional[float] = None
    network_id: str = ""

    @property
    def effective_decimals(self) -> int:
        """Reported decimals, USDC's 6 when the API omits them."""
        return self.decimals if self.decimals is not None else USDC_DECIMALS

    @property
    def human_amount(self) -> float:
        """Amount in human units."""
        return normalize_amount(self.amount, self.effective_decimals)


@dataclass(frozen=True)
class TokenTransfer:
    """
    One token transfer as reported by the token API.

    Attributes:
        contract: Token contract address
        symbol: Token symbol
        decimals: Token decimal count, None when not reported
        amount: Raw amount as decimal string (smallest unit)
        from_address: Sender
        to_address: Recipient
        timestamp: Transfer time as reported (ISO string or epoch)
        transaction_id: Transaction hash
    """

    contract: str
    symbol: str
    decimals: Optional[int]
    amount: str
    from_address: str
    to_address: str
    timestamp: str
    transaction_id: str

    @property
    def effective_decimals(self) -> int:
        """Reported decimals, USDC's 6 when the API omits them."""
        return self.decimals if self.decimals is not None else USDC_DECIMALS
