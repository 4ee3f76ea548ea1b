"""
API schemas for wallet operations.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from vigie.domain.value_objects.network import Network
from vigie.domain.value_objects.token_balance import TokenBalance


class WalletNetworkBalance(BaseModel):
    """USDC balance of a wallet on one network."""

    network: str = Field(..., description="Network name")
    available: bool = Field(..., description="False when no USDC entry was found")
    amount: str = Field("0", description="Raw amount (smallest unit)")
    decimals: int = Field(6, description="Token decimals")
    balance: float = Field(0.0, description="Balance in human units", examples=[125.5])
    value_usd: Optional[float] = Field(None, description="USD value when reported")


class WalletBalancesResponse(BaseModel):
    """Response schema for a multi-network wallet lookup."""

    address: str = Field(
        ...,
        description="Wallet address (lowercased)",
        examples=["0x2a0c0dbecc7e4d658f48e01e3fa353f44050c208"],
    )
    total_balance: float = Field(..., description="USDC summed over networks")
    balances: List[WalletNetworkBalance] = Field(default_factory=list)

    @classmethod
    def from_lookup(
        cls,
        address: str,
        lookup: Dict[Network, Optional[TokenBalance]],
    ) -> "WalletBalancesResponse":
        entries = []
        for network, balance in lookup.items():
            if balance is None:
                entries.append(WalletNetworkBalance(network=network.value, available=False))
                continue
            try:
                human = balance.human_amount
            except ValueError:
                human = 0.0
            entries.append(
                WalletNetworkBalance(
                    network=network.value,
                    available=True,
                    amount=balance.amount,
                    decimals=balance.effective_decimals,
                    balance=human,
                    value_usd=balance.value_usd,
                )
            )
        return cls(
            address=address.lower(),
            total_balance=sum(e.balance for e in entries),
            balances=entries,
        )
