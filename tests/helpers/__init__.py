"""
Test helpers: an in-memory token API and payload builders.
"""

import asyncio
from typing import Dict, List, Optional

from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import NETWORK_CONFIGS, Network
from vigie.domain.value_objects.token_balance import TokenBalance, TokenTransfer


def usdc_balance(
    network: Network,
    amount: str,
    decimals: Optional[int] = 6,
    price_usd: Optional[float] = None,
    value_usd: Optional[float] = None,
) -> TokenBalance:
    """USDC balance entry as the token API client would return it."""
    config = NETWORK_CONFIGS[network]
    return TokenBalance(
        contract=config.contract_address.upper().replace("0X", "0x"),
        amount=amount,
        decimals=decimals,
        symbol="USDC",
        name="USD Coin",
        price_usd=price_usd,
        value_usd=value_usd,
        network_id=config.network_id,
    )


def other_balance(network: Network, amount: str = "1000000000000000000") -> TokenBalance:
    """Non-USDC balance entry."""
    return TokenBalance(
        contract="0x6b175474e89094c44da98b954eedeac495271d0f",
        amount=amount,
        decimals=18,
        symbol="DAI",
        network_id=NETWORK_CONFIGS[network].network_id,
    )


def usdc_transfer(
    network: Network,
    amount: str,
    tx: str,
    decimals: Optional[int] = 6,
    symbol: str = "USDC",
) -> TokenTransfer:
    """USDC transfer entry."""
    return TokenTransfer(
        contract=NETWORK_CONFIGS[network].contract_address,
        symbol=symbol,
        decimals=decimals,
        amount=amount,
        from_address="0x1111111111111111111111111111111111111111",
        to_address="0x2222222222222222222222222222222222222222",
        timestamp="2024-05-01 12:00:00",
        transaction_id=tx,
    )


class FakeTokenApi(ITokenApi):
    """
    In-memory token API keyed by network id.

    Entries of `balance_errors` / `transfer_errors` are raised instead of
    returning data. Every call is recorded.
    """

    def __init__(
        self,
        balances: Optional[Dict[str, List[TokenBalance]]] = None,
        transfers: Optional[Dict[str, List[TokenTransfer]]] = None,
        balance_errors: Optional[Dict[str, Exception]] = None,
        transfer_errors: Optional[Dict[str, Exception]] = None,
    ):
        self.balances = balances or {}
        self.transfers = transfers or {}
        self.balance_errors = balance_errors or {}
        self.transfer_errors = transfer_errors or {}
        self.balance_calls: List[tuple] = []
        self.transfer_calls: List[tuple] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.balance_calls) + len(self.transfer_calls)

    async def get_balances(self, address: str, network_id: str) -> List[TokenBalance]:
        self.balance_calls.append((address, network_id))
        await asyncio.sleep(0)
        if network_id in self.balance_errors:
            raise self.balance_errors[network_id]
        return list(self.balances.get(network_id, []))

    async def get_transfers(
        self,
        address: str,
        network_id: str,
        limit: int = 10,
    ) -> List[TokenTransfer]:
        self.transfer_calls.append((address, network_id, limit))
        await asyncio.sleep(0)
        if network_id in self.transfer_errors:
            raise self.transfer_errors[network_id]
        return list(self.transfers.get(network_id, []))

    async def close(self) -> None:
        self.closed = True


def failing_everywhere(error: Exception) -> FakeTokenApi:
    """Token API where every call raises `error`."""
    network_ids = [config.network_id for config in NETWORK_CONFIGS.values()]
    return FakeTokenApi(
        balance_errors={nid: error for nid in network_ids},
        transfer_errors={nid: error for nid in network_ids},
    )
