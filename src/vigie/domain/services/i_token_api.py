"""
Token API interface.

Defines read operations against the third-party token-data API.
"""

from abc import ABC, abstractmethod
from typing import List

from vigie.domain.value_objects.token_balance import TokenBalance, TokenTransfer


class ITokenApi(ABC):
    """
    Abstract interface for the token-data API.

    Only per-address queries exist upstream: there is no global supply,
    holder count or historical endpoint.
    """

    @abstractmethod
    async def get_balances(self, address: str, network_id: str) -> List[TokenBalance]:
        """
        Get token balances held by an address.

        Args:
            address: EVM wallet address
            network_id: Token API network id (e.g. "mainnet")

        Returns:
            Balances reported for the address

        Raises:
            UpstreamHttpError: If the API answers with a non-success status
            UpstreamConnectionError: If the API cannot be reached
            InvalidResponseError: If the payload has an unexpected shape
        """

    @abstractmethod
    async def get_transfers(
        self,
        address: str,
        network_id: str,
        limit: int = 10,
    ) -> List[TokenTransfer]:
        """
        Get recent token transfers involving an address.

        Args:
            address: EVM wallet address
            network_id: Token API network id
            limit: Maximum number of transfers to return

        Returns:
            Transfers reported for the address

        Raises:
            UpstreamHttpError: If the API answers with a non-success status
            UpstreamConnectionError: If the API cannot be reached
            InvalidResponseError: If the payload has an unexpected shape
        """

    @abstractmethod
    async def close(self) -> None:
        """Release HTTP resources."""
