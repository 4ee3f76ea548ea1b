"""
Lookup Wallet Balances use case.
"""

import asyncio
import re
from typing import Dict, Mapping, Optional

from vigie.domain.exceptions.base import ValidationError
from vigie.domain.exceptions.upstream import UpstreamError
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import (
    NETWORK_CONFIGS,
    Network,
    NetworkConfig,
)
from vigie.domain.value_objects.token_balance import TokenBalance
from vigie.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def validate_address(address: str) -> str:
    """
    Validate an EVM address.

    Returns:
        Address lowercased

    Raises:
        ValidationError: If address is not 0x followed by 40 hex digits
    """
    address = (address or "").strip()
    if not ADDRESS_PATTERN.match(address):
        raise ValidationError("address", "Please enter a valid Ethereum address")
    return address.lower()


class LookupWalletBalances:
    """
    Get the USDC balance of any address on every network.

    Networks that fail or hold no USDC map to None.
    """

    def __init__(
        self,
        token_api: ITokenApi,
        network_configs: Optional[Mapping[Network, NetworkConfig]] = None,
    ):
        self.token_api = token_api
        self.network_configs = network_configs or NETWORK_CONFIGS

    async def execute(self, address: str) -> Dict[Network, Optional[TokenBalance]]:
        """
        Look up USDC balances of an address.

        Args:
            address: EVM wallet address

        Returns:
            USDC balance per network (None when unavailable)

        Raises:
            ValidationError: If address is malformed
        """
        address = validate_address(address)
        configs = list(self.network_configs.values())

        balances = await asyncio.gather(
            *(self._usdc_balance(address, config) for config in configs)
        )
        return {config.network: balance for config, balance in zip(configs, balances)}

    async def _usdc_balance(
        self,
        address: str,
        config: NetworkConfig,
    ) -> Optional[TokenBalance]:
        try:
            balances = await self.token_api.get_balances(address, config.network_id)
        except UpstreamError as e:
            logger.warning(
                f"Wallet lookup failed on {config.network.value}: {e}",
                extra={"address": address},
            )
            return None
        return next((b for b in balances if config.matches_contract(b.contract)), None)
