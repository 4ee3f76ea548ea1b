"""
Get Current Price use case.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from vigie.domain.entities.network_metrics import DEFAULT_USDC_PRICE
from vigie.domain.exceptions.upstream import UpstreamError
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import (
    NETWORK_CONFIGS,
    Network,
    NetworkConfig,
    get_network_config,
)
from vigie.infrastructure.monitoring.logger import get_logger
from vigie.infrastructure.monitoring.metrics import usdc_price

logger = get_logger(__name__)


@dataclass(frozen=True)
class PriceLookup:
    """USDC price and the upstream error that forced the default, if any."""

    price: float = DEFAULT_USDC_PRICE
    error: Optional[Exception] = None


class GetCurrentPrice:
    """
    Get the USDC price reported by the token API.

    Falls back to 1.0 when the request fails or no price is reported.
    """

    def __init__(
        self,
        token_api: ITokenApi,
        network_configs: Optional[Mapping[Network, NetworkConfig]] = None,
        network: Union[str, Network] = Network.ETHEREUM,
    ):
        self.token_api = token_api
        self.network_configs = network_configs or NETWORK_CONFIGS
        self.network = network

    async def fetch(self, network: Union[str, Network, None] = None) -> PriceLookup:
        config = get_network_config(network or self.network, self.network_configs)

        try:
            balances = await self.token_api.get_balances(
                config.representative_wallet, config.network_id
            )
        except UpstreamError as e:
            logger.warning(f"Price fetch failed on {config.network.value}: {e}")
            return PriceLookup(DEFAULT_USDC_PRICE, e)

        usdc = next(
            (b for b in balances if config.matches_contract(b.contract)), None
        )
        price = DEFAULT_USDC_PRICE
        if usdc is not None and usdc.price_usd is not None:
            price = usdc.price_usd

        usdc_price.set(price)
        return PriceLookup(price)

    async def execute(self, network: Union[str, Network, None] = None) -> float:
        return (await self.fetch(network)).price
