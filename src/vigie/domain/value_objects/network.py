"""
Network value objects - the closed set of supported chains.

Each network maps to the USDC contract deployed on it, the network id the
token API expects, and a wallet known to hold USDC there. The token API
only exposes per-address balances, so that wallet stands in for an
on-chain supply query.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from vigie.domain.exceptions.network import UnknownNetworkError

DEFAULT_REPRESENTATIVE_WALLET = "0x2a0c0dbecc7e4d658f48e01e3fa353f44050c208"


class Network(str, Enum):
    """Supported blockchain networks."""

    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    BASE = "base"


@dataclass(frozen=True)
class NetworkConfig:
    """
    Static configuration for one network.

    Attributes:
        network: Network identifier
        contract_address: USDC contract address (lowercase hex)
        network_id: Network id used in token API calls
        representative_wallet: Wallet sampled for balances and transfers
    """

    network: Network
    contract_address: str
    network_id: str
    representative_wallet: str = DEFAULT_REPRESENTATIVE_WALLET

    def matches_contract(self, contract: Optional[str]) -> bool:
        """Check whether a contract address is this network's USDC."""
        return (contract or "").lower() == self.contract_address.lower()


NETWORK_CONFIGS: Dict[Network, NetworkConfig] = {
    Network.ETHEREUM: NetworkConfig(
        network=Network.ETHEREUM,
        contract_address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        network_id="mainnet",
    ),
    Network.POLYGON: NetworkConfig(
        network=Network.POLYGON,
        contract_address="0x2791bca1f2de4661ed88a30c99a7a9449aa84174",
        network_id="matic",
    ),
    Network.ARBITRUM: NetworkConfig(
        network=Network.ARBITRUM,
        contract_address="0xff970a61a04b1ca14834a43f5de4533ebddb5cc8",
        network_id="arbitrum-one",
    ),
    Network.OPTIMISM: NetworkConfig(
        network=Network.OPTIMISM,
        contract_address="0x7f5c764cbc14f9669b88837ca1490cca17c31607",
        network_id="optimism",
    ),
    Network.BASE: NetworkConfig(
        network=Network.BASE,
        contract_address="0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
        network_id="base",
    ),
}


def parse_network(name: Union[str, Network]) -> Network:
    """
    Resolve a network name to a Network.

    Args:
        name: Network name (case-insensitive) or Network

    Returns:
        Matching Network

    Raises:
        UnknownNetworkError: If name is not a supported network
    """
    if isinstance(name, Network):
        return name
    try:
        return Network((name or "").strip().lower())
    except ValueError:
        raise UnknownNetworkError(str(name))


def get_network_config(
    name: Union[str, Network],
    configs: Optional[Mapping[Network, NetworkConfig]] = None,
) -> NetworkConfig:
    """
    Look up the configuration for a network.

    Raises:
        UnknownNetworkError: If name is not a supported network
    """
    network = parse_network(name)
    table = configs if configs is not None else NETWORK_CONFIGS
    try:
        return table[network]
    except KeyError:
        raise UnknownNetworkError(network.value)


def build_network_configs(
    wallet_overrides: Optional[Mapping[str, str]] = None,
) -> Dict[Network, NetworkConfig]:
    """
    Build the network table with per-network representative wallets.

    Args:
        wallet_overrides: Network name -> wallet address

    Raises:
        UnknownNetworkError: If an override names an unsupported network
    """
    configs = dict(NETWORK_CONFIGS)
    for name, wallet in (wallet_overrides or {}).items():
        network = parse_network(name)
        configs[network] = replace(
            configs[network], representative_wallet=wallet.lower()
        )
    return configs
