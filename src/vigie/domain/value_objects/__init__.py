"""
Domain value objects for Vigie.
"""

from vigie.domain.value_objects.network import (
    DEFAULT_REPRESENTATIVE_WALLET,
    NETWORK_CONFIGS,
    Network,
    NetworkConfig,
    build_network_configs,
    get_network_config,
    parse_network,
)
from vigie.domain.value_objects.peg_stability import (
    PegStability,
    PegStatus,
    assess_peg,
)
from vigie.domain.value_objects.token_balance import (
    TokenBalance,
    TokenTransfer,
    normalize_amount,
)

__all__ = [
    "DEFAULT_REPRESENTATIVE_WALLET",
    "NETWORK_CONFIGS",
    "Network",
    "NetworkConfig",
    "build_network_configs",
    "get_network_config",
    "parse_network",
    "PegStability",
    "PegStatus",
    "assess_peg",
    "TokenBalance",
    "TokenTransfer",
    "normalize_amount",
]
