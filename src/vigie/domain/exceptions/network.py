"""
Network-related exceptions.

Raised when a network name falls outside the supported set or when an
upstream payload lacks the expected USDC entry.
"""

from vigie.domain.exceptions.base import VigieException


class UnknownNetworkError(VigieException):
    """Raised when a network name is not one of the supported networks."""

    def __init__(self, network: str):
        """
        Initialize unknown network error.

        Args:
            network: Network name that was requested
        """
        super().__init__(f"Unknown network: {network}", code="UNKNOWN_NETWORK")
        self.network = network


class NoMatchingTokenError(VigieException):
    """Raised when a balance or transfer list has no USDC entry."""

    def __init__(self, network: str, contract_address: str):
        """
        Initialize no matching token error.

        Args:
            network: Network that was queried
            contract_address: USDC contract address that was expected
        """
        super().__init__(
            f"No USDC entry ({contract_address}) in {network} response",
            code="NO_MATCHING_TOKEN",
        )
        self.network = network
        self.contract_address = contract_address
