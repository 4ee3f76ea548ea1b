"""
TransferRecord entity - a normalized USDC transfer.
"""

from dataclasses import dataclass

from vigie.domain.value_objects.network import Network


@dataclass(frozen=True)
class TransferRecord:
    """
    USDC transfer with the amount in human units.

    Attributes:
        from_address: Sender
        to_address: Recipient
        amount: Transferred USDC (human units)
        timestamp: Transfer time as reported by the API
        transaction_id: Transaction hash
        network: Network the transfer happened on
    """

    from_address: str
    to_address: str
    amount: float
    timestamp: str
    transaction_id: str
    network: Network
