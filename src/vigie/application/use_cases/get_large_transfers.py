"""
Get Large Transfers use case.

Finds recent USDC transfers of a representative wallet, trying networks
in priority order.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from vigie.domain.entities.transfer_record import TransferRecord
from vigie.domain.exceptions.upstream import UpstreamError
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.network import (
    NETWORK_CONFIGS,
    Network,
    NetworkConfig,
)
from vigie.domain.value_objects.token_balance import (
    USDC_SYMBOL,
    TokenTransfer,
    normalize_amount,
)
from vigie.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TRANSFER_PRIORITY = (
    Network.ETHEREUM,
    Network.BASE,
    Network.ARBITRUM,
    Network.OPTIMISM,
    Network.POLYGON,
)


@dataclass
class TransferLookup:
    """
    Result of a transfer lookup.

    Attributes:
        transfers: USDC transfers, largest first
        network: Network that answered, None when none did
        errors: Upstream errors met on the networks tried before it
    """

    transfers: List[TransferRecord] = field(default_factory=list)
    network: Optional[Network] = None
    errors: List[Exception] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True when no network answered and at least one errored."""
        return self.network is None and bool(self.errors)


class GetLargeTransfers:
    """
    Get large USDC transfers.

    Business rules:
    - Networks are tried in priority order, upstream errors skip ahead
    - The first network returning a nonempty list wins, even when none
      of its transfers are USDC
    - Only transfers of the network's USDC contract with symbol USDC are kept
    - Result is sorted by amount descending and truncated to limit
    """

    def __init__(
        self,
        token_api: ITokenApi,
        network_configs: Optional[Mapping[Network, NetworkConfig]] = None,
        priority: Optional[Sequence[Network]] = None,
    ):
        self.token_api = token_api
        self.network_configs = network_configs or NETWORK_CONFIGS
        self.priority = list(priority) if priority else list(DEFAULT_TRANSFER_PRIORITY)

    async def fetch(self, limit: int = 10) -> TransferLookup:
        """
        Look up transfers across networks.

        Args:
            limit: Maximum number of transfers to return

        Returns:
            TransferLookup with the transfers and the answering network
        """
        errors: List[Exception] = []
        if limit <= 0:
            return TransferLookup()

        for network in self.priority:
            config = self.network_configs[network]
            try:
                raw = await self.token_api.get_transfers(
                    config.representative_wallet, config.network_id, limit
                )
            except UpstreamError as e:
                logger.warning(f"Transfer fetch failed for {network.value}: {e}")
                errors.append(e)
                continue

            if not raw:
                continue

            records = self._to_records(raw, config)
            records.sort(key=lambda r: r.amount, reverse=True)
            logger.info(
                f"Found {len(records)} USDC transfers on {network.value}",
                extra={"network": network.value},
            )
            return TransferLookup(records[:limit], network, errors)

        return TransferLookup([], None, errors)

    async def execute(self, limit: int = 10) -> List[TransferRecord]:
        """Get large transfers, empty when no network answered."""
        return (await self.fetch(limit)).transfers

    @staticmethod
    def _to_records(
        transfers: Sequence[TokenTransfer],
        config: NetworkConfig,
    ) -> List[TransferRecord]:
        records = []
        for transfer in transfers:
            if transfer.symbol != USDC_SYMBOL:
                continue
            if not config.matches_contract(transfer.contract):
                continue

            try:
                amount = normalize_amount(transfer.amount, transfer.effective_decimals)
            except ValueError as e:
                logger.warning(f"Skipping transfer {transfer.transaction_id}: {e}")
                continue

            records.append(
                TransferRecord(
                    from_address=transfer.from_address,
                    to_address=transfer.to_address,
                    amount=amount,
                    timestamp=transfer.timestamp,
                    transaction_id=transfer.transaction_id,
                    network=config.network,
                )
            )
        return records
