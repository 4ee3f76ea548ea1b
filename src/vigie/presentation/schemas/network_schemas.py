"""
API schemas for network operations.
"""

from typing import Optional

from pydantic import BaseModel, Field

from vigie.domain.entities.network_metrics import MetricsResult
from vigie.domain.value_objects.network import NetworkConfig
from vigie.presentation.schemas.dashboard_schemas import NetworkMetricsResponse


class NetworkResponse(BaseModel):
    """One supported network."""

    network: str = Field(..., description="Network name", examples=["polygon"])
    contract_address: str = Field(
        ...,
        description="USDC contract address",
        examples=["0x2791bca1f2de4661ed88a30c99a7a9449aa84174"],
    )
    network_id: str = Field(
        ..., description="Token API network id", examples=["matic"]
    )
    representative_wallet: str = Field(
        ..., description="Wallet whose USDC balance is measured"
    )

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "NetworkResponse":
        return cls(
            network=config.network.value,
            contract_address=config.contract_address,
            network_id=config.network_id,
            representative_wallet=config.representative_wallet,
        )


class NetworkMetricsLookupResponse(BaseModel):
    """
    Response schema for a single-network measurement.

    Unmeasurable networks return zeroed metrics with available=False.
    """

    metrics: NetworkMetricsResponse
    available: bool = Field(..., description="False when metrics are placeholders")
    failure_reason: Optional[str] = Field(
        None,
        description="upstream_error, no_matching_token or invalid_payload",
    )

    @classmethod
    def from_result(cls, result: MetricsResult) -> "NetworkMetricsLookupResponse":
        return cls(
            metrics=NetworkMetricsResponse.from_entity(result.unwrap_or_placeholder()),
            available=result.ok,
            failure_reason=result.reason.value if result.reason else None,
        )
