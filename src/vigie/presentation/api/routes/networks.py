"""
Network API routes.

Provides endpoints for supported networks:
- GET /networks - Network table
- GET /networks/{network}/metrics - Live metrics for one network
"""

from typing import List

from fastapi import APIRouter, Depends, status

from vigie.application.state.dashboard_state import is_api_key_configured
from vigie.application.use_cases.get_network_metrics import GetNetworkMetrics
from vigie.config.settings import Settings
from vigie.di.dependencies import get_app_settings, get_network_metrics_use_case
from vigie.domain.exceptions import MissingCredentialError
from vigie.domain.value_objects.network import parse_network
from vigie.presentation.schemas.network_schemas import (
    NetworkMetricsLookupResponse,
    NetworkResponse,
)

router = APIRouter(prefix="/networks", tags=["Networks"])


@router.get(
    "",
    response_model=List[NetworkResponse],
    status_code=status.HTTP_200_OK,
    summary="List networks",
    description="Supported networks with their USDC contracts",
)
async def list_networks(
    use_case: GetNetworkMetrics = Depends(get_network_metrics_use_case),
) -> List[NetworkResponse]:
    return [
        NetworkResponse.from_config(config)
        for config in use_case.network_configs.values()
    ]


@router.get(
    "/{network}/metrics",
    response_model=NetworkMetricsLookupResponse,
    status_code=status.HTTP_200_OK,
    summary="Get network metrics",
    description="Measure USDC on one network now",
)
async def get_network_metrics(
    network: str,
    use_case: GetNetworkMetrics = Depends(get_network_metrics_use_case),
    settings: Settings = Depends(get_app_settings),
) -> NetworkMetricsLookupResponse:
    """
    Get live metrics for one network.

    Raises:
        UnknownNetworkError: 404 for names outside the supported set
        MissingCredentialError: 503 when no API key is configured
    """
    parsed = parse_network(network)
    if not is_api_key_configured(settings.TOKEN_API_KEY):
        raise MissingCredentialError()

    result = await use_case.fetch(parsed)
    return NetworkMetricsLookupResponse.from_result(result)
