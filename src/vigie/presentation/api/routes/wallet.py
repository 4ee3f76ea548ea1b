"""
Wallet API routes.

Provides endpoints for wallet operations:
- GET /wallet/{address}/balances - USDC balance on every network
"""

from fastapi import APIRouter, Depends, status

from vigie.application.state.dashboard_state import is_api_key_configured
from vigie.application.use_cases.lookup_wallet_balances import (
    LookupWalletBalances,
    validate_address,
)
from vigie.config.settings import Settings
from vigie.di.dependencies import get_app_settings, get_lookup_wallet_balances
from vigie.domain.exceptions import MissingCredentialError
from vigie.presentation.schemas.wallet_schemas import WalletBalancesResponse

router = APIRouter(prefix="/wallet", tags=["Wallet"])


@router.get(
    "/{address}/balances",
    response_model=WalletBalancesResponse,
    status_code=status.HTTP_200_OK,
    summary="Get wallet balances",
    description="USDC balance of an address on every supported network",
)
async def get_wallet_balances(
    address: str,
    use_case: LookupWalletBalances = Depends(get_lookup_wallet_balances),
    settings: Settings = Depends(get_app_settings),
) -> WalletBalancesResponse:
    """
    Get wallet USDC balances.

    Args:
        address: EVM address (0x + 40 hex digits)
        use_case: LookupWalletBalances use case (injected)
        settings: Application settings (injected)

    Returns:
        Per-network balances; networks that failed are marked unavailable

    Raises:
        ValidationError: 422 if the address is malformed
        MissingCredentialError: 503 when no API key is configured
    """
    address = validate_address(address)
    if not is_api_key_configured(settings.TOKEN_API_KEY):
        raise MissingCredentialError()

    balances = await use_case.execute(address)
    return WalletBalancesResponse.from_lookup(address, balances)
