"""
Token API client implementation.

HTTP client for The Graph Token API (balances and transfers of EVM
addresses) with lazy client lifecycle, classified retry and metrics.
"""

import asyncio
import time
from dataclasses import replace
from typing import Any, Dict, List, Optional

import httpx

from vigie.domain.exceptions.upstream import (
    InvalidResponseError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamHttpError,
)
from vigie.domain.services.i_token_api import ITokenApi
from vigie.domain.value_objects.token_balance import TokenBalance, TokenTransfer
from vigie.infrastructure.monitoring.logger import get_logger
from vigie.infrastructure.monitoring.metrics import (
    token_api_request_duration_seconds,
    token_api_requests_total,
    token_api_retries_total,
)
from vigie.infrastructure.resilience import Retry, RetryConfig

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://token-api.thegraph.com"

ENDPOINTS = ("balances", "transfers")


def is_transient_error(error: Exception) -> bool:
    """
    Classify an upstream failure for retry.

    Connection errors, 5xx and 429 are transient. Other 4xx (bad key,
    unknown route) and malformed payloads fail fast.
    """
    if isinstance(error, UpstreamHttpError):
        return error.is_transient
    return isinstance(error, UpstreamConnectionError)


class TokenApiClient(ITokenApi):
    """
    Token API HTTP client.

    Design:
    - httpx.AsyncClient is created lazily on first use under a lock
    - Bearer token and Accept headers are set once on the client
    - Only transient failures are retried (see is_transient_error)
    - Proper cleanup via close()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        retry_config: Optional[RetryConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize token API client.

        Args:
            base_url: Token API base URL
            api_key: Bearer token sent with every request
            timeout: Request timeout in seconds
            retry_config: Retry settings (retry_on/retry_if are enforced)
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

        self.retry_config = replace(
            retry_config or RetryConfig(),
            retry_on=(UpstreamError,),
            retry_if=is_transient_error,
        )
        self._retries = {
            endpoint: Retry(
                replace(self.retry_config, on_retry=_retry_counter(endpoint))
            )
            for endpoint in ENDPOINTS
        }

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure HTTP client is initialized.

        Returns:
            Initialized AsyncClient instance
        """
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.base_url,
                        headers=self._headers(),
                        timeout=self.timeout,
                        transport=self._transport,
                        limits=httpx.Limits(
                            max_connections=10,
                            max_keepalive_connections=5,
                        ),
                    )
        return self._client

    async def _get_once(
        self,
        endpoint: str,
        path: str,
        params: Dict[str, Any],
    ) -> Any:
        """
        Single GET attempt.

        Args:
            endpoint: Endpoint label for metrics ("balances", "transfers")
            path: Request path relative to base URL
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            UpstreamHttpError: Non-success status
            UpstreamConnectionError: Transport failure
            InvalidResponseError: Body is not JSON
        """
        client = await self._ensure_client()
        start = time.time()

        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            token_api_requests_total.labels(
                endpoint=endpoint, status="connection_error"
            ).inc()
            raise UpstreamConnectionError(f"{type(e).__name__}: {e}")
        finally:
            token_api_request_duration_seconds.labels(endpoint=endpoint).observe(
                time.time() - start
            )

        token_api_requests_total.labels(
            endpoint=endpoint, status=str(response.status_code)
        ).inc()

        if not response.is_success:
            raise UpstreamHttpError(
                status=response.status_code,
                body=response.text,
                url=str(response.request.url),
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(f"body is not JSON ({e})")

    async def _get(self, endpoint: str, path: str, params: Dict[str, Any]) -> Any:
        return await self._retries[endpoint].execute(
            self._get_once, endpoint, path, params
        )

    async def get_balances(self, address: str, network_id: str) -> List[TokenBalance]:
        """
        Get token balances held by an address.

        Args:
            address: EVM wallet address
            network_id: Token API network id (e.g. "mainnet")

        Returns:
            Balances reported for the address
        """
        payload = await self._get(
            "balances",
            f"/balances/evm/{address}",
            {"network_id": network_id},
        )
        items = _extract_items(payload, ("data",))

        balances = []
        for item in items:
            balance = _parse_balance(item, network_id)
            if balance is not None:
                balances.append(balance)

        logger.debug(
            f"Fetched {len(balances)} balances for {address} on {network_id}"
        )
        return balances

    async def get_transfers(
        self,
        address: str,
        network_id: str,
        limit: int = 10,
    ) -> List[TokenTransfer]:
        """
        Get recent token transfers involving an address.

        Args:
            address: EVM wallet address
            network_id: Token API network id
            limit: Maximum number of transfers to return

        Returns:
            Transfers reported for the address
        """
        payload = await self._get(
            "transfers",
            f"/transfers/evm/{address}",
            {"network_id": network_id, "limit": limit},
        )
        items = _extract_items(payload, ("data", "transfers"))

        transfers = []
        for item in items:
            transfer = _parse_transfer(item)
            if transfer is not None:
                transfers.append(transfer)

        logger.debug(
            f"Fetched {len(transfers)} transfers for {address} on {network_id}"
        )
        return transfers

    async def close(self) -> None:
        """
        Close HTTP client and cleanup resources.

        Safe to call multiple times.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _retry_counter(endpoint: str):
    def count(error: Exception, attempt: int) -> None:
        token_api_retries_total.labels(endpoint=endpoint).inc()

    return count


def _extract_items(payload: Any, keys: tuple) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        raise InvalidResponseError(f"expected object, got {type(payload).__name__}")

    for key in keys:
        items = payload.get(key)
        if items is None:
            continue
        if not isinstance(items, list):
            raise InvalidResponseError(f"'{key}' is not a list")
        return [item for item in items if isinstance(item, dict)]

    raise InvalidResponseError(f"missing '{keys[0]}' list")


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_balance(item: Dict[str, Any], network_id: str) -> Optional[TokenBalance]:
    contract = item.get("contract")
    if not contract:
        return None

    return TokenBalance(
        contract=str(contract),
        amount=str(item.get("amount") or "0"),
        decimals=_optional_int(item.get("decimals")),
        symbol=str(item.get("symbol") or ""),
        name=str(item.get("name") or ""),
        price_usd=_optional_float(item.get("price_usd")),
        value_usd=_optional_float(item.get("value_usd")),
        network_id=str(item.get("network_id") or network_id),
    )


def _parse_transfer(item: Dict[str, Any]) -> Optional[TokenTransfer]:
    contract = item.get("contract")
    if not contract:
        return None

    timestamp = item.get("datetime") or item.get("timestamp") or ""
    transaction_id = item.get("transaction_id") or item.get("transaction_hash") or ""

    return TokenTransfer(
        contract=str(contract),
        symbol=str(item.get("symbol") or ""),
        decimals=_optional_int(item.get("decimals")),
        amount=str(item.get("amount") or "0"),
        from_address=str(item.get("from") or ""),
        to_address=str(item.get("to") or ""),
        timestamp=str(timestamp),
        transaction_id=str(transaction_id),
    )
