"""
Token API infrastructure.
"""

from vigie.infrastructure.token_api.token_api_client import (
    DEFAULT_BASE_URL,
    TokenApiClient,
    is_transient_error,
)

__all__ = ["DEFAULT_BASE_URL", "TokenApiClient", "is_transient_error"]
