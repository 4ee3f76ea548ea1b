"""
Domain exceptions package.
"""

# Base exceptions
from vigie.domain.exceptions.base import (
    MissingCredentialError,
    ValidationError,
    VigieException,
)

# Network exceptions
from vigie.domain.exceptions.network import (
    NoMatchingTokenError,
    UnknownNetworkError,
)

# Upstream exceptions
from vigie.domain.exceptions.upstream import (
    InvalidResponseError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamHttpError,
)

__all__ = [
    # Base
    "VigieException",
    "ValidationError",
    "MissingCredentialError",
    # Network
    "UnknownNetworkError",
    "NoMatchingTokenError",
    # Upstream
    "UpstreamError",
    "UpstreamHttpError",
    "UpstreamConnectionError",
    "InvalidResponseError",
]
