"""
Upstream token API exceptions.

Defines exceptions for failures talking to the third-party token API.
"""

from typing import Optional

from vigie.domain.exceptions.base import VigieException


class UpstreamError(VigieException):
    """Base exception for token API failures."""


class UpstreamHttpError(UpstreamError):
    """Raised when the token API answers with a non-success status."""

    def __init__(self, status: int, body: str = "", url: Optional[str] = None):
        """
        Initialize upstream HTTP error.

        Args:
            status: HTTP status code returned by the API
            body: Response body text (truncated for the message)
            url: Requested URL
        """
        super().__init__(
            f"Token API error {status}: {body[:200]}",
            code="UPSTREAM_HTTP_ERROR",
        )
        self.status = status
        self.body = body
        self.url = url

    @property
    def is_transient(self) -> bool:
        """Server errors and rate limiting are worth retrying."""
        return self.status >= 500 or self.status == 429


class UpstreamConnectionError(UpstreamError):
    """Raised when the token API cannot be reached."""

    def __init__(self, message: str):
        super().__init__(
            f"Network error calling token API: {message}",
            code="UPSTREAM_CONNECTION_ERROR",
        )


class InvalidResponseError(UpstreamError):
    """Raised when the token API returns a payload of unexpected shape."""

    def __init__(self, message: str):
        super().__init__(
            f"Invalid token API response: {message}",
            code="INVALID_RESPONSE",
        )
