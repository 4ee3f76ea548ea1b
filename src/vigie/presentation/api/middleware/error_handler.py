"""
Global error handler for domain exceptions.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from vigie.domain.exceptions import VigieException
from vigie.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "UNKNOWN_NETWORK": status.HTTP_404_NOT_FOUND,
    "NO_MATCHING_TOKEN": status.HTTP_404_NOT_FOUND,
    "MISSING_CREDENTIAL": status.HTTP_503_SERVICE_UNAVAILABLE,
    "UPSTREAM_HTTP_ERROR": status.HTTP_502_BAD_GATEWAY,
    "UPSTREAM_CONNECTION_ERROR": status.HTTP_502_BAD_GATEWAY,
    "INVALID_RESPONSE": status.HTTP_502_BAD_GATEWAY,
}


async def vigie_exception_handler(
    request: Request, exc: VigieException
) -> JSONResponse:
    """
    Handle Vigie domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
        },
    )
