"""
Health check API routes.
"""

from fastapi import APIRouter, Depends, status

from vigie.application.state.dashboard_state import (
    DashboardState,
    is_api_key_configured,
)
from vigie.config.settings import Settings
from vigie.di.dependencies import get_app_settings, get_dashboard_state

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check_endpoint(
    state: DashboardState = Depends(get_dashboard_state),
    settings: Settings = Depends(get_app_settings),
):
    """
    General health check endpoint.

    The service is healthy while it runs; a missing credential or a failed
    last refresh is reported as degraded.
    """
    snapshot = state.snapshot
    configured = is_api_key_configured(settings.TOKEN_API_KEY)
    degraded = not configured or snapshot.error is not None

    return {
        "status": "degraded" if degraded else "healthy",
        "version": settings.APP_VERSION,
        "components": {
            "token_api": {
                "configured": configured,
                "url": settings.TOKEN_API_URL,
            },
            "dashboard": {
                "status": snapshot.status.value,
                "error": snapshot.error_message,
                "generation": snapshot.generation,
                "updated_at": (
                    snapshot.updated_at.isoformat() if snapshot.updated_at else None
                ),
            },
        },
        "historical_mode": settings.HISTORICAL_MODE,
    }
