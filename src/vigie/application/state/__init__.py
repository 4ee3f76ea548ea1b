"""
Application state containers.
"""

from vigie.application.state.dashboard_state import (
    PLACEHOLDER_API_KEYS,
    DashboardState,
    classify_error,
    is_api_key_configured,
)

__all__ = [
    "PLACEHOLDER_API_KEYS",
    "DashboardState",
    "classify_error",
    "is_api_key_configured",
]
