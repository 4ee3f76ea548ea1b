"""API routes."""
from vigie.presentation.api.routes import dashboard, health, networks, wallet

__all__ = [
    "dashboard",
    "health",
    "networks",
    "wallet",
]
