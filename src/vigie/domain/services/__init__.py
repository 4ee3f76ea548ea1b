"""
Domain service interfaces.
"""

from vigie.domain.services.i_token_api import ITokenApi

__all__ = ["ITokenApi"]
