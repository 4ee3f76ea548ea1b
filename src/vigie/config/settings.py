"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vigie.application.use_cases.lookup_wallet_balances import validate_address
from vigie.domain.entities.historical import HistoricalMode
from vigie.domain.exceptions.base import ValidationError
from vigie.domain.exceptions.network import UnknownNetworkError
from vigie.domain.value_objects.network import Network, parse_network
from vigie.infrastructure.resilience import BackoffStrategy


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    TOKEN_API_KEY must come from the environment or .env, never from YAML.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Vigie"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Token API
    TOKEN_API_URL: str = Field(
        default="https://token-api.thegraph.com",
        description="Token API base URL",
    )
    TOKEN_API_KEY: Optional[str] = Field(
        default=None,
        description="Token API bearer token",
    )
    TOKEN_API_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        description="Token API request timeout in seconds",
    )

    # Resilience - Retry
    RETRY_MAX_ATTEMPTS: int = Field(
        default=3,
        ge=1,
        description="Maximum attempts per token API request",
    )
    RETRY_INITIAL_DELAY: float = Field(
        default=1.0,
        ge=0,
        description="Initial retry delay in seconds",
    )
    RETRY_MAX_DELAY: float = Field(
        default=10.0,
        ge=0,
        description="Maximum retry delay in seconds",
    )
    RETRY_BACKOFF_STRATEGY: BackoffStrategy = Field(
        default=BackoffStrategy.CONSTANT,
        description="constant, linear or exponential",
    )
    RETRY_JITTER: bool = Field(default=False)

    # Networks
    REPRESENTATIVE_WALLETS: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-network representative wallet overrides",
    )
    TRANSFER_NETWORK_PRIORITY: List[str] = Field(
        default=["ethereum", "base", "arbitrum", "optimism", "polygon"],
        description="Order in which networks are searched for transfers",
    )
    LARGE_TRANSFERS_LIMIT: int = Field(default=10, ge=1, le=100)

    # Historical series
    HISTORICAL_MODE: str = Field(
        default=HistoricalMode.EMPTY.value,
        description="empty or synthetic",
    )
    HISTORICAL_SUPPLY_DAYS: int = Field(default=30, ge=0)
    HISTORICAL_WALLET_DAYS: int = Field(default=30, ge=0)
    MINT_BURN_DAYS: int = Field(default=7, ge=0)
    SYNTHETIC_AMPLITUDE: float = Field(default=0.02, ge=0)
    SYNTHETIC_PERIOD: float = Field(default=5.0, gt=0)
    SYNTHETIC_WALLET_COUNT_BASE: int = Field(default=500_000, ge=0)
    SYNTHETIC_MINT_BASE: float = Field(default=100_000_000.0, ge=0)
    SYNTHETIC_BURN_BASE: float = Field(default=90_000_000.0, ge=0)

    # Startup
    REFRESH_ON_STARTUP: bool = Field(
        default=True,
        description="Run one dashboard refresh when the app starts",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("HISTORICAL_MODE")
    @classmethod
    def validate_historical_mode(cls, v: str) -> str:
        """Validate historical mode."""
        allowed = [m.value for m in HistoricalMode]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid HISTORICAL_MODE. Must be one of: {allowed}")
        return v_lower

    @field_validator("TRANSFER_NETWORK_PRIORITY")
    @classmethod
    def validate_transfer_priority(cls, v: List[str]) -> List[str]:
        """Validate transfer network priority (known networks, no repeats)."""
        try:
            networks = [parse_network(name).value for name in v]
        except UnknownNetworkError as e:
            raise ValueError(e.message)
        if len(set(networks)) != len(networks):
            raise ValueError("TRANSFER_NETWORK_PRIORITY contains duplicates")
        return networks

    @field_validator("REPRESENTATIVE_WALLETS")
    @classmethod
    def validate_representative_wallets(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Validate wallet overrides: known networks, well-formed addresses."""
        try:
            return {
                parse_network(name).value: validate_address(wallet)
                for name, wallet in v.items()
            }
        except (UnknownNetworkError, ValidationError) as e:
            raise ValueError(e.message)

    @property
    def transfer_priority(self) -> List[Network]:
        return [Network(name) for name in self.TRANSFER_NETWORK_PRIORITY]


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If a value fails validation
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Init kwargs outrank the environment in pydantic-settings
    merged_config = {k: v for k, v in merged_config.items() if k not in os.environ}
    merged_config.pop("TOKEN_API_KEY", None)

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
