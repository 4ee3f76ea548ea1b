"""
Unit tests for application settings.

Usage:
    pytest tests/unit/test_settings.py
"""

import pytest
from pydantic import ValidationError

from vigie.config.settings import Settings, load_config
from vigie.domain.value_objects.network import Network
from vigie.infrastructure.resilience import BackoffStrategy


class TestSettings:
    """Tests for Settings validation and defaults."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.TOKEN_API_URL == "https://token-api.thegraph.com"
        assert settings.RETRY_MAX_ATTEMPTS == 3
        assert settings.RETRY_BACKOFF_STRATEGY == BackoffStrategy.CONSTANT
        assert settings.HISTORICAL_MODE == "empty"
        assert settings.LARGE_TRANSFERS_LIMIT == 10
        assert settings.transfer_priority == [
            Network.ETHEREUM,
            Network.BASE,
            Network.ARBITRUM,
            Network.OPTIMISM,
            Network.POLYGON,
        ]

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")

    def test_historical_mode(self):
        assert Settings(_env_file=None, HISTORICAL_MODE="Synthetic").HISTORICAL_MODE == (
            "synthetic"
        )
        with pytest.raises(ValidationError):
            Settings(_env_file=None, HISTORICAL_MODE="interpolated")

    def test_transfer_priority_normalized(self):
        settings = Settings(_env_file=None, TRANSFER_NETWORK_PRIORITY=["BASE", "polygon"])
        assert settings.transfer_priority == [Network.BASE, Network.POLYGON]

    def test_transfer_priority_rejects_unknown_and_duplicates(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, TRANSFER_NETWORK_PRIORITY=["ethereum", "solana"])
        with pytest.raises(ValidationError):
            Settings(_env_file=None, TRANSFER_NETWORK_PRIORITY=["base", "Base"])

    def test_wallet_overrides_rejects_unknown_network(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, REPRESENTATIVE_WALLETS={"fantom": "0x1"})

    def test_wallet_overrides_normalized(self):
        """Test network names and addresses are lowercased."""
        wallet = "0x" + "AB" * 20

        settings = Settings(_env_file=None, REPRESENTATIVE_WALLETS={"Base": wallet})

        assert settings.REPRESENTATIVE_WALLETS == {"base": wallet.lower()}

    def test_wallet_overrides_rejects_malformed_address(self):
        """Test a wallet that is not 0x plus 40 hex digits is refused."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, REPRESENTATIVE_WALLETS={"base": "0xnot-a-wallet"})


class TestLoadConfig:
    """Tests for YAML + environment loading."""

    def test_environment_beats_yaml(self, monkeypatch):
        monkeypatch.setenv("LARGE_TRANSFERS_LIMIT", "25")

        settings = load_config(env="test")

        assert settings.LARGE_TRANSFERS_LIMIT == 25

    def test_default_yaml_loaded(self, monkeypatch):
        monkeypatch.delenv("HISTORICAL_MODE", raising=False)

        settings = load_config(env="test")

        assert settings.HISTORICAL_MODE == "empty"
        assert settings.TRANSFER_NETWORK_PRIORITY[0] == "ethereum"

    def test_api_key_never_read_from_yaml(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TOKEN_API_KEY", raising=False)
        monkeypatch.chdir(tmp_path)

        settings = load_config(env="test")

        assert settings.TOKEN_API_KEY is None
