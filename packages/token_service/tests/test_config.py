"""
Tests for settings and network configuration.
"""
import logging

import pytest

from token_service.config import COINGECKO_API_URL, TokenServiceSettings, setup_logging
from token_service.networks import ZERO_ADDRESS, get_common_tokens, get_network, get_rpc_url, is_native


ENV_VARS = [
    "TOKEN_SERVICE_NETWORK",
    "CELO_RPC_URL",
    "COINGECKO_API_URL",
    "COINGECKO_API_KEY",
    "PRICE_TIMEOUT",
    "WALLET_PRIVATE_KEY",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setattr("token_service.config.load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, clean_env):
        """Test the settings used when no variables are set."""
        settings = TokenServiceSettings.from_env()

        assert settings.network == "alfajores"
        assert settings.rpc_url is None
        assert settings.coingecko_api_url == COINGECKO_API_URL
        assert settings.price_timeout == 10.0
        assert settings.private_key is None
        assert settings.resolved_rpc_url == "https://alfajores-forno.celo-testnet.org"

    def test_from_env(self, clean_env):
        """Test that environment variables override the defaults."""
        clean_env.setenv("TOKEN_SERVICE_NETWORK", "celo")
        clean_env.setenv("CELO_RPC_URL", "http://localhost:8545")
        clean_env.setenv("COINGECKO_API_KEY", "demo")
        clean_env.setenv("PRICE_TIMEOUT", "2.5")

        settings = TokenServiceSettings.from_env()

        assert settings.network_config.chain_id == 42220
        assert settings.resolved_rpc_url == "http://localhost:8545"
        assert settings.coingecko_api_key == "demo"
        assert settings.price_timeout == 2.5

    def test_setup_logging(self, monkeypatch):
        """Test that the level name is passed to basicConfig."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        setup_logging("debug")

        assert calls[0]["level"] == logging.DEBUG


class TestNetworks:
    """Network lookups and the token registry."""

    def test_get_network_case_insensitive(self):
        """Test that network names match case-insensitively."""
        assert get_network("Alfajores").chain_id == 44787

    def test_unknown_network(self):
        """Test that an unknown network raises ValueError."""
        with pytest.raises(ValueError, match="Unknown network"):
            get_network("goerli")

    def test_rpc_override(self):
        """Test that a custom RPC URL wins over the network default."""
        assert get_rpc_url("celo") == "https://forno.celo.org"
        assert get_rpc_url("celo", "http://node:8545") == "http://node:8545"

    def test_common_tokens(self):
        """Test the Alfajores registry and an unknown chain."""
        assert set(get_common_tokens(44787)) == {"CELO", "cUSD", "cEUR", "cREAL"}
        assert get_common_tokens(1) == {}

    def test_is_native(self):
        """Test zero-address detection."""
        assert is_native(ZERO_ADDRESS)
        assert not is_native("0x" + "11" * 20)
