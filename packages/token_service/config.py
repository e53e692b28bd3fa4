"""
Token Service - Configuration Management
Settings are read from the environment (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .networks import DEFAULT_NETWORK, NetworkConfig, get_network, get_rpc_url


COINGECKO_API_URL = "https://api.coingecko.com/api/v3"


@dataclass
class TokenServiceSettings:
    """Runtime settings for the token service"""
    network: str = DEFAULT_NETWORK
    rpc_url: Optional[str] = None
    coingecko_api_url: str = COINGECKO_API_URL
    coingecko_api_key: Optional[str] = None
    price_timeout: float = 10.0
    private_key: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "TokenServiceSettings":
        """Build settings from environment variables."""
        load_dotenv()

        return cls(
            network=os.environ.get("TOKEN_SERVICE_NETWORK", DEFAULT_NETWORK),
            rpc_url=os.environ.get("CELO_RPC_URL") or None,
            coingecko_api_url=os.environ.get("COINGECKO_API_URL", COINGECKO_API_URL),
            coingecko_api_key=os.environ.get("COINGECKO_API_KEY") or None,
            price_timeout=float(os.environ.get("PRICE_TIMEOUT", "10")),
            private_key=os.environ.get("WALLET_PRIVATE_KEY") or None,
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )

    @property
    def network_config(self) -> NetworkConfig:
        return get_network(self.network)

    @property
    def resolved_rpc_url(self) -> str:
        """Custom RPC if set, otherwise the network default."""
        return get_rpc_url(self.network, self.rpc_url)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts embedding the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
