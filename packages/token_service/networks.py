"""
Celo network configuration and well-known token registry.
"""

from dataclasses import dataclass
from typing import Dict, Optional


# Identifies the native coin wherever a token address is expected
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class NetworkConfig:
    """Configuration for a Celo network."""
    chain_id: int
    name: str
    symbol: str
    native_name: str
    price_key: str
    rpc_url: str
    explorer_url: str
    decimals: int = 18
    is_testnet: bool = False


# Mainnet configurations
NETWORKS: Dict[str, NetworkConfig] = {
    "celo": NetworkConfig(
        chain_id=42220,
        name="Celo Mainnet",
        symbol="CELO",
        native_name="Celo Native Token",
        price_key="celo",
        rpc_url="https://forno.celo.org",
        explorer_url="https://celoscan.io",
    ),
}

# Testnet configurations
TESTNETS: Dict[str, NetworkConfig] = {
    "alfajores": NetworkConfig(
        chain_id=44787,
        name="Alfajores Testnet",
        symbol="CELO",
        native_name="Celo Native Token",
        price_key="celo",
        rpc_url="https://alfajores-forno.celo-testnet.org",
        explorer_url="https://alfajores.celoscan.io",
        is_testnet=True,
    ),
}

ALL_NETWORKS: Dict[str, NetworkConfig] = {**NETWORKS, **TESTNETS}

DEFAULT_NETWORK = "alfajores"


# Well-known token contracts by chain ID
COMMON_TOKENS: Dict[int, Dict[str, str]] = {
    # Alfajores
    44787: {
        "CELO": "0xF194afDf50B03e69Bd7D057c1Aa9e10c9954E4C9",
        "cUSD": "0x874069Fa1Eb16D44d622F2e0Ca25eeA172369bC1",
        "cEUR": "0x10c892A6EC43a53E45D0B916B4b7D383B1b78C0F",
        "cREAL": "0x00Be915B9dCf56a3CBE739D9B9c202ca692409EC",
    },
    # Celo Mainnet
    42220: {
        "CELO": "0x471EcE3750Da237f93B8E339c536989b8978a438",
        "cUSD": "0x765DE816845861e75A25fCA122bb6898B8B1282a",
        "cEUR": "0xD8763CBa276a3738E6DE85b4b3bF5FDed6D6cA73",
        "cREAL": "0xe8537a3d056DA446677B9E9d6c5dB704EaAb4787",
    },
}


def get_network(network_name: str) -> NetworkConfig:
    """
    Get network configuration by name.

    Args:
        network_name: Name of the network (e.g., 'celo', 'alfajores')

    Returns:
        NetworkConfig for the requested network

    Raises:
        ValueError: If network is not supported
    """
    network_name = network_name.lower()
    if network_name not in ALL_NETWORKS:
        supported = ", ".join(ALL_NETWORKS.keys())
        raise ValueError(f"Unknown network: {network_name}. Supported: {supported}")
    return ALL_NETWORKS[network_name]


def get_rpc_url(network_name: str, custom_rpc: Optional[str] = None) -> str:
    """
    Get RPC URL for a network.

    Args:
        network_name: Name of the network
        custom_rpc: Optional custom RPC URL to use instead of default

    Returns:
        RPC URL string
    """
    if custom_rpc:
        return custom_rpc
    return get_network(network_name).rpc_url


def get_common_tokens(chain_id: int) -> Dict[str, str]:
    """Symbol -> contract address for the well-known tokens of a chain."""
    return dict(COMMON_TOKENS.get(chain_id, {}))


def is_native(token_address: str) -> bool:
    """True if the address is the native-coin sentinel."""
    return token_address.lower() == ZERO_ADDRESS
