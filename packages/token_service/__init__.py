"""
Token Service for Celo wallets.
ERC20 and native CELO balances, metadata, USD prices and transfers.
"""

from .reader import (
    TokenReader,
    get_token_balance,
    get_token_metadata,
    get_token_price,
    get_multiple_token_balances,
    get_native_balance,
    get_common_tokens_for_wallet,
    get_token_info,
)

from .transfer import transfer_token

from .models import Token, TokenMetadata

from .pricing import CoinGeckoPriceFeed

from .provider import (
    ChainProvider,
    TransactionSigner,
    get_provider,
    set_provider,
    configure_provider,
)

from .config import TokenServiceSettings, setup_logging

from .exceptions import (
    TokenServiceError,
    ProviderUnavailableError,
    InvalidAddressError,
    ContractNotFoundError,
    SignerUnavailableError,
    InvalidAmountError,
)

from .networks import (
    NetworkConfig,
    NETWORKS,
    TESTNETS,
    ALL_NETWORKS,
    COMMON_TOKENS,
    ZERO_ADDRESS,
    get_network,
    get_rpc_url,
)

__all__ = [
    # Reader
    "TokenReader",
    "get_token_balance",
    "get_token_metadata",
    "get_token_price",
    "get_multiple_token_balances",
    "get_native_balance",
    "get_common_tokens_for_wallet",
    "get_token_info",
    # Transfer
    "transfer_token",
    # Models
    "Token",
    "TokenMetadata",
    # Pricing
    "CoinGeckoPriceFeed",
    # Provider
    "ChainProvider",
    "TransactionSigner",
    "get_provider",
    "set_provider",
    "configure_provider",
    # Config
    "TokenServiceSettings",
    "setup_logging",
    # Exceptions
    "TokenServiceError",
    "ProviderUnavailableError",
    "InvalidAddressError",
    "ContractNotFoundError",
    "SignerUnavailableError",
    "InvalidAmountError",
    # Networks
    "NetworkConfig",
    "NETWORKS",
    "TESTNETS",
    "ALL_NETWORKS",
    "COMMON_TOKENS",
    "ZERO_ADDRESS",
    "get_network",
    "get_rpc_url",
]

__version__ = "0.1.0"
