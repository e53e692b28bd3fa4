"""
Token balances, metadata and prices for a Celo wallet.

Read paths follow two policies:
- balances, prices, batch listings and token info swallow errors, log them,
  and return a default ("0", None, [] or None)
- get_token_metadata logs and re-raises
"""

import asyncio
import logging
from typing import List, Optional

from .config import TokenServiceSettings
from .erc20 import NATIVE_DECIMALS, format_units, is_valid_address, to_checksum
from .exceptions import ContractNotFoundError, InvalidAddressError, ProviderUnavailableError
from .models import Token, TokenMetadata, compute_value
from .networks import DEFAULT_NETWORK, ZERO_ADDRESS, NetworkConfig, get_common_tokens, get_network
from .pricing import CoinGeckoPriceFeed
from .provider import ChainProvider, get_provider
from .results import read_with_default
from .transfer import transfer_token as _transfer_token

logger = logging.getLogger(__name__)


class TokenReader:
    """Read token holdings and prices through a chain provider."""

    def __init__(
        self,
        provider: Optional[ChainProvider] = None,
        price_feed: Optional[CoinGeckoPriceFeed] = None,
    ):
        """
        Initialize the reader.

        Args:
            provider: Chain provider; falls back to the process-wide one at call time
            price_feed: Price feed; a default CoinGecko feed is created and owned if omitted
        """
        self._provider = provider
        self._owns_price_feed = price_feed is None
        self.price_feed = price_feed or CoinGeckoPriceFeed()

    @classmethod
    def from_settings(cls, settings: TokenServiceSettings) -> "TokenReader":
        provider = ChainProvider.from_settings(settings)
        price_feed = CoinGeckoPriceFeed(
            base_url=settings.coingecko_api_url,
            api_key=settings.coingecko_api_key,
            timeout=settings.price_timeout,
        )
        reader = cls(provider, price_feed)
        reader._owns_price_feed = True
        return reader

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        if self._owns_price_feed:
            await self.price_feed.close()

    def _get_provider(self) -> ChainProvider:
        provider = self._provider or get_provider()
        if provider is None:
            raise ProviderUnavailableError()
        return provider

    def _network(self) -> NetworkConfig:
        provider = self._provider or get_provider()
        if provider is not None:
            return provider.network
        return get_network(DEFAULT_NETWORK)

    @staticmethod
    async def _has_contract(provider: ChainProvider, address: str) -> bool:
        code = await provider.get_code(address)
        return bool(code) and code != "0x"

    async def _readable_contract(self, token_address: str, wallet_address: Optional[str] = None):
        """Contract handle if the addresses are valid and code is deployed, else None."""
        provider = self._get_provider()

        if not is_valid_address(token_address):
            logger.warning("Invalid token address: %s", token_address)
            return None
        if wallet_address is not None and not is_valid_address(wallet_address):
            logger.warning("Invalid wallet address: %s", wallet_address)
            return None
        if not await self._has_contract(provider, token_address):
            logger.warning("No contract found at address: %s", token_address)
            return None

        return provider.contract(token_address)

    async def get_token_balance(self, token_address: str, wallet_address: str) -> str:
        """
        Get the ERC20 balance of a wallet, scaled by the token's decimals.

        Never raises: an invalid address, missing contract, unavailable
        provider or failed call all give "0".
        """
        try:
            contract = await self._readable_contract(token_address, wallet_address)
            if contract is None:
                return "0"

            balance, decimals = await asyncio.gather(
                read_with_default(
                    "balanceOf",
                    token_address,
                    contract.functions.balanceOf(to_checksum(wallet_address)).call(),
                ),
                read_with_default("decimals", token_address, contract.functions.decimals().call()),
            )
            return format_units(balance, decimals)
        except Exception as e:
            logger.error("Balance fetch error for %s: %s", token_address, e)
            return "0"

    async def get_token_metadata(self, token_address: str) -> TokenMetadata:
        """
        Get symbol, name and decimals of an ERC20 token.

        Each field falls back to its own default if its call fails.

        Raises:
            ProviderUnavailableError: If no provider is configured
            InvalidAddressError: If the address is malformed
            ContractNotFoundError: If no contract is deployed at the address
        """
        try:
            provider = self._get_provider()

            if not is_valid_address(token_address):
                raise InvalidAddressError(token_address)
            if not await self._has_contract(provider, token_address):
                raise ContractNotFoundError(token_address)

            contract = provider.contract(token_address)
            symbol, name, decimals = await asyncio.gather(
                read_with_default("symbol", token_address, contract.functions.symbol().call()),
                read_with_default("name", token_address, contract.functions.name().call()),
                read_with_default("decimals", token_address, contract.functions.decimals().call()),
            )

            return TokenMetadata(
                address=token_address,
                symbol=symbol,
                name=name,
                decimals=int(decimals),
            )
        except Exception as e:
            logger.error("Metadata fetch error for %s: %s", token_address, e)
            raise

    async def get_total_supply(self, token_address: str) -> str:
        """Total supply scaled by decimals; "0" on any failure."""
        try:
            contract = await self._readable_contract(token_address)
            if contract is None:
                return "0"

            supply, decimals = await asyncio.gather(
                read_with_default("totalSupply", token_address, contract.functions.totalSupply().call()),
                read_with_default("decimals", token_address, contract.functions.decimals().call()),
            )
            return format_units(supply, decimals)
        except Exception as e:
            logger.error("Total supply fetch error for %s: %s", token_address, e)
            return "0"

    async def get_token_price(self, symbol: str) -> Optional[float]:
        """USD price for a symbol, or None."""
        try:
            return await self.price_feed.get_price(symbol)
        except Exception as e:
            logger.error("Price fetch error for %s: %s", symbol, e)
            return None

    async def _metadata_or_none(self, token_address: str) -> Optional[TokenMetadata]:
        try:
            return await self.get_token_metadata(token_address)
        except Exception as e:
            logger.warning("Failed to get metadata for %s: %s", token_address, e)
            return None

    async def get_multiple_token_balances(
        self,
        token_addresses: List[str],
        wallet_address: str,
    ) -> List[Token]:
        """
        Get balances, metadata and prices for several tokens.

        Invalid addresses are dropped, as are tokens whose metadata cannot be
        read. Results keep the input order.

        Args:
            token_addresses: ERC20 contract addresses
            wallet_address: Wallet to check

        Returns:
            List of Token, possibly empty
        """
        try:
            self._get_provider()

            valid_addresses = []
            for token_address in token_addresses:
                if is_valid_address(token_address):
                    valid_addresses.append(token_address)
                else:
                    logger.warning("Skipping invalid token address: %s", token_address)

            if not valid_addresses:
                logger.warning("No valid token addresses provided")
                return []

            balances, metadatas = await asyncio.gather(
                asyncio.gather(*(
                    self.get_token_balance(token_address, wallet_address)
                    for token_address in valid_addresses
                )),
                asyncio.gather(*(
                    self._metadata_or_none(token_address)
                    for token_address in valid_addresses
                )),
            )

            tokens = []
            for metadata, balance in zip(metadatas, balances):
                if metadata is None:
                    continue

                try:
                    price = await self.get_token_price(metadata.symbol)
                    tokens.append(metadata.with_balance(balance, price))
                except Exception as e:
                    logger.warning("Failed to process token %s: %s", metadata.symbol, e)

            return tokens
        except Exception as e:
            logger.error("Multiple balances fetch error: %s", e)
            return []

    async def get_native_balance(self, wallet_address: str) -> str:
        """Native CELO balance of a wallet; "0" on any failure."""
        try:
            provider = self._get_provider()
            balance = await provider.get_balance(wallet_address)
            return format_units(balance, NATIVE_DECIMALS)
        except Exception as e:
            logger.error("Native balance fetch error for %s: %s", wallet_address, e)
            return "0"

    async def get_common_tokens(self, wallet_address: str) -> List[Token]:
        """
        Native CELO plus the network's well-known tokens, non-zero balances only.

        The native coin comes first, identified by the zero address.
        """
        try:
            network = self._network()
            token_addresses = list(get_common_tokens(network.chain_id).values())
            tokens = await self.get_multiple_token_balances(token_addresses, wallet_address)

            native_balance = await self.get_native_balance(wallet_address)
            native_price = await self.get_token_price(network.price_key)

            native = Token(
                address=ZERO_ADDRESS,
                symbol=network.symbol,
                name=network.native_name,
                decimals=network.decimals,
                balance=native_balance,
                price=native_price or None,
                value=compute_value(native_balance, native_price),
            )

            return [token for token in [native, *tokens] if float(token.balance) > 0]
        except Exception as e:
            logger.error("Common tokens fetch error: %s", e)
            return []

    async def get_token_info(self, token_address: str, wallet_address: str) -> Optional[Token]:
        """Metadata, balance and price for one token; None on any failure."""
        try:
            metadata, balance = await asyncio.gather(
                self.get_token_metadata(token_address),
                self.get_token_balance(token_address, wallet_address),
            )
            price = await self.get_token_price(metadata.symbol)
            return metadata.with_balance(balance, price)
        except Exception as e:
            logger.error("Token info fetch error for %s: %s", token_address, e)
            return None

    async def transfer_token(self, token_address: str, to_address: str, amount: str) -> str:
        """Send tokens; see transfer.transfer_token. Raises on failure."""
        return await _transfer_token(token_address, to_address, amount, provider=self._provider)


# Convenience functions using the process-wide provider
async def get_token_balance(token_address: str, wallet_address: str) -> str:
    """Get ERC20 token balance."""
    async with TokenReader() as reader:
        return await reader.get_token_balance(token_address, wallet_address)


async def get_token_metadata(token_address: str) -> TokenMetadata:
    """Get ERC20 token metadata."""
    async with TokenReader() as reader:
        return await reader.get_token_metadata(token_address)


async def get_token_price(symbol: str) -> Optional[float]:
    """Get USD price for a token symbol."""
    async with TokenReader() as reader:
        return await reader.get_token_price(symbol)


async def get_multiple_token_balances(token_addresses: List[str], wallet_address: str) -> List[Token]:
    """Get balances for multiple ERC20 tokens."""
    async with TokenReader() as reader:
        return await reader.get_multiple_token_balances(token_addresses, wallet_address)


async def get_native_balance(wallet_address: str) -> str:
    """Get native CELO balance."""
    async with TokenReader() as reader:
        return await reader.get_native_balance(wallet_address)


async def get_common_tokens_for_wallet(wallet_address: str) -> List[Token]:
    """Get native CELO and well-known token holdings."""
    async with TokenReader() as reader:
        return await reader.get_common_tokens(wallet_address)


async def get_token_info(token_address: str, wallet_address: str) -> Optional[Token]:
    """Get full info for one token."""
    async with TokenReader() as reader:
        return await reader.get_token_info(token_address, wallet_address)
