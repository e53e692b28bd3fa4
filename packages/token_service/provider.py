"""
Chain provider handle for the token service.

Wraps an AsyncWeb3 client (and optionally a local account for signing) and
keeps one process-wide instance that the reader and transfer paths share.
"""

import logging
from typing import Any, Dict, List, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from .config import TokenServiceSettings
from .erc20 import ERC20_ABI
from .exceptions import SignerUnavailableError
from .networks import NetworkConfig

logger = logging.getLogger(__name__)


class TransactionSigner:
    """Signs transactions locally and submits them as raw transactions."""

    def __init__(self, w3: AsyncWeb3, account: LocalAccount, chain_id: int):
        self.w3 = w3
        self.account = account
        self.chain_id = chain_id

    @property
    def address(self) -> str:
        return self.account.address

    async def _base_params(self) -> Dict[str, Any]:
        return {
            "from": self.address,
            "nonce": await self.w3.eth.get_transaction_count(self.address, "pending"),
            "gasPrice": await self.w3.eth.gas_price,
            "chainId": self.chain_id,
        }

    async def _sign_and_send(self, tx: Dict[str, Any]) -> str:
        signed = self.account.sign_transaction(tx)
        tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        return AsyncWeb3.to_hex(tx_hash)

    async def send_transaction(self, tx: Dict[str, Any]) -> str:
        """
        Send a plain value transfer.

        Args:
            tx: Dict with at least 'to' and 'value' (in wei)

        Returns:
            Transaction hash (0x-prefixed hex), not waited on
        """
        params = {**await self._base_params(), **tx}
        params["to"] = AsyncWeb3.to_checksum_address(params["to"])
        if "gas" not in params:
            params["gas"] = await self.w3.eth.estimate_gas(params)

        logger.info("Sending %s wei from %s to %s", params.get("value", 0), self.address, params["to"])
        return await self._sign_and_send(params)

    async def send_contract_call(self, contract_function) -> str:
        """Build, sign and send a contract write call."""
        tx = await contract_function.build_transaction(await self._base_params())
        logger.info("Sending contract call to %s from %s", tx.get("to"), self.address)
        return await self._sign_and_send(tx)


class ChainProvider:
    """Read access to the chain plus an optional signer."""

    def __init__(
        self,
        w3: AsyncWeb3,
        network: NetworkConfig,
        account: Optional[LocalAccount] = None,
    ):
        self.w3 = w3
        self.network = network
        self._account = account

    @classmethod
    def from_settings(cls, settings: TokenServiceSettings) -> "ChainProvider":
        """Create a provider for the configured network and RPC URL."""
        w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(settings.resolved_rpc_url))
        account = Account.from_key(settings.private_key) if settings.private_key else None
        return cls(w3, settings.network_config, account)

    async def get_code(self, address: str) -> bytes:
        return await self.w3.eth.get_code(AsyncWeb3.to_checksum_address(address))

    async def get_balance(self, address: str) -> int:
        return await self.w3.eth.get_balance(AsyncWeb3.to_checksum_address(address))

    def contract(self, address: str, abi: Optional[List[Dict[str, Any]]] = None):
        """Contract handle for an address, using the read-only ERC20 ABI by default."""
        return self.w3.eth.contract(
            address=AsyncWeb3.to_checksum_address(address),
            abi=abi or ERC20_ABI,
        )

    def get_signer(self) -> TransactionSigner:
        """
        Signer for the configured account.

        Raises:
            SignerUnavailableError: If no private key was configured
        """
        if self._account is None:
            raise SignerUnavailableError("No signing account configured for provider")
        return TransactionSigner(self.w3, self._account, self.network.chain_id)


_provider: Optional[ChainProvider] = None


def get_provider() -> Optional[ChainProvider]:
    """The process-wide provider, or None when not configured."""
    return _provider


def set_provider(provider: Optional[ChainProvider]) -> None:
    global _provider
    _provider = provider


def configure_provider(settings: Optional[TokenServiceSettings] = None) -> ChainProvider:
    """Create the process-wide provider from settings (environment by default)."""
    settings = settings or TokenServiceSettings.from_env()
    provider = ChainProvider.from_settings(settings)
    set_provider(provider)
    logger.info("Configured provider for %s at %s", settings.network_config.name, settings.resolved_rpc_url)
    return provider
