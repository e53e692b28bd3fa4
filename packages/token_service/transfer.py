"""
Native CELO and ERC20 transfers.

Unlike the read paths, every failure here is logged and re-raised: a
transfer is never silently defaulted and never retried.
"""

import logging
from typing import Optional

from .erc20 import ERC20_TRANSFER_ABI, NATIVE_DECIMALS, parse_units, to_checksum
from .exceptions import ProviderUnavailableError
from .networks import is_native
from .provider import ChainProvider, get_provider

logger = logging.getLogger(__name__)


async def transfer_token(
    token_address: str,
    to_address: str,
    amount: str,
    provider: Optional[ChainProvider] = None,
) -> str:
    """
    Send tokens from the provider's signing account.

    Args:
        token_address: ERC20 contract address, or the zero address for native CELO
        to_address: Recipient address
        amount: Human-readable decimal amount, e.g. "1.25"
        provider: Chain provider (defaults to the process-wide one)

    Returns:
        Hash of the submitted transaction (not waited on)

    Raises:
        ProviderUnavailableError: If no provider is configured
        SignerUnavailableError: If the provider has no signing account
        InvalidAmountError: If the amount is malformed
    """
    try:
        provider = provider or get_provider()
        if provider is None:
            raise ProviderUnavailableError()

        signer = provider.get_signer()

        if is_native(token_address):
            return await signer.send_transaction({
                "to": to_address,
                "value": parse_units(amount, NATIVE_DECIMALS),
            })

        contract = provider.contract(token_address, ERC20_TRANSFER_ABI)
        decimals = await contract.functions.decimals().call()
        return await signer.send_contract_call(
            contract.functions.transfer(to_checksum(to_address), parse_units(amount, decimals))
        )
    except Exception as e:
        logger.error("Transfer of %s %s to %s failed: %s", amount, token_address, to_address, e)
        raise
