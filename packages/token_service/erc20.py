"""
Minimal ERC20 ABI, address validation and unit conversion helpers.
"""

import re

from web3 import Web3

from .exceptions import InvalidAmountError


# Read-only ERC20 interface used for balances and metadata
ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "balance", "type": "uint256"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "name",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function",
    },
]

ERC20_TRANSFER_ABI = ERC20_ABI + [
    {
        "constant": False,
        "inputs": [
            {"name": "_to", "type": "address"},
            {"name": "_value", "type": "uint256"},
        ],
        "name": "transfer",
        "outputs": [{"name": "", "type": "bool"}],
        "type": "function",
    },
]

NATIVE_DECIMALS = 18

_AMOUNT_PATTERN = re.compile(r"^(\d+\.?\d*|\.\d+)$")


def is_valid_address(candidate) -> bool:
    """
    Check that a value is a well-formed chain address.

    Accepts all-lowercase or all-uppercase hex, and mixed case only when it
    is a valid EIP-55 checksum.
    """
    if not isinstance(candidate, str):
        return False
    return Web3.is_address(candidate)


def to_checksum(address: str) -> str:
    return Web3.to_checksum_address(address)


def format_units(value: int, decimals: int = NATIVE_DECIMALS) -> str:
    """
    Format an integer amount of base units as a decimal string.

    Always keeps at least one fractional digit: 1500000 with 6 decimals
    gives "1.5", zero gives "0.0".
    """
    decimals = int(decimals)
    value = int(value)
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10 ** decimals)

    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") if decimals else ""
    return f"{sign}{whole}.{fraction_str or '0'}"


def parse_units(amount: str, decimals: int = NATIVE_DECIMALS) -> int:
    """
    Convert a human-readable decimal string to integer base units.

    Raises:
        InvalidAmountError: If the string is not a plain non-negative decimal
            or carries more fractional digits than `decimals` allows
    """
    decimals = int(decimals)
    if not isinstance(amount, str) or not _AMOUNT_PATTERN.match(amount.strip()):
        raise InvalidAmountError(f"Invalid amount: {amount!r}")

    whole, _, fraction = amount.strip().partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) > decimals:
        raise InvalidAmountError(
            f"Too many decimals in {amount!r} for a token with {decimals} decimals"
        )

    return int(whole or "0") * 10 ** decimals + int(fraction.ljust(decimals, "0") or "0")
