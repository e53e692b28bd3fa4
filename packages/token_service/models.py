"""
Token value objects returned by the token service.
"""

from dataclasses import dataclass, asdict
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from .networks import is_native


def compute_value(balance: str, price: Optional[float]) -> Optional[float]:
    """USD value of a balance, only when a price is known."""
    if not price:
        return None
    return float(balance) * price


@dataclass(frozen=True)
class TokenMetadata:
    """ERC20 metadata: symbol, name and decimals."""
    address: str
    symbol: str
    name: str
    decimals: int

    def with_balance(self, balance: str, price: Optional[float] = None) -> "Token":
        """Combine metadata with a balance and optional price."""
        return Token(
            address=self.address,
            symbol=self.symbol,
            name=self.name,
            decimals=self.decimals,
            balance=balance,
            price=price,
            value=compute_value(balance, price),
        )


@dataclass(frozen=True)
class Token:
    """A token holding as shown in the wallet."""
    address: str
    symbol: str
    name: str
    decimals: int
    balance: str
    price: Optional[float] = None
    value: Optional[float] = None

    @property
    def is_native(self) -> bool:
        """True for the native coin (zero address)."""
        return is_native(self.address)

    @property
    def balance_decimal(self) -> Decimal:
        try:
            return Decimal(self.balance)
        except InvalidOperation:
            return Decimal("0")

    @property
    def balance_formatted(self) -> str:
        """Return formatted balance string."""
        return f"{self.balance_decimal:.6f} {self.symbol}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
