"""
Per-field contract read results with named fallback defaults.

A failed read of one field (e.g. a token without `name()`) never fails the
others: each read produces a FieldResult, and `read_with_default` swaps in the
field's default from FIELD_DEFAULTS.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


FIELD_DEFAULTS: Dict[str, Any] = {
    "symbol": "UNKNOWN",
    "name": "Unknown Token",
    "decimals": 18,
    "balanceOf": 0,
    "totalSupply": 0,
}


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of a single contract read."""
    field: str
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_default(self, default: T) -> T:
        return self.value if self.ok else default


async def read_field(field: str, address: str, call: Awaitable[T]) -> FieldResult[T]:
    """Await a contract read, capturing any failure instead of raising."""
    try:
        return FieldResult(field, value=await call)
    except Exception as e:
        logger.warning("%s failed for %s: %s", field, address, e)
        return FieldResult(field, error=e)


async def read_with_default(field: str, address: str, call: Awaitable[T]) -> T:
    """Await a contract read, falling back to the field's named default."""
    result = await read_field(field, address, call)
    return result.or_default(FIELD_DEFAULTS[field])
