"""
USD prices from the CoinGecko simple-price endpoint.
"""

import logging
from typing import Optional

import httpx

from .config import COINGECKO_API_URL

logger = logging.getLogger(__name__)


class CoinGeckoPriceFeed:
    """
    Best-effort USD price lookup by token symbol.

    The lower-cased symbol is used as the CoinGecko id. Any failure, or a
    missing entry, yields None.
    """

    def __init__(
        self,
        base_url: str = COINGECKO_API_URL,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Create the HTTP client on first use"""
        if self._http_client is None:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["x-cg-demo-api-key"] = self.api_key

            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._http_client

    async def close(self):
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def get_price(self, symbol: str) -> Optional[float]:
        """
        Get the USD price for a symbol.

        Args:
            symbol: Token symbol, e.g. 'CELO'

        Returns:
            Price in USD, or None if unavailable
        """
        try:
            key = symbol.lower()
            response = await self._get_client().get(
                "/simple/price",
                params={"ids": key, "vs_currencies": "usd"},
            )
            response.raise_for_status()
            data = response.json()
        except Exception as e:
            logger.error("Price fetch error for %s: %s", symbol, e)
            return None

        entry = data.get(key) if isinstance(data, dict) else None
        price = entry.get("usd") if isinstance(entry, dict) else None
        if isinstance(price, bool) or not isinstance(price, (int, float)) or not price:
            return None
        return float(price)
