"""
Singleton street store client with rate limiting using aiolimiter.
"""
import asyncio
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from aiohttp import ClientError, ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from loguru import logger

from street_resolver.config import (
    CONCURRENCY,
    HTTP_TIMEOUT_SECONDS,
    STREETS_API_KEY,
    STREETS_API_URL,
)
from street_resolver.exceptions import StreetStoreError


class StreetStoreClient:
    """
    Singleton client for the street store HTTP API.

    Streets are partitioned per restaurant and ZIP code; one GET returns the
    whole partition. Uses AsyncLimiter for rate limiting instead of semaphores.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not StreetStoreClient._initialized:
            self.api_key = STREETS_API_KEY
            self.base_url = STREETS_API_URL.rstrip("/")
            # Token bucket: CONCURRENCY requests per second
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            self._session: Optional[ClientSession] = None
            StreetStoreClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=HTTP_TIMEOUT_SECONDS))
        return self._session

    def _streets_url(self, restaurant_id: str, zip_code: str) -> str:
        return (
            f"{self.base_url}/restaurants/{quote(str(restaurant_id), safe='')}"
            f"/zips/{quote(str(zip_code), safe='')}/streets"
        )

    async def get_streets(self, restaurant_id: str, zip_code: str) -> List[Dict[str, Any]]:
        """
        Fetch every stored street item for one restaurant and ZIP code.

        Args:
            restaurant_id: Restaurant the street list belongs to.
            zip_code: ZIP code partition to read.

        Returns:
            List of street item dictionaries. Empty when nothing has been
            seeded for the partition.

        Raises:
            StreetStoreError: On any transport failure or unexpected status.
        """
        url = self._streets_url(restaurant_id, zip_code)
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        async with self.rate_limiter:
            session = await self._get_session()
            try:
                async with session.get(url, headers=headers) as resp:
                    if resp.status == 404:
                        return []
                    if resp.status != 200:
                        detail = await resp.text()
                        raise StreetStoreError(resp.status, detail[:200])
                    data = await resp.json()
            except (ClientError, asyncio.TimeoutError, ValueError) as e:
                logger.debug(f"⚠️ Street store GET failed: {e}")
                raise StreetStoreError(None, str(e)) from e

        items = data.get("items", []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise StreetStoreError(200, f"Unexpected response shape: {type(items).__name__}")
        return items

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
