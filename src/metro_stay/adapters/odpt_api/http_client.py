"""HTTP client for ODPT API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from metro_stay.adapters.api_rate_limiter import ApiRateLimiter
from metro_stay.adapters.api_request_logger import log_api_request
from metro_stay.adapters.odpt_api.constants import ODPT_BASE_URL

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

# ODPT throttles bursts; space requests like a polite batch client
ODPT_MIN_DELAY_SECONDS = 0.2


class OdptHttpClient:
    """HTTP client for the ODPT v4 API."""

    def __init__(
        self,
        session: "ClientSession | None",
        api_key: str,
        min_delay_seconds: float = ODPT_MIN_DELAY_SECONDS,
        timeout_seconds: float = 10,
        base_url: str = ODPT_BASE_URL,
    ) -> None:
        """Initialize with an aiohttp session and consumer key.

        Args:
            session: aiohttp ClientSession, or None to disable requests.
            api_key: ODPT consumer key; an empty key disables requests.
            min_delay_seconds: Minimum delay between ODPT requests.
            timeout_seconds: Total timeout per request.
            base_url: API base URL.
        """
        self._session = session
        self._api_key = api_key
        self._min_delay_seconds = min_delay_seconds
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._base_url = base_url
        self._rate_limiter: ApiRateLimiter | None = None

    @property
    def is_configured(self) -> bool:
        """Whether requests can be made at all."""
        return self._session is not None and bool(self._api_key)

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                "odpt_api", self._min_delay_seconds
            )
        return self._rate_limiter

    async def get_resources(
        self, resource_type: str, params: dict[str, str]
    ) -> list[dict[str, Any]]:
        """Fetch a list of ODPT resources.

        Args:
            resource_type: Resource type, e.g. "odpt:Station".
            params: Query filters.

        Returns:
            Resource dictionaries, or an empty list if the request failed.
        """
        if self._session is None:
            return []
        if not self._api_key:
            logger.warning(f"ODPT consumer key missing, cannot fetch {resource_type}")
            return []

        url = f"{self._base_url}/{resource_type}"
        query = {**params, "acl:consumerKey": self._api_key}
        log_api_request("odpt", "GET", url, query)

        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire()

        try:
            async with self._session.get(url, params=query, timeout=self._timeout) as response:
                return await self._handle_response(response, resource_type)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error fetching ODPT {resource_type}: {e}")
            return []

    @staticmethod
    async def _handle_response(
        response: "ClientResponse", resource_type: str
    ) -> list[dict[str, Any]]:
        if response.status == 429:
            logger.warning(f"ODPT rate limit exceeded for {resource_type}")
            return []
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"ODPT API returned status {response.status} for {resource_type}: "
                f"{response_text[:200]}"
            )
            return []

        data = await response.json()
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, dict)]
