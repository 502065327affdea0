"""
Elevation API client.

Forwards a single coordinate lookup to the upstream elevation
service (OpenTopoData by default) and returns its JSON unchanged.
The payload is not stored or validated. No retries.
"""

import logging
from typing import Any, Optional

import httpx

from tracklog.config import Settings
from tracklog.shared.errors import UpstreamError

logger = logging.getLogger(__name__)


class ElevationClient:
    """
    Async client for the upstream elevation API.

    Usage:
        client = ElevationClient.from_settings(settings)
        payload = await client.lookup("46.5", "7.9")
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ElevationClient":
        return cls(settings.elevation_api_url, timeout=settings.elevation_timeout)

    async def lookup(self, lat: str, lon: str) -> Any:
        """
        Fetch elevation for one coordinate.

        Args:
            lat: Latitude as received from the caller
            lon: Longitude as received from the caller

        Returns:
            Decoded JSON body of the upstream response

        Raises:
            UpstreamError: On transport failure, non-2xx status or bad JSON
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(
                    self.api_url,
                    params={"locations": f"{lat},{lon}"}
                )
            except httpx.HTTPError as e:
                logger.error(f"Elevation fetch failed: {e!r}")
                raise UpstreamError(f"Elevation request failed: {type(e).__name__}") from e

        if not response.is_success:
            logger.error(f"Elevation fetch failed: upstream status {response.status_code}")
            raise UpstreamError(f"Elevation API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error("Elevation fetch failed: response is not JSON")
            raise UpstreamError("Elevation API returned invalid JSON") from e
