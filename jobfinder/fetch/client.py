"""
HTML fetch client.

One GET per call with browser-like headers and a hard deadline. Failures are
mapped onto the FetchError family; nothing is retried here.
"""

import logging
from typing import Dict, Optional

import httpx

from jobfinder.config.settings import Settings, settings as default_settings
from jobfinder.core.errors import FetchHttpError, FetchNetworkError, FetchTimeout
from jobfinder.fetch.headers import browser_headers

logger = logging.getLogger(__name__)


class FetchClient:
    """
    Thin wrapper over httpx.AsyncClient.

    `transport` lets tests substitute httpx.MockTransport for the network.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or default_settings
        self._transport = transport

    def build_headers(self) -> Dict[str, str]:
        return browser_headers(self.settings.ACCEPT_LANGUAGE, self.settings.USER_AGENT)

    async def fetch_html(self, url: str, timeout_ms: Optional[int] = None) -> str:
        """
        GET `url` and return the body text.

        Raises:
            FetchTimeout: the deadline elapsed.
            FetchHttpError: the final response was not 2xx.
            FetchNetworkError: DNS, connection or protocol failure.
        """
        timeout_ms = timeout_ms or self.settings.FETCH_TIMEOUT_MS
        logger.info(f"Fetching {url}")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(timeout_ms / 1000),
                follow_redirects=True,
                headers=self.build_headers(),
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise FetchTimeout(url, timeout_ms) from e
        except httpx.TransportError as e:
            raise FetchNetworkError(url, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise FetchHttpError(url, response.status_code)

        logger.debug(f"Fetched {len(response.text)} chars from {url}")
        return response.text
