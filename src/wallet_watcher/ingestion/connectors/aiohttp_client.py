"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind IHttpClient abstraction.
"""

import asyncio
from typing import Any

import aiohttp

from wallet_watcher.infrastructure.observability import get_infrastructure_logger
from wallet_watcher.ingestion.adapters.exceptions import (
    MalformedBodyError,
    TransportError,
)
from wallet_watcher.ingestion.config.value_objects import HttpClientConfig
from wallet_watcher.ingestion.ports.http import (
    HttpResponse,
    IHttpClient,
)

log = get_infrastructure_logger("aiohttp-client")


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp."""

    def __init__(self, config: HttpClientConfig | None = None):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
        """
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout override

        Returns:
            HttpResponse with status, body, headers. The body is decoded JSON
            for a 200 response and raw text otherwise.

        Raises:
            TransportError: On connection errors or timeouts
            MalformedBodyError: On a 200 response that is empty or not JSON
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        try:
            async with session.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout_obj,
            ) as resp:
                if resp.status == 200:
                    if not (await resp.read()).strip():
                        raise MalformedBodyError(
                            f"Response from {url} has an empty body",
                            status_code=resp.status,
                            endpoint=url,
                        )
                    try:
                        # Explorers often serve JSON as text/html
                        body = await resp.json(content_type=None)
                    except ValueError as e:
                        raise MalformedBodyError(
                            f"Response from {url} is not valid JSON: {e}",
                            status_code=resp.status,
                            endpoint=url,
                        ) from e
                else:
                    # Error pages are not always UTF-8
                    body = await resp.text(errors="replace")
                return HttpResponse(
                    status_code=resp.status,
                    body=body,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.debug("http_request_failed", url=url, error=repr(e))
            raise TransportError(
                f"Request to {url} failed: {e!r}", endpoint=url
            ) from e

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
