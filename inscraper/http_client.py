"""HTTP client with retries for rate limits, server errors and failures."""

from __future__ import annotations

import asyncio
import logging

import httpx

from .config import Config

logger = logging.getLogger(__name__)


class HttpError(Exception):
    """A request failed for good."""


def _status_text(response: httpx.Response) -> str:
    reason = response.reason_phrase
    return f"{response.status_code} {reason}" if reason else str(response.status_code)


class HttpClient:
    """Asynchronous GET client configured from a :class:`Config`."""

    def __init__(
        self,
        config: Config,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(float(config.request_timeout)),
            headers={"User-Agent": config.user_agent},
            follow_redirects=True,
            limits=httpx.Limits(max_keepalive_connections=10),
            transport=transport,
        )

    async def get(self, url: str) -> httpx.Response:
        """GET ``url``, retrying on 429, 5xx and transport failures.

        Raises HttpError on a client error or when transport failures
        outlast the retries. A server error that outlasts them is returned.
        """
        retries = 0
        max_retries = self.config.max_retries
        delay = self.config.retry_delay_ms / 1000

        while True:
            try:
                response = await self._client.get(url)
            except httpx.RequestError as err:
                logger.error("Request failed: %s", err)
                if retries < max_retries:
                    retries += 1
                    logger.warning(
                        "Retrying request (attempt %d/%d)", retries, max_retries + 1
                    )
                    await asyncio.sleep(delay * retries)
                    continue
                raise HttpError(
                    f"Request failed after {max_retries} retries: {err}"
                ) from err

            if response.is_success:
                return response

            status = response.status_code
            if status == 429:
                logger.warning("Rate limited (429), retrying after delay")
                if retries < max_retries:
                    retries += 1
                    await asyncio.sleep(delay * retries)
                    continue

            if response.is_server_error:
                logger.error("Server error: %s, retrying", _status_text(response))
                if retries < max_retries:
                    retries += 1
                    await asyncio.sleep(delay * retries)
                    continue

            if response.is_client_error:
                logger.error("Client error: %s", _status_text(response))
                raise HttpError(f"HTTP client error: {_status_text(response)}")

            return response

    async def get_text(self, url: str) -> str:
        """GET ``url`` and return the decoded body."""
        response = await self.get(url)
        return response.text

    async def aclose(self) -> None:
        """Release the underlying connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()