"""Requests and the base class that every spider builds on."""

from __future__ import annotations

import abc
import html
import re
from dataclasses import dataclass, field
from typing import Any, Optional

from bs4 import BeautifulSoup

from .config import Config
from .http_client import HttpClient

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass
class Request:
    """A page to fetch, with string metadata carried to the parser."""

    url: str
    meta: dict[str, str] = field(default_factory=dict)

    def with_meta(self, key: str, value: str) -> "Request":
        """Store ``value`` under ``key`` and return this request."""
        self.meta[key] = value
        return self


ParseResult = tuple[list[Any], list[Request]]


class Spider(abc.ABC):
    """A crawler that turns fetched pages into items and further requests."""

    name: str = "spider"

    def __init__(self, config: Config, http_client: Optional[HttpClient] = None) -> None:
        self.config = config
        self.http_client = http_client if http_client is not None else HttpClient(config)

    @abc.abstractmethod
    async def start_requests(self) -> list[Request]:
        """Return the requests the crawl begins with."""

    @abc.abstractmethod
    async def parse(self, response: str, request: Request) -> ParseResult:
        """Turn a response body into items and follow-up requests."""

    async def execute_request(self, request: Request) -> ParseResult:
        """Fetch ``request`` and parse what comes back."""
        text = await self.http_client.get_text(request.url)
        return await self.parse(text, request)

    @staticmethod
    def _parse_document(response: str) -> BeautifulSoup:
        """Decode HTML entities in ``response`` and parse it."""
        return BeautifulSoup(html.unescape(response), "html.parser")

    @staticmethod
    def _meta_number(request: Request, key: str) -> int:
        """Return the meta value under ``key`` as an integer, or 0."""
        raw = request.meta.get(key)
        if raw is None or not _UNSIGNED.fullmatch(raw):
            return 0
        return int(raw)