"""Hooks that can inspect spider input, output and failures."""

from __future__ import annotations

import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)


class SpiderMiddleware:
    """Base middleware: passes everything through unchanged."""

    async def process_spider_input(self, response: str, spider_name: str) -> None:
        """Check that a raw response is text before it is parsed."""
        if not isinstance(response, str):
            raise TypeError(
                f"spider {spider_name} got a response of type "
                f"{type(response).__name__}, expected str"
            )

    async def process_spider_output(
        self, items: Iterable[Any], spider_name: str
    ) -> list[Any]:
        """Return the items a spider produced, possibly altered."""
        return list(items)

    async def process_spider_exception(
        self, error: BaseException, spider_name: str
    ) -> None:
        """React to an error raised while a spider worked."""
        return None


class LinkedinSpiderMiddleware(SpiderMiddleware):
    """Middleware that logs spider errors."""

    async def process_spider_exception(
        self, error: BaseException, spider_name: str
    ) -> None:
        logger.info("Spider %s encountered error: %s", spider_name, error)