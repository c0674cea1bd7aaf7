"""Scraper settings with defaults and environment overrides."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Mapping

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 2**32
_U64_LIMIT = 2**64


def _parse_unsigned(text: str, limit: int) -> int | None:
    """Return ``text`` as a non-negative integer below ``limit``, or None."""
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value < limit else None


@dataclass
class Config:
    """Runtime settings shared by spiders, the HTTP client and the pipeline."""

    bot_name: str = "linkedin"
    concurrent_requests: int = 1
    robotstxt_obey: bool = False
    output_dir: str = "data"
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: int = 30
    max_retries: int = 3
    retry_delay_ms: int = 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Build a config from defaults, overridden by environment variables.

        Values that do not parse as non-negative integers are ignored.
        """
        env = os.environ if environ is None else environ
        config = cls()

        numeric = (
            ("CONCURRENT_REQUESTS", "concurrent_requests", _U64_LIMIT),
            ("REQUEST_TIMEOUT", "request_timeout", _U64_LIMIT),
            ("MAX_RETRIES", "max_retries", _U32_LIMIT),
            ("RETRY_DELAY_MS", "retry_delay_ms", _U64_LIMIT),
        )
        for variable, field_name, limit in numeric:
            raw = env.get(variable)
            if raw is None:
                continue
            value = _parse_unsigned(raw, limit)
            if value is not None:
                setattr(config, field_name, value)

        user_agent = env.get("USER_AGENT")
        if user_agent is not None:
            config.user_agent = user_agent

        return config