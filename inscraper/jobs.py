"""Spider for the public job search listing."""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

from .config import Config
from .css_selectors import JobSelectors, parse_selector
from .http_client import HttpClient
from .items import JobListing
from .spider import ParseResult, Request, Spider

logger = logging.getLogger(__name__)

_NOT_FOUND = "not-found"
_SEARCH_URL = (
    "https://www.linkedin.com/jobs-guest/jobs/api/seeMoreJobPostings/search"
    "?keywords={keywords}&location={location}&start={start}"
)

_ITEM = parse_selector(JobSelectors.ITEM)
_TITLE = parse_selector(JobSelectors.TITLE)
_URL = parse_selector(JobSelectors.URL)
_TIME = parse_selector(JobSelectors.TIME)
_COMPANY_NAME = parse_selector(JobSelectors.COMPANY_NAME)
_LOCATION = parse_selector(JobSelectors.LOCATION)


def truncate_url_params(url: str) -> str:
    """Return ``url`` without its query string."""
    return url.split("?", 1)[0]


def _extract_text(element: Any, selector: Any) -> str:
    found = selector.select_one(element)
    return found.get_text().strip() if found is not None else _NOT_FOUND


def _extract_href(element: Any, selector: Any) -> str:
    found = selector.select_one(element)
    if found is None:
        return _NOT_FOUND
    href = found.get("href")
    return href if href is not None else _NOT_FOUND


class JobsSpider(Spider):
    """Pages through job search results for keywords and a location."""

    name = "linkedin_jobs"

    def __init__(
        self,
        config: Config,
        keywords: str,
        location: str,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        super().__init__(config, http_client)
        self.keywords = keywords
        self.location = location

    def build_url(self, start: int) -> str:
        """Return the search URL for results beginning at ``start``."""
        return _SEARCH_URL.format(
            keywords=quote(self.keywords, safe=""),
            location=quote(self.location, safe=""),
            start=start,
        )

    async def start_requests(self) -> list[Request]:
        return [Request(self.build_url(0)).with_meta("start", "0")]

    async def parse(self, response: str, request: Request) -> ParseResult:
        start_offset = self._meta_number(request, "start")
        document = self._parse_document(response)

        jobs = list(_ITEM.select(document))
        logger.info("Jobs found on page: %d", len(jobs))

        items: list[JobListing] = []
        seen_urls: set[str] = set()
        for job in jobs:
            url = truncate_url_params(_extract_href(job, _URL))
            if url == _NOT_FOUND or url in seen_urls:
                continue
            seen_urls.add(url)
            items.append(
                JobListing(
                    job_title=_extract_text(job, _TITLE),
                    job_detail_url=url,
                    job_listed=_extract_text(job, _TIME),
                    company_name=_extract_text(job, _COMPANY_NAME),
                    company_link=_extract_href(job, _COMPANY_NAME),
                    company_location=_extract_text(job, _LOCATION),
                )
            )

        logger.info("Unique jobs collected: %d", len(items))

        next_requests: list[Request] = []
        if jobs:
            next_start = start_offset + len(jobs)
            logger.info("Requesting next page with start offset: %d", next_start)
            next_requests.append(
                Request(self.build_url(next_start)).with_meta("start", str(next_start))
            )
        return items, next_requests