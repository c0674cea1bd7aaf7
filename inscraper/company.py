"""Spider for company profile pages."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .config import Config
from .css_selectors import CompanySelectors, parse_selector
from .http_client import HttpClient
from .items import CompanyProfile
from .spider import ParseResult, Request, Spider

logger = logging.getLogger(__name__)

_NOT_FOUND = "not-found"


def _first_text(root: Any, selector: Any) -> Optional[str]:
    element = selector.select_one(root)
    if element is None:
        return None
    return element.get_text().strip()


class CompanyProfileSpider(Spider):
    """Scrapes name, summary and key details from company pages."""

    name = "linkedin_company_profile"

    def __init__(
        self,
        config: Config,
        company_pages: Sequence[str],
        http_client: Optional[HttpClient] = None,
    ) -> None:
        super().__init__(config, http_client)
        self.company_pages = list(company_pages)
        self._name_selector = parse_selector(CompanySelectors.NAME)
        self._summary_selector = parse_selector(CompanySelectors.SUMMARY)
        self._details_selector = parse_selector(CompanySelectors.DETAILS)
        self._text_selector = parse_selector(CompanySelectors.TEXT_MD)

    def _extract_detail(self, details: list[Any], index: int) -> Optional[str]:
        if index >= len(details):
            return None
        texts = [el.get_text().strip() for el in self._text_selector.select(details[index])]
        return texts[1] if len(texts) > 1 else None

    async def start_requests(self) -> list[Request]:
        return [
            Request(url).with_meta("company_index", str(index))
            for index, url in enumerate(self.company_pages)
        ]

    async def parse(self, response: str, request: Request) -> ParseResult:
        company_index = self._meta_number(request, "company_index")
        logger.info("Parsing company %d of %d", company_index + 1, len(self.company_pages))

        document = self._parse_document(response)
        name = _first_text(document, self._name_selector)
        summary = _first_text(document, self._summary_selector)
        details = list(self._details_selector.select(document))

        company = CompanyProfile(
            name=name if name is not None else _NOT_FOUND,
            summary=summary if summary is not None else _NOT_FOUND,
            industry=self._extract_detail(details, 1),
            size=self._extract_detail(details, 2),
            founded=self._extract_detail(details, 5),
        )
        return [company], []