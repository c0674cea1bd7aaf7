"""Spider for public people profile pages."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .config import Config
from .css_selectors import PeopleSelectors, parse_selector
from .http_client import HttpClient
from .items import Activity, Education, Experience, Language, PersonProfile, Project
from .spider import ParseResult, Request, Spider

logger = logging.getLogger(__name__)

_UNKNOWN = "unknown"
_PRESENT = "present"

_SUMMARY = parse_selector(PeopleSelectors.TOP_CARD_LAYOUT)
_NAME = parse_selector(PeopleSelectors.NAME)
_DESCRIPTION = parse_selector(PeopleSelectors.DESCRIPTION)
_LOCATION = parse_selector(PeopleSelectors.LOCATION)
_FOLLOWERS = parse_selector(PeopleSelectors.FOLLOWERS)
_CONNECTIONS = parse_selector(PeopleSelectors.CONNECTIONS)
_SUBLINE_ITEM = parse_selector(PeopleSelectors.SUBLINE_ITEM)

_EXP_ITEM = parse_selector(PeopleSelectors.EXPERIENCE_ITEM)
_EXP_TITLE = parse_selector(PeopleSelectors.EXPERIENCE_TITLE)
_EXP_LOCATION = parse_selector(PeopleSelectors.EXPERIENCE_LOCATION)
_EXP_DESC_MORE = parse_selector(PeopleSelectors.EXPERIENCE_DESCRIPTION_MORE)
_EXP_DESC_LESS = parse_selector(PeopleSelectors.EXPERIENCE_DESCRIPTION_LESS)
_EXP_DATE_TIME = parse_selector(PeopleSelectors.EXPERIENCE_DATE_TIME)
_EXP_DURATION = parse_selector(PeopleSelectors.EXPERIENCE_DURATION)
_EXP_COMPANY_LOGO = parse_selector(PeopleSelectors.EXPERIENCE_EDUCATION_COMPANY_LOGO)

_EDU_ITEM = parse_selector(PeopleSelectors.EDUCATION_ITEM)
_EDU_ORG = parse_selector(PeopleSelectors.EDUCATION_ORGANIZATION)
_EDU_LINK = parse_selector(PeopleSelectors.EDUCATION_LINK)
_EDU_DETAILS = parse_selector(PeopleSelectors.EDUCATION_DETAILS)
_EDU_DESC = parse_selector(PeopleSelectors.EDUCATION_DESCRIPTION)
_EDU_DATE_TIME = parse_selector(PeopleSelectors.EDUCATION_DATE_TIME)

_PROJECTS_ITEMS = parse_selector(PeopleSelectors.PROJECTS_ITEMS)
_PROJECT_TITLE = parse_selector(PeopleSelectors.PROJECT_TITLE)
_PROJECT_DESCRIPTION = parse_selector(PeopleSelectors.PROJECT_DESCRIPTION)
_PROJECT_LINK = parse_selector(PeopleSelectors.PROJECT_LINK)

_LANGUAGES_ITEMS = parse_selector(PeopleSelectors.LANGUAGES_ITEMS)
_LANGUAGE_NAME = parse_selector(PeopleSelectors.LANGUAGE_NAME)
_LANGUAGE_PROFICIENCY = parse_selector(PeopleSelectors.LANGUAGE_PROFICIENCY)

_ACTIVITIES_ITEMS = parse_selector(PeopleSelectors.ACTIVITIES_ITEMS)
_ACTIVITY_TITLE = parse_selector(PeopleSelectors.ACTIVITY_TITLE)
_ACTIVITY_LINK = parse_selector(PeopleSelectors.ACTIVITY_LINK)


def truncate_url(url: str) -> str:
    """Return ``url`` without its query string."""
    return url.split("?", 1)[0]


def parse_date_range(
    date_ranges: Sequence[str],
) -> tuple[Optional[str], Optional[str]]:
    """Turn the dates of a range into a (start, end) pair.

    Two dates give both ends, one date means the range is still open
    and ends at "present", anything else gives no dates at all.
    """
    if len(date_ranges) == 2:
        return date_ranges[0], date_ranges[1]
    if len(date_ranges) == 1:
        return date_ranges[0], _PRESENT
    return None, None


def _texts(element: Any, selector: Any) -> list[str]:
    """Stripped, non-empty texts of every match of ``selector``."""
    stripped = (found.get_text().strip() for found in selector.select(element))
    return [text for text in stripped if text]


def _extract_text(element: Any, selector: Any) -> Optional[str]:
    found = selector.select_one(element)
    if found is None:
        return None
    text = found.get_text().strip()
    return text or None


def _extract_attr(element: Any, selector: Any, attribute: str) -> Optional[str]:
    found = selector.select_one(element)
    if found is None:
        return None
    value = found.get(attribute)
    return value if isinstance(value, str) else None


def _extract_link(element: Any, selector: Any) -> Optional[str]:
    href = _extract_attr(element, selector, "href")
    return truncate_url(href) if href is not None else None


class PeopleProfileSpider(Spider):
    """Scrapes public profile pages for the given profile handles."""

    name = "linkedin_people_profile"

    def __init__(
        self,
        config: Config,
        profiles: Sequence[str],
        http_client: Optional[HttpClient] = None,
    ) -> None:
        super().__init__(config, http_client)
        self.profiles = list(profiles)

    def build_url(self, profile: str) -> str:
        """Return the public page address of ``profile``."""
        return f"https://linkedin.com/in/{profile}/"

    async def start_requests(self) -> list[Request]:
        requests = []
        for profile in self.profiles:
            url = self.build_url(profile)
            requests.append(
                Request(url).with_meta("profile", profile).with_meta("linkedin_url", url)
            )
        return requests

    @staticmethod
    def _parse_experience(document: Any) -> list[Experience]:
        experience = []
        for block in _EXP_ITEM.select(document):
            start_time, end_time = parse_date_range(_texts(block, _EXP_DATE_TIME))
            description = _extract_text(block, _EXP_DESC_MORE)
            if description is None:
                description = _extract_text(block, _EXP_DESC_LESS)
            experience.append(
                Experience(
                    organization_profile=_extract_link(block, _EXP_TITLE),
                    location=_extract_text(block, _EXP_LOCATION),
                    description=description,
                    duration=_extract_text(block, _EXP_DURATION),
                    start_time=start_time,
                    end_time=end_time,
                    logo=_extract_attr(block, _EXP_COMPANY_LOGO, "src"),
                    title=_extract_text(block, _EXP_TITLE),
                )
            )
        return experience

    @staticmethod
    def _parse_education(document: Any) -> list[Education]:
        education = []
        for block in _EDU_ITEM.select(document):
            course_details = " ".join(_texts(block, _EDU_DETAILS))
            start_time, end_time = parse_date_range(_texts(block, _EDU_DATE_TIME))
            education.append(
                Education(
                    organization=_extract_text(block, _EDU_ORG) or "",
                    organization_profile=_extract_link(block, _EDU_LINK),
                    course_details=course_details or None,
                    description=_extract_text(block, _EDU_DESC),
                    start_time=start_time,
                    end_time=end_time,
                )
            )
        return education

    @staticmethod
    def _parse_projects(document: Any) -> list[Project]:
        return [
            Project(
                name=_extract_text(block, _PROJECT_TITLE),
                description=_extract_text(block, _PROJECT_DESCRIPTION),
                url=_extract_link(block, _PROJECT_LINK),
            )
            for block in _PROJECTS_ITEMS.select(document)
        ]

    @staticmethod
    def _parse_languages(document: Any) -> list[Language]:
        return [
            Language(
                name=_extract_text(block, _LANGUAGE_NAME),
                proficiency=_extract_text(block, _LANGUAGE_PROFICIENCY),
            )
            for block in _LANGUAGES_ITEMS.select(document)
        ]

    @staticmethod
    def _parse_activities(document: Any) -> list[Activity]:
        return [
            Activity(
                title=_extract_text(block, _ACTIVITY_TITLE),
                url=_extract_link(block, _ACTIVITY_LINK),
            )
            for block in _ACTIVITIES_ITEMS.select(document)
        ]

    @staticmethod
    def _location_followers_connections(
        summary_box: Any,
    ) -> tuple[Optional[str], Optional[str], Optional[str]]:
        location = _extract_text(summary_box, _LOCATION)
        followers = _extract_text(summary_box, _FOLLOWERS)
        connections = _extract_text(summary_box, _CONNECTIONS)

        if location is None or followers is None or connections is None:
            for item in _texts(summary_box, _SUBLINE_ITEM):
                if "followers" in item and followers is None:
                    followers = item.replace(" followers", "")
                elif "connections" in item and connections is None:
                    connections = item.replace(" connections", "")
                elif location is None:
                    location = item

        return location, followers, connections

    async def parse(self, response: str, request: Request) -> ParseResult:
        profile = request.meta.get("profile", _UNKNOWN)
        url = request.meta.get("linkedin_url", _UNKNOWN)
        document = self._parse_document(response)

        summary_box = _SUMMARY.select_one(document)
        if summary_box is not None:
            location, followers, connections = self._location_followers_connections(
                summary_box
            )
            name = _extract_text(summary_box, _NAME) or ""
            description = _extract_text(summary_box, _DESCRIPTION) or ""
        else:
            location = followers = connections = None
            name = description = ""

        person = PersonProfile(
            profile=profile,
            url=url,
            name=name,
            description=description,
            location=location,
            followers=followers,
            connections=connections,
            experience=self._parse_experience(document),
            education=self._parse_education(document),
            projects=self._parse_projects(document),
            languages=self._parse_languages(document),
            activities=self._parse_activities(document),
        )
        return [person], []