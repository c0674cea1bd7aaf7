"""CSS selectors for the scraped pages and a helper that compiles them."""

from __future__ import annotations

from typing import Any, Iterable

from bs4 import BeautifulSoup


class SelectorError(ValueError):
    """A CSS selector could not be compiled."""


class CompanySelectors:
    NAME = ".top-card-layout__entity-info h1"
    SUMMARY = ".top-card-layout__entity-info h4 span"
    DETAILS = ".core-section-container__content .mb-2"
    TEXT_MD = ".text-md"


class JobSelectors:
    ITEM = "li"
    TITLE = "h3"
    URL = ".base-card__full-link"
    TIME = "time"
    COMPANY_NAME = "h4 a"
    LOCATION = ".job-search-card__location"


class PeopleSelectors:
    TOP_CARD_LAYOUT = "section.top-card-layout"
    NAME = "h1.top-card-layout__title"
    DESCRIPTION = "span.top-card-link__description"
    LOCATION = ".profile-info-subheader span:first-child"
    FOLLOWERS = ".not-first-middot span:first-child"
    CONNECTIONS = ".not-first-middot span:last-child"
    SUBLINE_ITEM = "span.top-card__subline-item"
    PROJECTS_ITEMS = "section[data-section='projects'] ul > li.personal-project"
    PROJECT_TITLE = "h3"
    PROJECT_DESCRIPTION = "p.show-more-less-text__text--less"
    PROJECT_LINK = "h3 a"
    LANGUAGES_ITEMS = "section[data-section='languages'] ul > li.profile-section-card"
    LANGUAGE_NAME = "h3"
    LANGUAGE_PROFICIENCY = "h4"
    ACTIVITIES_ITEMS = (
        "section[data-section='posts'] ul[data-test-id='activities__list'] > li"
    )
    ACTIVITY_TITLE = "h3.base-main-card__title"
    ACTIVITY_LINK = "a.base-card__full-link"
    EXPERIENCE_ITEM = "li.profile-section-card"
    EXPERIENCE_EDUCATION_COMPANY_LOGO = (
        "li.profile-section-card img.profile-section-card__image"
    )
    EXPERIENCE_TITLE = "h4 > p:first-child"
    EXPERIENCE_LOCATION = "div.text-color-text-low-emphasis"
    EXPERIENCE_DESCRIPTION_MORE = "p.show-more-less-text__text--more"
    EXPERIENCE_DESCRIPTION_LESS = "p.show-more-less-text__text--less"
    EXPERIENCE_DATE_TIME = "span.date-range time"
    EXPERIENCE_DURATION = "span.date-range__duration"
    EDUCATION_ITEM = "li.profile-section-card"
    EDUCATION_ORGANIZATION = "h3"
    EDUCATION_LINK = "a"
    EDUCATION_DETAILS = "h4 > p:first-child"
    EDUCATION_DESCRIPTION = "div.text-color-text-low-emphasis"
    EDUCATION_DATE_TIME = "span.date-range time"


_COMPILER = BeautifulSoup("", "html.parser").css


def _compile(selector: str) -> Any:
    return _COMPILER.compile(selector)


def parse_selector(selectors: str | Iterable[str]) -> Any:
    """Compile a selector, or the first compilable one of several.

    The result offers ``select``, ``select_one`` and ``match`` on
    BeautifulSoup tags. Raises SelectorError when nothing compiles.
    """
    if isinstance(selectors, str):
        try:
            return _compile(selectors)
        except Exception as err:
            raise SelectorError(
                f"Failed to parse selector '{selectors}': {err}"
            ) from err

    candidates = list(selectors)
    for candidate in candidates:
        try:
            return _compile(candidate)
        except Exception:
            continue
    raise SelectorError(
        f"Failed to parse any of the provided selectors: {candidates!r}"
    )