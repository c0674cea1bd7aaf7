"""Records produced by the spiders."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CompanyProfile:
    name: str
    summary: str
    industry: Optional[str] = None
    size: Optional[str] = None
    founded: Optional[str] = None


@dataclass
class JobListing:
    job_title: str
    job_detail_url: str
    job_listed: str
    company_name: str
    company_link: str
    company_location: str


@dataclass
class Experience:
    organization_profile: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    logo: Optional[str] = None
    title: Optional[str] = None


@dataclass
class Education:
    organization: str = ""
    organization_profile: Optional[str] = None
    course_details: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


@dataclass
class Project:
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Language:
    name: Optional[str] = None
    proficiency: Optional[str] = None


@dataclass
class Activity:
    title: Optional[str] = None
    url: Optional[str] = None


@dataclass
class PersonProfile:
    profile: str = ""
    url: str = ""
    name: str = ""
    description: str = ""
    location: Optional[str] = None
    followers: Optional[str] = None
    connections: Optional[str] = None
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    languages: list[Language] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)


def item_to_dict(item: Any) -> dict[str, Any]:
    """Return a plain dictionary for an item, keeping field order.

    Dictionaries are copied; anything that is neither raises TypeError.
    """
    if isinstance(item, dict):
        return dict(item)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    raise TypeError(f"cannot convert {type(item).__name__} to a dictionary")