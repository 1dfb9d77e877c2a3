"""
Dataclasses for the résumé document: one Profile plus the section records.

Every ``from_dict`` repairs what it reads: missing fields take their defaults,
values of the wrong shape fall back to the type's empty value, and unknown
keys are ignored. Both snake_case keys and the camelCase keys of older
persisted snapshots are accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

from ..components.line_codec import split_lines
from .types import is_sequence

logger = logging.getLogger(__name__)

DEFAULT_RATING = 4
FEATURED_SKILL_SLOTS = 6


def _pick(d: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in d:
            return d[key]
    return None


def _text(d: Dict[str, Any], *keys: str) -> str:
    value = _pick(d, *keys)
    if value is None:
        return ""
    if not isinstance(value, str):
        logger.warning(f"Field {keys[0]!r} is {type(value).__name__}, not text; using ''")
        return ""
    return value


def _lines(d: Dict[str, Any], *keys: str) -> List[str]:
    value = _pick(d, *keys)
    if value is None:
        return []
    if not is_sequence(value):
        logger.warning(f"Field {keys[0]!r} is {type(value).__name__}, not a list; using []")
        return []
    lines: List[str] = []
    for item in value:
        if not isinstance(item, str):
            logger.warning(f"Dropping non-text line {item!r} from {keys[0]!r}")
            continue
        # a stored line may not carry its own line breaks
        lines.extend(split_lines(item) or [item])
    return lines


def _records(d: Dict[str, Any], *keys: str) -> List[Dict[str, Any]]:
    value = _pick(d, *keys)
    if value is None:
        return []
    if not is_sequence(value):
        logger.warning(f"Section {keys[0]!r} is {type(value).__name__}, not a list; using []")
        return []
    records = []
    for item in value:
        if isinstance(item, Mapping):
            records.append(item)
        else:
            logger.warning(f"Dropping malformed entry {item!r} from {keys[0]!r}")
    return records


def _mapping(d: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    value = _pick(d, *keys)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        logger.warning(f"Field {keys[0]!r} is {type(value).__name__}, not a mapping; using {{}}")
        return {}
    return value


def field_names(record: Any) -> tuple[str, ...]:
    return tuple(f.name for f in fields(record))


@dataclass
class Profile:
    name: str = ""
    email: str = ""
    phone: str = ""
    url: str = ""
    summary: str = ""
    location: str = ""

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Profile":
        return Profile(
            name=_text(d, "name"),
            email=_text(d, "email"),
            phone=_text(d, "phone"),
            url=_text(d, "url"),
            summary=_text(d, "summary"),
            location=_text(d, "location"),
        )


@dataclass
class WorkExperience:
    company: str = ""
    job_title: str = ""
    date: str = ""
    descriptions: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "WorkExperience":
        return WorkExperience(
            company=_text(d, "company"),
            job_title=_text(d, "job_title", "jobTitle"),
            date=_text(d, "date"),
            descriptions=_lines(d, "descriptions"),
        )


@dataclass
class Education:
    school: str = ""
    degree: str = ""
    gpa: str = ""
    date: str = ""
    descriptions: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Education":
        return Education(
            school=_text(d, "school"),
            degree=_text(d, "degree"),
            gpa=_text(d, "gpa"),
            date=_text(d, "date"),
            descriptions=_lines(d, "descriptions"),
        )


@dataclass
class Project:
    project: str = ""
    date: str = ""
    descriptions: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Project":
        return Project(
            project=_text(d, "project"),
            date=_text(d, "date"),
            descriptions=_lines(d, "descriptions"),
        )


@dataclass
class FeaturedSkill:
    skill: str = ""
    rating: int = DEFAULT_RATING

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "FeaturedSkill":
        rating = d.get("rating", DEFAULT_RATING)
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            logger.warning(f"Rating {rating!r} is not a number; using {DEFAULT_RATING}")
            rating = DEFAULT_RATING
        return FeaturedSkill(skill=_text(d, "skill"), rating=rating)


@dataclass
class Skills:
    featured_skills: List[FeaturedSkill] = field(default_factory=list)
    descriptions: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Skills":
        return Skills(
            featured_skills=[
                FeaturedSkill.from_dict(s)
                for s in _records(d, "featured_skills", "featuredSkills")
            ],
            descriptions=_lines(d, "descriptions"),
        )

    @staticmethod
    def initial() -> "Skills":
        return Skills(featured_skills=[FeaturedSkill() for _ in range(FEATURED_SKILL_SLOTS)])


@dataclass
class Custom:
    descriptions: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Custom":
        return Custom(descriptions=_lines(d, "descriptions"))


@dataclass
class Resume:
    profile: Profile = field(default_factory=Profile)
    work_experiences: List[WorkExperience] = field(default_factory=list)
    educations: List[Education] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    custom: Custom = field(default_factory=Custom)

    @staticmethod
    def initial() -> "Resume":
        """Blank document offered at the start of a fresh session."""
        return Resume(
            work_experiences=[WorkExperience()],
            educations=[Education()],
            projects=[Project()],
            skills=Skills.initial(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain snake_case mapping, the layout ``from_dict`` reads back."""
        return asdict(self)

    @staticmethod
    def from_dict(d: Optional[Mapping[str, Any]]) -> "Resume":
        if not isinstance(d, Mapping):
            logger.warning(f"Resume snapshot is {type(d).__name__}, not a mapping; using blank document")
            return Resume()

        def build_entries(cls, *keys: str) -> list:
            return [cls.from_dict(i) for i in _records(d, *keys)]

        return Resume(
            profile=Profile.from_dict(_mapping(d, "profile")),
            work_experiences=build_entries(WorkExperience, "work_experiences", "workExperiences"),
            educations=build_entries(Education, "educations"),
            projects=build_entries(Project, "projects"),
            skills=Skills.from_dict(_mapping(d, "skills")),
            custom=Custom.from_dict(_mapping(d, "custom")),
        )
