"""Common type definitions for the resume form core.

Defines the section identifiers, move directions, validation results and the
tagged field update shared across all components.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypedDict

from .errors import UnknownSectionError


class FormType(str, Enum):
    """Every form the editor shows, including the singular profile."""

    PROFILE = "profile"
    WORK_EXPERIENCES = "work_experiences"
    EDUCATIONS = "educations"
    PROJECTS = "projects"
    SKILLS = "skills"
    CUSTOM = "custom"


# Section types take part in show/hide, headings and ordering; profile does not.
SECTION_TYPES: tuple[FormType, ...] = (
    FormType.WORK_EXPERIENCES,
    FormType.EDUCATIONS,
    FormType.PROJECTS,
    FormType.SKILLS,
    FormType.CUSTOM,
)

# Sections whose entries live in an ordered collection of records.
ENTRY_SECTIONS: tuple[FormType, ...] = (
    FormType.WORK_EXPERIENCES,
    FormType.EDUCATIONS,
    FormType.PROJECTS,
)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"

    @property
    def offset(self) -> int:
        return -1 if self is Direction.UP else 1


class FieldError(TypedDict):
    """One violated constraint in an aggregate validation result."""
    field: str
    message: str


@dataclass(frozen=True)
class FieldResult:
    """Outcome of checking one value: the first violated message, if any."""

    is_valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> FieldResult:
        return cls(True)

    @classmethod
    def fail(cls, message: str) -> FieldResult:
        return cls(False, message)


@dataclass(frozen=True)
class AggregateResult:
    """Outcome of checking a whole section entry: every violation, in order."""

    is_valid: bool
    errors: list[FieldError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> AggregateResult:
        return cls(not errors, errors)


@dataclass(frozen=True)
class FieldUpdate:
    """A single edit addressed to one field of one form.

    ``index`` selects the entry for work experiences, educations and projects,
    and the featured skill for the skills form. It is ``None`` for fields of
    the singular records (profile, skills descriptions, custom).
    """

    form: FormType
    field: str
    value: Any
    index: int | None = None


def as_form(value: FormType | str) -> FormType:
    try:
        return FormType(value)
    except ValueError as e:
        raise UnknownSectionError(f"Unknown form: {value!r}") from e


def as_section(value: FormType | str) -> FormType:
    """Like ``as_form`` but rejects the profile, which has no section settings."""
    form = as_form(value)
    if form not in SECTION_TYPES:
        raise UnknownSectionError(f"{form.value} is not a section type")
    return form


def is_sequence(value: Any) -> bool:
    """A list-like value such as a list or a frozen snapshot's tuple, but not text."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
