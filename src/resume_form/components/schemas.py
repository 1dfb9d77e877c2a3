"""Field rules for every form of the résumé document."""

from __future__ import annotations

from ..core.errors import UnknownFieldError
from ..core.types import FormType, as_form
from .constraints import (
    Email,
    FieldRule,
    LineList,
    MaxLength,
    NumberRange,
    Pattern,
    Predicate,
    Required,
    Url,
)

Rules = dict[str, FieldRule]

# Presence is Required's job, so the character patterns accept the empty string.
# Single-line inputs: blanks are allowed, line breaks are not.
_BLANK = r"[^\S\r\n]"
_NAME_CHARS = rf"^(?:[^\W\d_]|{_BLANK}|['-])*$"
_COMPANY_CHARS = rf"^(?:[a-zA-Z0-9&.,'-]|{_BLANK})*$"
_JOB_TITLE_CHARS = rf"^(?:[a-zA-Z0-9&.,'/()-]|{_BLANK})*$"
_DATE_CHARS = rf"^(?:[a-zA-Z0-9,-]|{_BLANK})*$"
_PHONE = r"^\+?[1-9]\d{0,15}$"

DESCRIPTIONS = FieldRule((LineList("Descriptions must be a list of single lines"),))


def _required_text(label: str, max_length: int) -> FieldRule:
    return FieldRule((
        Required(f"{label} is required"),
        MaxLength(max_length, f"{label} must be less than {max_length} characters"),
    ))


PROFILE_RULES: Rules = {
    "name": FieldRule((
        Required("Name is required"),
        MaxLength(100, "Name must be less than 100 characters"),
        Pattern(_NAME_CHARS, "Name can only contain letters, spaces, hyphens, and apostrophes"),
    )),
    "email": FieldRule((
        Email("Please enter a valid email address"),
        Predicate(lambda v: "@" in v, "Email must contain @ symbol"),
    ), allow_empty=True),
    "phone": FieldRule((
        Pattern(_PHONE, "Please enter a valid phone number (e.g., +1234567890)"),
    ), allow_empty=True),
    "url": FieldRule((
        Url("Please enter a valid URL (e.g., https://example.com)"),
        Predicate(lambda v: v.startswith("http"), "URL must start with http:// or https://"),
    ), allow_empty=True),
    "summary": FieldRule((MaxLength(500, "Summary must be less than 500 characters"),), allow_empty=True),
    "location": FieldRule((MaxLength(100, "Location must be less than 100 characters"),), allow_empty=True),
}

WORK_EXPERIENCE_RULES: Rules = {
    "company": FieldRule((
        *_required_text("Company name", 100).constraints,
        Pattern(_COMPANY_CHARS, "Company name contains invalid characters"),
    )),
    "job_title": FieldRule((
        *_required_text("Job title", 100).constraints,
        Pattern(_JOB_TITLE_CHARS, "Job title contains invalid characters"),
    )),
    "date": FieldRule((
        *_required_text("Date", 50).constraints,
        Pattern(_DATE_CHARS, "Date format is invalid (e.g., 'Jan 2020 - Present')"),
    )),
    "descriptions": DESCRIPTIONS,
}

EDUCATION_RULES: Rules = {
    "school": _required_text("School name", 100),
    "degree": _required_text("Degree", 100),
    "gpa": FieldRule(allow_empty=True),
    "date": _required_text("Date", 50),
    "descriptions": DESCRIPTIONS,
}

PROJECT_RULES: Rules = {
    "project": _required_text("Project name", 100),
    "date": _required_text("Date", 50),
    "descriptions": DESCRIPTIONS,
}

FEATURED_SKILL_RULES: Rules = {
    "skill": FieldRule((MaxLength(50, "Skill name must be less than 50 characters"),)),
    "rating": FieldRule((NumberRange(0, 5, "Rating must be between 0 and 5"),)),
}

SKILLS_RULES: Rules = {
    "descriptions": DESCRIPTIONS,
}

CUSTOM_RULES: Rules = {
    "descriptions": DESCRIPTIONS,
}

SECTION_RULES: dict[FormType, Rules] = {
    FormType.PROFILE: PROFILE_RULES,
    FormType.WORK_EXPERIENCES: WORK_EXPERIENCE_RULES,
    FormType.EDUCATIONS: EDUCATION_RULES,
    FormType.PROJECTS: PROJECT_RULES,
    FormType.SKILLS: SKILLS_RULES,
    FormType.CUSTOM: CUSTOM_RULES,
}


def rule_for(form: FormType, field_name: str) -> FieldRule:
    """Look up the rule behind one input; featured skill fields live under skills."""
    form = as_form(form)
    rules = SECTION_RULES[form]
    if field_name in rules:
        return rules[field_name]
    if form == FormType.SKILLS and field_name in FEATURED_SKILL_RULES:
        return FEATURED_SKILL_RULES[field_name]
    raise UnknownFieldError(f"No rule for field {field_name!r} of {form.value}")
