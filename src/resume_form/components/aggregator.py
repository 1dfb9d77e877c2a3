"""Exhaustive validation of whole sections and documents.

Unlike the per-field validator, which stops at the first violation, these
walk every field and report every violated constraint, for readiness
summaries before export.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..core.types import ENTRY_SECTIONS, AggregateResult, FieldError, FormType, as_form
from .constraints import violations
from .schemas import FEATURED_SKILL_RULES, SECTION_RULES, Rules

if TYPE_CHECKING:
    from ..core.model import Resume
    from ..core.settings import FormSettings

logger = logging.getLogger(__name__)


def _record_errors(record: Any, rules: Rules, prefix: str = "") -> list[FieldError]:
    errors: list[FieldError] = []
    for field_name, rule in rules.items():
        value = getattr(record, field_name, None)
        for message in violations(rule, value):
            errors.append({"field": f"{prefix}{field_name}", "message": message})
    return errors


def _entries(resume: Resume, form: FormType) -> list[Any]:
    return getattr(resume, form.value)


def section_errors(resume: Resume, form: FormType | str, idx: int | None = None) -> list[FieldError]:
    """Every violation in one form; field paths are relative to the form."""
    form = as_form(form)
    rules = SECTION_RULES[form]

    if form in ENTRY_SECTIONS:
        entries = _entries(resume, form)
        if idx is None:
            errors: list[FieldError] = []
            for i, entry in enumerate(entries):
                errors.extend(_record_errors(entry, rules, prefix=f"{i}."))
            return errors
        if not 0 <= idx < len(entries):
            logger.debug(f"No {form.value}[{idx}] to validate")
            return []
        return _record_errors(entries[idx], rules)

    if form == FormType.PROFILE:
        return _record_errors(resume.profile, rules)

    if form == FormType.SKILLS:
        errors = []
        for i, skill in enumerate(resume.skills.featured_skills):
            if idx is not None and i != idx:
                continue
            errors.extend(_record_errors(skill, FEATURED_SKILL_RULES, prefix=f"featured_skills.{i}."))
        errors.extend(_record_errors(resume.skills, rules))
        return errors

    return _record_errors(resume.custom, rules)


def validate_section(resume: Resume, form: FormType | str, idx: int | None = None) -> AggregateResult:
    """Aggregate result for one form, or one entry of it when idx is given."""
    return AggregateResult.from_errors(section_errors(resume, form, idx))


def validate_document(resume: Resume, settings: FormSettings | None = None) -> AggregateResult:
    """Aggregate result for the whole document, profile first then sections.

    With settings, hidden sections are skipped and sections follow the
    presentation order.
    """
    forms = [FormType.PROFILE]
    forms.extend(settings.active_sections() if settings is not None else
                 [f for f in FormType if f is not FormType.PROFILE])

    errors: list[FieldError] = []
    for form in forms:
        for error in section_errors(resume, form):
            errors.append({"field": f"{form.value}.{error['field']}", "message": error["message"]})
    result = AggregateResult.from_errors(errors)
    logger.debug(f"Document validation: {len(errors)} error(s)")
    return result
