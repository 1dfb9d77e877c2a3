"""Document state - the owned model behind the résumé form.

Holds the résumé, the form settings and the config for one editing session,
and is the only place they are mutated.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ..components.aggregator import validate_document, validate_section
from ..components.collection import EntryCollection
from ..components.field_validator import make_field_validator
from ..components.line_codec import select_codec
from ..components.schemas import rule_for
from ..interfaces.codec import LineListCodec
from ..interfaces.collection import SectionCollection
from ..interfaces.validator import FieldValidator
from .config import FormConfig
from .errors import UnknownFieldError
from .loader import load_snapshot
from .model import Education, FeaturedSkill, Project, Resume, WorkExperience
from .settings import FormSettings
from .types import (
    ENTRY_SECTIONS,
    AggregateResult,
    Direction,
    FieldUpdate,
    FormType,
    as_form,
)

logger = logging.getLogger(__name__)

_BLANK_ENTRIES = {
    FormType.WORK_EXPERIENCES: WorkExperience,
    FormType.EDUCATIONS: Education,
    FormType.PROJECTS: Project,
    FormType.SKILLS: FeaturedSkill,
}


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True)
class DocumentSnapshot:
    """Read-only copy of the document handed to the renderer and storage."""

    resume: Mapping[str, Any]
    settings: Mapping[str, Any]


class DocumentState:
    """Résumé, form settings and config for one editing session.

    Args:
        resume: Starting document; a blank one with one entry per section if omitted
        settings: Starting form settings; defaults if omitted
        config: Editing core configuration

    Public API:
        - add_entry / remove_entry / move_entry: ordered section entries
        - update_field(FieldUpdate): the single field write path
        - set_visible / set_heading / reorder_section: section settings
        - codec_for / field_validator: per-widget helpers
        - validate_section / validate_document: aggregate checks
        - snapshot(): immutable hand-off value

    Invariants:
        - Every mutation runs under one lock, so read-then-write operations
          (moves, reorders) never interleave
        - Stale indices are no-ops, never errors
    """

    def __init__(
        self,
        resume: Resume | None = None,
        settings: FormSettings | None = None,
        config: FormConfig | None = None,
    ):
        self.config = config or FormConfig()
        self.resume = resume if resume is not None else Resume.initial()
        self.settings = settings if settings is not None else FormSettings()
        self._lock = threading.RLock()

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any] | None, config: FormConfig | None = None) -> DocumentState:
        """Restore from a persisted snapshot, repairing anything malformed.

        Accepts ``{"resume": ..., "settings": ...}`` or a bare résumé mapping.
        """
        if data is None:
            return cls(config=config)
        data = dict(data) if isinstance(data, Mapping) else {}
        if "resume" in data or "settings" in data:
            resume_data, settings_data = data.get("resume"), data.get("settings")
        else:
            resume_data, settings_data = data, None
        state = cls(
            resume=Resume.from_dict(resume_data if resume_data is not None else {}),
            settings=FormSettings.from_dict(settings_data),
            config=config,
        )
        logger.info(
            f"Restored document with {len(state.resume.work_experiences)} work experience(s), "
            f"{len(state.resume.educations)} education(s), {len(state.resume.projects)} project(s)"
        )
        return state

    @classmethod
    def load(cls, path: str | Path, config: FormConfig | None = None) -> DocumentState:
        return cls.from_snapshot(load_snapshot(Path(path)), config=config)

    # -- section entries ------------------------------------------------

    def collection(self, form: FormType | str) -> SectionCollection:
        """Entry collection of a section; for skills, its featured skills."""
        form = as_form(form)
        if form in ENTRY_SECTIONS:
            return EntryCollection(getattr(self.resume, form.value), name=form.value)
        if form == FormType.SKILLS:
            return EntryCollection(self.resume.skills.featured_skills, name="featured_skills")
        raise ValueError(f"{form.value} has no entry collection")

    def add_entry(self, form: FormType | str) -> None:
        form = as_form(form)
        with self._lock:
            self.collection(form).append(_BLANK_ENTRIES[form]())

    def remove_entry(self, form: FormType | str, idx: int) -> None:
        with self._lock:
            self.collection(form).remove_at(idx)

    def move_entry(self, form: FormType | str, idx: int, direction: Direction | str) -> None:
        with self._lock:
            self.collection(form).move_at(idx, direction)

    def update_field(self, update: FieldUpdate) -> None:
        """Write one field. Never validates; out-of-range indices are ignored."""
        form = as_form(update.form)
        with self._lock:
            if update.index is not None:
                self.collection(form).update_field(update.index, update.field, update.value)
                return
            if form in ENTRY_SECTIONS:
                raise ValueError(f"Updates to {form.value} need an entry index")
            record = {
                FormType.PROFILE: self.resume.profile,
                FormType.SKILLS: self.resume.skills,
                FormType.CUSTOM: self.resume.custom,
            }[form]
            # featured skills are edited through their index, never replaced wholesale
            names = {f.name for f in fields(record)} - {"featured_skills"}
            if update.field not in names:
                raise UnknownFieldError(f"{form.value} has no field {update.field!r}")
            value = list(update.value) if isinstance(update.value, list) else update.value
            setattr(record, update.field, value)
            logger.debug(f"Updated {form.value}.{update.field}")

    def set_field(self, form: FormType | str, field_name: str, value: Any, index: int | None = None) -> None:
        self.update_field(FieldUpdate(as_form(form), field_name, value, index))

    # -- section settings -----------------------------------------------

    def set_visible(self, section: FormType | str, visible: bool) -> None:
        with self._lock:
            self.settings.set_visible(section, visible)

    def set_heading(self, section: FormType | str, heading: str) -> None:
        with self._lock:
            self.settings.set_heading(section, heading)

    def reorder_section(self, section: FormType | str, direction: Direction | str) -> None:
        with self._lock:
            self.settings.reorder(section, direction)

    def set_show_bullet_points(self, section: FormType | str, show: bool) -> None:
        with self._lock:
            self.settings.set_show_bullet_points(section, show)

    def set_setting(self, name: str, value: str) -> None:
        with self._lock:
            self.settings.set_setting(name, value)

    # -- per-widget helpers ---------------------------------------------

    def codec_for(self, form: FormType | str, needs_fallback: bool) -> LineListCodec:
        """Codec for one bullet list widget of form, chosen once at mount."""
        form = as_form(form)
        show = self.settings.bullets_for(form) if form != FormType.PROFILE else self.config.show_bullet_points
        return select_codec(needs_fallback, show_bullet_points=show, config=self.config)

    def field_validator(
        self, form: FormType | str, field_name: str, value: Any = "", policy: str | None = None
    ) -> FieldValidator:
        return make_field_validator(rule_for(form, field_name), value, policy=policy, config=self.config)

    # -- read side ------------------------------------------------------

    def validate_section(self, form: FormType | str, idx: int | None = None) -> AggregateResult:
        with self._lock:
            return validate_section(self.resume, form, idx)

    def validate_document(self, only_visible: bool = True) -> AggregateResult:
        with self._lock:
            return validate_document(self.resume, self.settings if only_visible else None)

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            return {"resume": self.resume.to_dict(), "settings": self.settings.to_dict()}

    def snapshot(self) -> DocumentSnapshot:
        data = self.to_dict()
        return DocumentSnapshot(resume=_freeze(data["resume"]), settings=_freeze(data["settings"]))
