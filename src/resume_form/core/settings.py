"""Form display settings: per-section visibility, headings and order.

Also carries the rendering settings (theme colour, font, document size) that
the editor passes through to the renderer untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict

from .types import SECTION_TYPES, Direction, FormType, as_section, is_sequence

logger = logging.getLogger(__name__)

DEFAULT_HEADINGS: dict[FormType, str] = {
    FormType.WORK_EXPERIENCES: "WORK EXPERIENCE",
    FormType.EDUCATIONS: "EDUCATION",
    FormType.PROJECTS: "PROJECT",
    FormType.SKILLS: "SKILLS",
    FormType.CUSTOM: "CUSTOM SECTION",
}

# Work experiences always show bullets; the other sections can turn them off.
BULLET_TOGGLE_SECTIONS: tuple[FormType, ...] = (
    FormType.EDUCATIONS,
    FormType.PROJECTS,
    FormType.SKILLS,
    FormType.CUSTOM,
)

RENDER_SETTINGS: dict[str, str] = {
    "theme_color": "#38bdf8",
    "font_family": "Roboto",
    "font_size": "11",
    "document_size": "Letter",
}

_CAMEL_KEYS = {
    "theme_color": "themeColor",
    "font_family": "fontFamily",
    "font_size": "fontSize",
    "document_size": "documentSize",
}

# Section keys as written by older camelCase snapshots.
_CAMEL_SECTIONS = {"workExperiences": FormType.WORK_EXPERIENCES}


def _section_key(key: Any) -> FormType | None:
    if key in _CAMEL_SECTIONS:
        return _CAMEL_SECTIONS[key]
    try:
        form = FormType(key)
    except ValueError:
        return None
    return form if form in SECTION_TYPES else None


def _section_map(raw: Any, name: str, kind: type) -> dict[FormType, Any]:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(f"Setting {name!r} is {type(raw).__name__}, not a mapping; using defaults")
        return {}
    result = {}
    for key, value in raw.items():
        form = _section_key(key)
        if form is None:
            continue
        if not isinstance(value, kind):
            logger.warning(f"Setting {name}[{key}] is {type(value).__name__}; using default")
            continue
        result[form] = value
    return result


def _repair_order(raw: Any) -> list[FormType]:
    """Keep the known section types in stored order, then append the missing ones."""
    order: list[FormType] = []
    if is_sequence(raw):
        for key in raw:
            form = _section_key(key)
            if form is not None and form not in order:
                order.append(form)
    elif raw is not None:
        logger.warning(f"Section order is {type(raw).__name__}, not a list; using default order")
    missing = [form for form in SECTION_TYPES if form not in order]
    if missing and raw is not None:
        logger.warning(f"Section order was missing {', '.join(f.value for f in missing)}")
    return order + missing


@dataclass
class FormSettings:
    """Per-section display settings plus the global presentation order.

    Invariants:
        - ``order`` is always a permutation of SECTION_TYPES
        - Every section type has a visibility flag and a heading
    """

    visible: dict[FormType, bool] = field(default_factory=lambda: {f: True for f in SECTION_TYPES})
    headings: dict[FormType, str] = field(default_factory=lambda: dict(DEFAULT_HEADINGS))
    order: list[FormType] = field(default_factory=lambda: list(SECTION_TYPES))
    show_bullet_points: dict[FormType, bool] = field(
        default_factory=lambda: {f: True for f in BULLET_TOGGLE_SECTIONS}
    )
    render: dict[str, str] = field(default_factory=lambda: dict(RENDER_SETTINGS))

    def set_visible(self, section: FormType | str, visible: bool) -> None:
        self.visible[as_section(section)] = bool(visible)

    def set_heading(self, section: FormType | str, heading: str) -> None:
        self.headings[as_section(section)] = heading

    def reorder(self, section: FormType | str, direction: Direction | str) -> None:
        """Move section one slot in direction; no-op at either end."""
        section = as_section(section)
        direction = Direction(direction)
        idx = self.order.index(section)
        target = idx + direction.offset
        if not 0 <= target < len(self.order):
            logger.debug(f"Ignoring reorder of {section.value} {direction.value}: at boundary")
            return
        self.order[idx], self.order[target] = self.order[target], self.order[idx]
        logger.debug(f"Moved {section.value} {direction.value}")

    def is_first(self, section: FormType | str) -> bool:
        return self.order[0] == as_section(section)

    def is_last(self, section: FormType | str) -> bool:
        return self.order[-1] == as_section(section)

    def can_reorder(self, section: FormType | str, direction: Direction | str) -> bool:
        if Direction(direction) is Direction.UP:
            return not self.is_first(section)
        return not self.is_last(section)

    def active_sections(self) -> list[FormType]:
        """Visible sections in presentation order."""
        return [form for form in self.order if self.visible[form]]

    def set_show_bullet_points(self, section: FormType | str, show: bool) -> None:
        section = as_section(section)
        if section not in BULLET_TOGGLE_SECTIONS:
            raise ValueError(f"{section.value} always shows bullet points")
        self.show_bullet_points[section] = bool(show)

    def bullets_for(self, section: FormType | str) -> bool:
        return self.show_bullet_points.get(as_section(section), True)

    def set_setting(self, name: str, value: str) -> None:
        if name not in RENDER_SETTINGS:
            raise KeyError(f"Unknown render setting: {name}")
        self.render[name] = value

    @staticmethod
    def from_dict(d: Mapping[str, Any] | None) -> "FormSettings":
        settings = FormSettings()
        if not isinstance(d, Mapping):
            if d is not None:
                logger.warning(f"Settings snapshot is {type(d).__name__}, not a mapping; using defaults")
            return settings

        def pick(key: str, camel: str) -> Any:
            return d.get(key, d.get(camel))

        settings.visible.update(_section_map(pick("visible", "formToShow"), "visible", bool))
        settings.headings.update(_section_map(pick("headings", "formToHeading"), "headings", str))
        settings.order = _repair_order(pick("order", "formsOrder"))
        bullets = _section_map(pick("show_bullet_points", "showBulletPoints"), "show_bullet_points", bool)
        settings.show_bullet_points.update(
            {form: show for form, show in bullets.items() if form in BULLET_TOGGLE_SECTIONS}
        )
        render = d.get("render")
        if not isinstance(render, Mapping):
            render = d
        for name in RENDER_SETTINGS:
            value = render.get(name, render.get(_CAMEL_KEYS[name]))
            if isinstance(value, str):
                settings.render[name] = value
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visible": {form.value: show for form, show in self.visible.items()},
            "headings": {form.value: heading for form, heading in self.headings.items()},
            "order": [form.value for form in self.order],
            "show_bullet_points": {form.value: show for form, show in self.show_bullet_points.items()},
            "render": dict(self.render),
        }
