"""Unit tests for form visibility, headings and ordering."""

from types import MappingProxyType

import pytest

from resume_form.core.errors import UnknownSectionError
from resume_form.core.settings import DEFAULT_HEADINGS, FormSettings
from resume_form.core.types import SECTION_TYPES, Direction, FormType


@pytest.fixture
def settings():
    """Default form settings."""
    return FormSettings()


def test_defaults(settings):
    """Test default order, visibility and headings."""
    assert settings.order == list(SECTION_TYPES)
    assert all(settings.visible[form] for form in SECTION_TYPES)
    assert settings.headings[FormType.WORK_EXPERIENCES] == "WORK EXPERIENCE"
    assert settings.headings[FormType.CUSTOM] == "CUSTOM SECTION"
    assert settings.render["font_family"] == "Roboto"


def test_reorder_moves_one_slot(settings):
    """Test moving a section down and back up."""
    settings.reorder(FormType.EDUCATIONS, Direction.DOWN)
    assert settings.order[:3] == [FormType.WORK_EXPERIENCES, FormType.PROJECTS, FormType.EDUCATIONS]
    settings.reorder("educations", "up")
    assert settings.order == list(SECTION_TYPES)


def test_reorder_at_boundaries_is_noop(settings):
    """Test that the first cannot move up and the last cannot move down."""
    settings.reorder(FormType.WORK_EXPERIENCES, Direction.UP)
    settings.reorder(FormType.CUSTOM, Direction.DOWN)
    assert settings.order == list(SECTION_TYPES)


def test_order_stays_a_permutation(settings):
    """Test that many reorders never add or drop a section."""
    for i in range(50):
        section = SECTION_TYPES[i % len(SECTION_TYPES)]
        settings.reorder(section, Direction.DOWN if i % 3 else Direction.UP)
    assert sorted(settings.order) == sorted(SECTION_TYPES)
    assert len(settings.order) == len(SECTION_TYPES)


def test_first_last_eligibility(settings):
    """Test the is-first/is-last queries behind the move controls."""
    assert settings.is_first(FormType.WORK_EXPERIENCES)
    assert settings.is_last(FormType.CUSTOM)
    assert not settings.can_reorder(FormType.WORK_EXPERIENCES, Direction.UP)
    assert settings.can_reorder(FormType.WORK_EXPERIENCES, Direction.DOWN)
    settings.reorder(FormType.CUSTOM, Direction.UP)
    assert settings.is_last(FormType.SKILLS)
    assert settings.can_reorder(FormType.CUSTOM, Direction.DOWN)


def test_visibility_and_active_sections(settings):
    """Test hiding a section removes it from the active order only."""
    settings.set_visible(FormType.PROJECTS, False)
    assert FormType.PROJECTS not in settings.active_sections()
    assert FormType.PROJECTS in settings.order


def test_set_heading(settings):
    """Test renaming a section heading."""
    settings.set_heading("skills", "TOOLBOX")
    assert settings.headings[FormType.SKILLS] == "TOOLBOX"


def test_profile_is_not_a_section(settings):
    """Test that the profile has no section settings."""
    with pytest.raises(UnknownSectionError):
        settings.set_visible(FormType.PROFILE, False)
    with pytest.raises(UnknownSectionError):
        settings.reorder("hobbies", Direction.UP)


def test_bullet_points_toggle(settings):
    """Test per-section bullet display."""
    settings.set_show_bullet_points(FormType.CUSTOM, False)
    assert settings.bullets_for(FormType.CUSTOM) is False
    assert settings.bullets_for(FormType.WORK_EXPERIENCES) is True
    with pytest.raises(ValueError):
        settings.set_show_bullet_points(FormType.WORK_EXPERIENCES, False)


def test_set_render_setting(settings):
    """Test pass-through render settings."""
    settings.set_setting("theme_color", "#000000")
    assert settings.render["theme_color"] == "#000000"
    with pytest.raises(KeyError):
        settings.set_setting("margin", "1in")


def test_from_dict_accepts_camel_case():
    """Test restoring the older camelCase settings layout."""
    settings = FormSettings.from_dict({
        "themeColor": "#ff0000",
        "formToShow": {"workExperiences": False, "custom": True},
        "formToHeading": {"educations": "SCHOOLING"},
        "formsOrder": ["custom", "skills", "projects", "educations", "workExperiences"],
        "showBulletPoints": {"projects": False},
    })
    assert settings.render["theme_color"] == "#ff0000"
    assert settings.visible[FormType.WORK_EXPERIENCES] is False
    assert settings.headings[FormType.EDUCATIONS] == "SCHOOLING"
    assert settings.headings[FormType.SKILLS] == DEFAULT_HEADINGS[FormType.SKILLS]
    assert settings.order == list(reversed(SECTION_TYPES))
    assert settings.bullets_for(FormType.PROJECTS) is False


def test_from_dict_repairs_order():
    """Test that duplicates and unknowns drop and missing sections append."""
    settings = FormSettings.from_dict({"order": ["skills", "skills", "hobbies", "profile"]})
    assert settings.order == [
        FormType.SKILLS,
        FormType.WORK_EXPERIENCES,
        FormType.EDUCATIONS,
        FormType.PROJECTS,
        FormType.CUSTOM,
    ]


def test_from_dict_wrong_shapes_fall_back_to_defaults():
    """Test that malformed values are replaced by defaults."""
    settings = FormSettings.from_dict({
        "order": "skills",
        "visible": ["custom"],
        "headings": {"skills": 42},
        "render": "dark",
    })
    assert settings == FormSettings()
    assert FormSettings.from_dict(None) == FormSettings()
    assert FormSettings.from_dict("nope") == FormSettings()


def test_to_dict_round_trip(settings):
    """Test that to_dict output restores the same settings."""
    settings.reorder(FormType.SKILLS, Direction.UP)
    settings.set_visible(FormType.CUSTOM, False)
    settings.set_heading(FormType.PROJECTS, "SIDE PROJECTS")
    assert FormSettings.from_dict(settings.to_dict()) == settings


def test_from_dict_accepts_frozen_snapshot(settings):
    """Test restoring from read-only mappings and tuples."""
    settings.set_visible(FormType.CUSTOM, False)
    settings.reorder(FormType.SKILLS, "up")
    settings.set_setting("theme_color", "#000000")
    data = settings.to_dict()
    frozen = MappingProxyType({
        "visible": MappingProxyType(data["visible"]),
        "headings": MappingProxyType(data["headings"]),
        "order": tuple(data["order"]),
        "show_bullet_points": MappingProxyType(data["show_bullet_points"]),
        "render": MappingProxyType(data["render"]),
    })
    assert FormSettings.from_dict(frozen) == settings
