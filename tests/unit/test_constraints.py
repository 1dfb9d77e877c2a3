"""Unit tests for field constraints and the rule evaluator."""

import pytest

from resume_form.components.constraints import (
    Email,
    FieldRule,
    LineList,
    MaxLength,
    MinLength,
    NumberRange,
    Pattern,
    Predicate,
    Required,
    Url,
    validate,
    violations,
)
from resume_form.components.schemas import (
    PROFILE_RULES,
    WORK_EXPERIENCE_RULES,
    rule_for,
)
from resume_form.core.errors import UnknownFieldError, UnknownSectionError
from resume_form.core.types import FieldResult, FormType


def test_validate_passes():
    """Test a value that satisfies every constraint."""
    assert validate(PROFILE_RULES["name"], "Jane O'Neil-Smith") == FieldResult(True, None)


def test_validate_first_failure_wins():
    """Test that only the first violated constraint is reported."""
    rule = FieldRule((
        Required("required"),
        MaxLength(3, "too long"),
        Pattern(r"^[a-z]*$", "lowercase only"),
    ))
    result = validate(rule, "ABCDE")
    assert result.is_valid is False
    assert result.error == "too long"


def test_violations_collects_everything():
    """Test that every violated constraint is reported in order."""
    rule = FieldRule((
        Required("required"),
        MaxLength(3, "too long"),
        Pattern(r"^[a-z]*$", "lowercase only"),
    ))
    assert violations(rule, "ABCDE") == ["too long", "lowercase only"]
    assert violations(rule, "abc") == []


def test_validate_does_not_mutate_value():
    """Test that validation leaves the value untouched."""
    lines = ["a", "b\nc"]
    validate(FieldRule((LineList("bad"),)), lines)
    assert lines == ["a", "b\nc"]


def test_allow_empty_skips_constraints():
    """Test that an optional field accepts the empty string."""
    assert validate(PROFILE_RULES["email"], "").is_valid
    assert validate(PROFILE_RULES["phone"], "").is_valid
    assert violations(PROFILE_RULES["url"], "") == []


@pytest.mark.parametrize(
    "field, value, error",
    [
        ("name", "", "Name is required"),
        ("name", "x" * 101, "Name must be less than 100 characters"),
        ("name", "R2D2", "Name can only contain letters, spaces, hyphens, and apostrophes"),
        ("email", "not-an-email", "Please enter a valid email address"),
        ("phone", "(123)456-7890", "Please enter a valid phone number (e.g., +1234567890)"),
        ("url", "example.com", "Please enter a valid URL (e.g., https://example.com)"),
        ("url", "ftp://example.com", "Please enter a valid URL (e.g., https://example.com)"),
        ("summary", "x" * 501, "Summary must be less than 500 characters"),
        ("location", "x" * 101, "Location must be less than 100 characters"),
    ],
)
def test_profile_rule_messages(field, value, error):
    """Test the profile rules report the expected message."""
    assert validate(PROFILE_RULES[field], value) == FieldResult(False, error)


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "José Álvarez"),
        ("email", "hello@khanacademy.org"),
        ("phone", "+1234567890"),
        ("url", "https://linkedin.com/in/khanacademy"),
        ("location", "NYC, NY"),
    ],
)
def test_profile_rule_accepts(field, value):
    """Test typical valid profile values."""
    assert validate(PROFILE_RULES[field], value).is_valid


def test_work_experience_patterns_leave_presence_to_required():
    """Test that an empty company reports only the required message."""
    assert violations(WORK_EXPERIENCE_RULES["company"], "") == ["Company name is required"]


def test_work_experience_date_format():
    """Test the date pattern on a typical and an invalid date."""
    assert validate(WORK_EXPERIENCE_RULES["date"], "Jun 2022 - Present").is_valid
    assert validate(WORK_EXPERIENCE_RULES["date"], "06/2022").error == (
        "Date format is invalid (e.g., 'Jan 2020 - Present')"
    )


def test_constraints_never_raise_on_wrong_types():
    """Test that odd values fail the constraint instead of raising."""
    assert Required("r").check(None) is False
    assert Required("r").check(5) is True
    assert MinLength(1, "m").check(42) is False
    assert MaxLength(1, "m").check(None) is True
    assert Pattern(r".", "p").check(["a"]) is False
    assert Email("e").check(None) is False
    assert Url("u").check(3.14) is False
    assert Url("u").check("http://[bad") is False
    assert Predicate(lambda v: v.startswith("x"), "p").check(None) is False


def test_number_range():
    """Test the rating range, rejecting booleans and text."""
    rating = NumberRange(0, 5, "bad rating")
    assert rating.check(0) and rating.check(5) and rating.check(4.5)
    assert not rating.check(6)
    assert not rating.check(True)
    assert not rating.check("4")


def test_line_list():
    """Test that line lists reject embedded breaks and non-lists."""
    check = LineList("bad").check
    assert check([])
    assert check(["a", "b"])
    assert not check(["a\nb"])
    assert not check(["a\rb"])
    assert not check("a")
    assert not check([1])


def test_rule_for_featured_skill_fields():
    """Test that skill and rating resolve under the skills form."""
    assert validate(rule_for(FormType.SKILLS, "skill"), "x" * 51).error == (
        "Skill name must be less than 50 characters"
    )
    assert validate(rule_for("skills", "rating"), 9).error == "Rating must be between 0 and 5"


def test_rule_for_unknown_field_and_form():
    """Test lookup errors for unknown names."""
    with pytest.raises(UnknownFieldError):
        rule_for(FormType.PROFILE, "nickname")
    with pytest.raises(UnknownSectionError):
        rule_for("hobbies", "name")


def test_non_http_url_reports_both_messages():
    """Test that a non-http scheme violates format and prefix rules."""
    assert violations(PROFILE_RULES["url"], "ftp://example.com") == [
        "Please enter a valid URL (e.g., https://example.com)",
        "URL must start with http:// or https://",
    ]


@pytest.mark.parametrize(
    "value",
    [
        "hello@khanacademy.org\n",
        "Sal <hello@khanacademy.org>",
        "hello@@khanacademy.org",
        "hello@",
        " hello@khanacademy.org",
    ],
)
def test_email_rejects_malformed_addresses(value):
    """Test addresses a single email field must not accept."""
    assert validate(PROFILE_RULES["email"], value).error == "Please enter a valid email address"


@pytest.mark.parametrize("value", ["https://khanacademy.org\n", "https://khan academy.org", "//khanacademy.org"])
def test_url_rejects_malformed_values(value):
    """Test URLs with blanks or without a scheme."""
    assert validate(PROFILE_RULES["url"], value).error == "Please enter a valid URL (e.g., https://example.com)"


@pytest.mark.parametrize(
    "rules, field, value",
    [
        (PROFILE_RULES, "phone", "+1234567890\n"),
        (PROFILE_RULES, "name", "Sal Khan\n"),
        (WORK_EXPERIENCE_RULES, "company", "Khan Academy\n"),
        (WORK_EXPERIENCE_RULES, "job_title", "Software Engineer\n"),
        (WORK_EXPERIENCE_RULES, "date", "Jun 2022 - Present\n"),
    ],
)
def test_patterns_reject_trailing_newline(rules, field, value):
    """Test that a trailing line break fails the whole-value pattern."""
    assert not validate(rules[field], value).is_valid
    assert validate(rules[field], value.rstrip("\n")).is_valid


def test_pattern_matches_whole_value():
    """Test that a partial match is not enough."""
    digits = Pattern(r"\d+", "digits only")
    assert digits.check("123")
    assert not digits.check("123abc")
    assert not digits.check("123\n")
