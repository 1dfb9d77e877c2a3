"""Declarative field constraints and the pure evaluator over them.

A field's rule is an ordered tuple of constraints. ``validate`` reports the
first violated constraint, for live feedback while typing; ``violations``
reports every violated constraint, for readiness summaries. Neither raises,
and neither touches the value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

from ..core.types import FieldResult
from ..interfaces.validator import Constraint

_EMAIL_ADAPTER = TypeAdapter(EmailStr)
_HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)


def _as_text(value: Any) -> str | None:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return None


def _has_space(text: str) -> bool:
    return any(c.isspace() for c in text)


@dataclass(frozen=True)
class Required:
    message: str

    def check(self, value: Any) -> bool:
        if value is None:
            return False
        try:
            return len(value) > 0
        except TypeError:
            return True


@dataclass(frozen=True)
class MinLength:
    length: int
    message: str

    def check(self, value: Any) -> bool:
        text = _as_text(value)
        return text is not None and len(text) >= self.length


@dataclass(frozen=True)
class MaxLength:
    length: int
    message: str

    def check(self, value: Any) -> bool:
        text = _as_text(value)
        return text is not None and len(text) <= self.length


@dataclass(frozen=True)
class Pattern:
    """The whole value must match ``regex``; a trailing newline is not ignored."""

    regex: str
    message: str
    flags: int = 0

    def check(self, value: Any) -> bool:
        text = _as_text(value)
        return text is not None and re.fullmatch(self.regex, text, self.flags) is not None


@dataclass(frozen=True)
class Email:
    message: str

    def check(self, value: Any) -> bool:
        text = _as_text(value)
        # a field holds one bare address, never the "Name <addr>" form
        if not text or _has_space(text) or "<" in text:
            return False
        try:
            _EMAIL_ADAPTER.validate_python(text)
        except ValidationError:
            return False
        return True


@dataclass(frozen=True)
class Url:
    """An absolute http(s) URL."""

    message: str

    def check(self, value: Any) -> bool:
        text = _as_text(value)
        if not text or _has_space(text):
            return False
        try:
            _HTTP_URL_ADAPTER.validate_python(text)
        except ValidationError:
            return False
        return True


@dataclass(frozen=True)
class NumberRange:
    minimum: float
    maximum: float
    message: str

    def check(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class LineList:
    """A list of text lines, none of which carries its own line break."""

    message: str

    def check(self, value: Any) -> bool:
        if not isinstance(value, list):
            return False
        return all(isinstance(line, str) and "\n" not in line and "\r" not in line for line in value)


@dataclass(frozen=True)
class Predicate:
    func: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> bool:
        try:
            return bool(self.func(value))
        except (TypeError, AttributeError, ValueError):
            return False


@dataclass(frozen=True)
class FieldRule:
    """Ordered constraints for one field.

    Args:
        constraints: Checked in declared order
        allow_empty: The empty string passes regardless of constraints
    """

    constraints: tuple[Constraint, ...] = field(default_factory=tuple)
    allow_empty: bool = False

    def skips(self, value: Any) -> bool:
        return self.allow_empty and (value is None or value == "")


def validate(rule: FieldRule, value: Any) -> FieldResult:
    """Check value against rule; the first violated constraint wins."""
    if rule.skips(value):
        return FieldResult.ok()
    for constraint in rule.constraints:
        if not constraint.check(value):
            return FieldResult.fail(constraint.message)
    return FieldResult.ok()


def violations(rule: FieldRule, value: Any) -> list[str]:
    """Every violated constraint's message, in declared order."""
    if rule.skips(value):
        return []
    return [c.message for c in rule.constraints if not c.check(value)]
