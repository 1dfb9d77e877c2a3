"""Per-field validation policies built on the pure evaluator.

Both policies only compute results; the value itself is always written to
the document by the caller, valid or not.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.config import FormConfig
from ..core.types import FieldResult
from ..interfaces.validator import FieldValidator
from .constraints import FieldRule, validate

logger = logging.getLogger(__name__)


class ImmediateFieldValidator:
    """Re-validates on every change."""

    def __init__(self, rule: FieldRule, value: Any = ""):
        self.rule = rule
        self._value = value
        self._result = validate(rule, value)

    @property
    def result(self) -> FieldResult:
        return self._result

    def change(self, value: Any) -> FieldResult:
        self._value = value
        self._result = validate(self.rule, value)
        return self._result

    def blur(self) -> FieldResult:
        return self._result


class DeferredFieldValidator:
    """Shows nothing until the field has lost focus once.

    Typing into a fresh required field would otherwise flash "is required"
    before the user has finished the first word. After the first blur the
    validator is armed and re-validates on every change.
    """

    def __init__(self, rule: FieldRule, value: Any = ""):
        self.rule = rule
        self.armed = False
        self._value = value
        self._result = FieldResult.ok()

    @property
    def result(self) -> FieldResult:
        return self._result

    def change(self, value: Any) -> FieldResult:
        self._value = value
        if self.armed:
            self._result = validate(self.rule, value)
        return self._result

    def blur(self) -> FieldResult:
        if not self.armed:
            logger.debug("Deferred validator armed")
        self.armed = True
        self._result = validate(self.rule, self._value)
        return self._result


def make_field_validator(
    rule: FieldRule,
    value: Any = "",
    policy: str | None = None,
    config: FormConfig | None = None,
) -> FieldValidator:
    """Build the validator for one input; policy defaults to the config's."""
    policy = policy or (config or FormConfig()).validation_policy
    if policy == "immediate":
        return ImmediateFieldValidator(rule, value)
    if policy == "deferred":
        return DeferredFieldValidator(rule, value)
    raise ValueError(f"Unknown validation policy: {policy}")
