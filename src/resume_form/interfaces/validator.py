"""Protocol definitions for field constraints and validators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..core.types import FieldResult


class Constraint(Protocol):
    """One declarative check on a value."""

    message: str

    def check(self, value: Any) -> bool:
        """Return True if value satisfies the constraint. Never raises."""
        ...


class FieldValidator(Protocol):
    """Consumption policy wrapped around a field rule."""

    @property
    def result(self) -> FieldResult:
        """Result currently shown for the field."""
        ...

    def change(self, value: Any) -> FieldResult:
        """Record a new value for the field."""
        ...

    def blur(self) -> FieldResult:
        """Record that the field lost focus."""
        ...
