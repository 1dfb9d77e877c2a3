"""Resume form - editable bullet lists, section management and validation for a résumé builder."""

from .core.config import FormConfig
from .core.errors import (
    ResumeFormError,
    SnapshotError,
    UnknownFieldError,
    UnknownSectionError,
)
from .core.model import (
    Custom,
    Education,
    FeaturedSkill,
    Profile,
    Project,
    Resume,
    Skills,
    WorkExperience,
)
from .core.settings import FormSettings
from .core.state import DocumentSnapshot, DocumentState
from .core.types import (
    SECTION_TYPES,
    AggregateResult,
    Direction,
    FieldError,
    FieldResult,
    FieldUpdate,
    FormType,
)

__all__ = [
    "FormConfig",
    "ResumeFormError",
    "SnapshotError",
    "UnknownFieldError",
    "UnknownSectionError",
    "Custom",
    "Education",
    "FeaturedSkill",
    "Profile",
    "Project",
    "Resume",
    "Skills",
    "WorkExperience",
    "FormSettings",
    "DocumentSnapshot",
    "DocumentState",
    "SECTION_TYPES",
    "AggregateResult",
    "Direction",
    "FieldError",
    "FieldResult",
    "FieldUpdate",
    "FormType",
]
