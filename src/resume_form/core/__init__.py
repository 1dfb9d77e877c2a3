"""Resume form core package."""

from .settings import FormSettings
from .state import DocumentSnapshot, DocumentState

__all__ = ["DocumentState", "DocumentSnapshot", "FormSettings"]
