"""Exception hierarchy for the resume form core.

Out-of-range indices and constraint violations are not errors and never
raise; these exceptions cover programming mistakes and unreadable snapshots.
"""

from __future__ import annotations


class ResumeFormError(Exception):
    """Base exception for all resume form errors."""
    pass


class SnapshotError(ResumeFormError):
    """Raised when a persisted snapshot cannot be read at all."""
    pass


class UnknownFieldError(ResumeFormError, KeyError):
    """Raised when an update names a field the record type does not have."""
    pass


class UnknownSectionError(ResumeFormError, ValueError):
    """Raised when a value does not name a known section type."""
    pass
