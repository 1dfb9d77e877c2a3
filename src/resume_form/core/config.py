"""Configuration for the resume form core.

Defines the tunable parameters for the line-list codecs, the capability probe
and the default field validation policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

from .loader import load_toml

logger = logging.getLogger(__name__)

VALIDATION_POLICIES = ("immediate", "deferred")


@dataclass
class FormConfig:
    """Configuration parameters for the editing core.

    Attributes:
        bullet_marker: Visible marker prefixed to lines in the plain-text fallback
        show_bullet_points: Default bullet display for sections without a setting
        fallback_engines: User-agent tokens whose editors need the plain-text fallback
        fallback_excluded_engines: Tokens that cancel a fallback match (Chrome also says Safari)
        validation_policy: "deferred" (after first blur) or "immediate"
    """

    bullet_marker: str = "•"
    show_bullet_points: bool = True
    fallback_engines: tuple[str, ...] = ("Firefox", "Safari")
    fallback_excluded_engines: tuple[str, ...] = ("Chrome",)
    validation_policy: str = "deferred"

    def __post_init__(self) -> None:
        if len(self.bullet_marker) != 1:
            raise ValueError(f"bullet_marker must be a single character, got {self.bullet_marker!r}")
        if self.validation_policy not in VALIDATION_POLICIES:
            raise ValueError(f"Unknown validation policy: {self.validation_policy}")
        self.fallback_engines = tuple(self.fallback_engines)
        self.fallback_excluded_engines = tuple(self.fallback_excluded_engines)

    @classmethod
    def from_toml(cls, path: Path) -> FormConfig:
        """Read the optional ``[resume_form]`` table; unknown keys are ignored."""
        table = load_toml(Path(path)).get("resume_form", {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in table.items() if k in known})
