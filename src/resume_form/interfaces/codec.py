"""Protocol definition for line-list codecs."""

from __future__ import annotations

from typing import Protocol


class LineListCodec(Protocol):
    """Two-way mapping between a line list and an editing surface's text."""

    def encode(self, lines: list[str]) -> str:
        """Render lines into the surface representation. Pure and total."""
        ...

    def decode(self, surface: str) -> list[str]:
        """Read the lines back from an edited surface. Total over all strings."""
        ...
