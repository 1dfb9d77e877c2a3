"""Ordered entry collection for repeatable résumé sections.

Operates in place on the list it is given, so the document's own lists stay
the single source of truth.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..core.errors import UnknownFieldError
from ..core.types import Direction

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntryCollection(Generic[T]):
    """Ordered sequence of entry records for one section type.

    Args:
        items: The list to operate on (not copied)
        name: Section name used in log messages

    Invariants:
        - Out-of-range indices are silent no-ops; a stale index from a
          just-removed entry must not fail a queued click
        - Entries not targeted by an operation keep identity and content
        - No minimum size; hiding the last delete control is the caller's policy
    """

    def __init__(self, items: list[T], name: str = "entries"):
        self._items = items
        self.name = name

    def _in_range(self, idx: int) -> bool:
        return 0 <= idx < len(self._items)

    def append(self, entry: T) -> None:
        """Insert entry at the end."""
        self._items.append(entry)
        logger.debug(f"Appended entry to {self.name} (now {len(self._items)})")

    def remove_at(self, idx: int) -> None:
        """Remove the entry at idx."""
        if not self._in_range(idx):
            logger.debug(f"Ignoring remove of {self.name}[{idx}]: out of range")
            return
        del self._items[idx]
        logger.debug(f"Removed {self.name}[{idx}]")

    def move_at(self, idx: int, direction: Direction | str) -> None:
        """Swap the entry at idx with its neighbour in direction."""
        direction = Direction(direction)
        target = idx + direction.offset
        if not (self._in_range(idx) and self._in_range(target)):
            logger.debug(f"Ignoring move of {self.name}[{idx}] {direction.value}: at boundary")
            return
        self._items[idx], self._items[target] = self._items[target], self._items[idx]
        logger.debug(f"Moved {self.name}[{idx}] {direction.value}")

    def update_field(self, idx: int, field_name: str, value: Any) -> None:
        """Replace one field of the entry at idx. Does not validate."""
        if not self._in_range(idx):
            logger.debug(f"Ignoring update of {self.name}[{idx}].{field_name}: out of range")
            return
        entry = self._items[idx]
        if field_name not in {f.name for f in fields(entry)}:
            raise UnknownFieldError(f"{type(entry).__name__} has no field {field_name!r}")
        if isinstance(value, list):
            value = list(value)
        setattr(entry, field_name, value)

    def can_move(self, idx: int, direction: Direction | str) -> bool:
        """Whether a move control should be offered for idx."""
        return self._in_range(idx) and self._in_range(idx + Direction(direction).offset)

    def can_delete(self) -> bool:
        """The form hides delete while a single entry remains."""
        return len(self._items) > 1

    def __getitem__(self, idx: int) -> T:
        return self._items[idx]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
