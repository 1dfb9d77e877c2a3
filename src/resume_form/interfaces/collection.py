"""Protocol definition for ordered section collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Direction

T = TypeVar("T")


class SectionCollection(Protocol[T]):
    """Ordered sequence of entry records for one section type.

    Out-of-range indices are silent no-ops for every mutating operation.
    """

    def append(self, entry: T) -> None:
        """Insert entry at the end."""
        ...

    def remove_at(self, idx: int) -> None:
        """Remove the entry at idx."""
        ...

    def move_at(self, idx: int, direction: Direction) -> None:
        """Swap the entry at idx with its neighbour in direction."""
        ...

    def update_field(self, idx: int, field_name: str, value: Any) -> None:
        """Replace one field of the entry at idx."""
        ...

    def can_move(self, idx: int, direction: Direction) -> bool:
        ...

    def can_delete(self) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[T]:
        ...
