"""LIFO history of visited directory locations used for "go up"."""

from __future__ import annotations

from collections.abc import Iterator

from ..location import Location


class PathStack:
    """Append/pop-at-tail stack of parent locations.

    Each pushed entry is the directory the user was in when they descended,
    so the tail is always the parent of the current location. Duplicates are
    kept: revisiting a directory pushes it again.
    """

    def __init__(self, locations: list[Location] | None = None) -> None:
        self._items: list[Location] = list(locations or [])

    def push(self, location: Location) -> None:
        self._items.append(location)

    def pop(self) -> Location | None:
        """Remove and return the tail, or ``None`` when the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Location | None:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> list[Location]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"PathStack({[str(item) for item in self._items]!r})"
