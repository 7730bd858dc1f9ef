"""Turn raw listing names into selectable picker entries.

The listing endpoint carries no file/directory flag, so classification is a
pure name heuristic: a child whose final segment has both a stem and an
extension is a leaf, everything else is a directory. Directories with a dot
in their name (``my.module``) are therefore reported as leaves.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..location import Location

UP_LABEL = ".."


class EntryKind(enum.Enum):
    UP = "up"
    DIRECTORY = "directory"
    LEAF = "leaf"


@dataclass(frozen=True)
class NavigationEntry:
    """One selectable picker row and the action it performs."""

    label: str
    kind: EntryKind
    location: Location
    run: Callable[[], None] = field(compare=False, repr=False)

    @property
    def is_terminal(self) -> bool:
        return self.kind is EntryKind.LEAF


def classify_name(location: Location) -> EntryKind:
    """Classify a child location as leaf or directory from its name alone."""
    if location.ext and location.stem:
        return EntryKind.LEAF
    return EntryKind.DIRECTORY


class EntryBuilder:
    """Build ordered entries for one listing, binding actions to callbacks."""

    def __init__(
        self,
        descend: Callable[[Location], None],
        ascend: Callable[[], None],
        open_leaf: Callable[[Location], None],
    ) -> None:
        self._descend = descend
        self._ascend = ascend
        self._open_leaf = open_leaf

    def _child_entry(self, name: str, child: Location) -> NavigationEntry:
        kind = classify_name(child)
        if kind is EntryKind.LEAF:
            return NavigationEntry(name, kind, child, lambda: self._open_leaf(child))
        return NavigationEntry(name, kind, child, lambda: self._descend(child))

    def build(
        self,
        names: Sequence[str],
        current_location: Location,
        stack_non_empty: bool,
        *,
        up_target: Location | None = None,
    ) -> list[NavigationEntry]:
        """Return the Up entry (when ``stack_non_empty``) then one entry per name.

        ``up_target`` is where the Up action lands (the stack top); without it
        the Up entry points at ``current_location.parent``.

        Child order follows ``names`` exactly; nothing is sorted or deduplicated.
        """
        entries: list[NavigationEntry] = []
        if stack_non_empty:
            entries.append(
                NavigationEntry(
                    UP_LABEL,
                    EntryKind.UP,
                    up_target if up_target is not None else current_location.parent,
                    self._ascend,
                )
            )
        for name in names:
            entries.append(self._child_entry(name, current_location.join(name)))
        return entries


__all__ = ["UP_LABEL", "EntryKind", "NavigationEntry", "EntryBuilder", "classify_name"]
