"""Contract between the navigation core and whatever renders the picker."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..navigation.entries import NavigationEntry

DEFAULT_PLACEHOLDER = "Type file name..."

EntryProvider = Callable[[str], "Sequence[NavigationEntry]"]


@dataclass(frozen=True)
class PickerOptions:
    """Presentation options understood by picker hosts."""

    fuzzy_match_label: bool = True
    placeholder: str = DEFAULT_PLACEHOLDER


class PickerHost(Protocol):
    """Host surface that filters and renders entries pulled from a provider.

    ``show`` replaces whatever the host was displaying. The host calls
    ``provider(query)`` whenever its query changes and fuzzy-matches the
    returned labels itself; selecting a row means calling ``entry.run()``.
    """

    def show(self, provider: EntryProvider, options: PickerOptions) -> None: ...

    def close(self) -> None: ...


__all__ = ["DEFAULT_PLACEHOLDER", "EntryProvider", "PickerHost", "PickerOptions"]
