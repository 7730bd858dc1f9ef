"""Picker collaborator: the host protocol plus the terminal implementation.

The navigation core only depends on :class:`PickerHost`; the panel,
fuzzy matcher and renderer make up the terminal host used by the CLI.
"""

from .host import DEFAULT_PLACEHOLDER, EntryProvider, PickerHost, PickerOptions
from .fuzzy import fuzzy_match_labels, fuzzy_score
from .panel import PickerPanel
from .render import compose_screen, render_picker_rows

__all__ = [
    "DEFAULT_PLACEHOLDER",
    "EntryProvider",
    "PickerHost",
    "PickerOptions",
    "fuzzy_match_labels",
    "fuzzy_score",
    "PickerPanel",
    "compose_screen",
    "render_picker_rows",
]
