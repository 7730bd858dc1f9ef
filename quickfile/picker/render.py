"""Screen rendering for the picker panel.

Pure functions: they read panel state and return text, never mutate it
(apart from scrolling the list window to keep the selection visible).
"""

from __future__ import annotations

from ..navigation.entries import EntryKind, NavigationEntry
from ..terminal.ansi import clip_ansi_line
from ..terminal.theme import UITheme
from .panel import PickerPanel

PROMPT = "> "
SELECTED_MARKER = "▸ "
UNSELECTED_MARKER = "  "


def entry_text(entry: NavigationEntry) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return f"{entry.label}/"
    return entry.label


def _entry_style(entry: NavigationEntry, theme: UITheme) -> str:
    if entry.kind is EntryKind.UP:
        return theme.entry_up
    if entry.kind is EntryKind.DIRECTORY:
        return theme.entry_directory
    return theme.entry_leaf


def render_query_row(panel: PickerPanel, theme: UITheme, width: int) -> str:
    if panel.query:
        body = f"{theme.query}{panel.query}{theme.reset}"
    else:
        body = f"{theme.placeholder}{panel.options.placeholder}{theme.reset}"
    return clip_ansi_line(f"{theme.prompt}{PROMPT}{theme.reset}{body}", width)


def render_entry_row(entry: NavigationEntry, selected: bool, theme: UITheme, width: int) -> str:
    style = _entry_style(entry, theme)
    text = entry_text(entry)
    if selected:
        row = f"{theme.selected_marker}{SELECTED_MARKER}{theme.reset}{theme.selected_row}{style}{text}{theme.reset}"
    else:
        row = f"{UNSELECTED_MARKER}{style}{text}{theme.reset}"
    return clip_ansi_line(row, width)


def render_status_row(status: str, theme: UITheme, width: int) -> str:
    return clip_ansi_line(f"{theme.status}{status}{theme.reset}", width)


def render_picker_rows(
    panel: PickerPanel,
    theme: UITheme,
    width: int,
    height: int,
    status: str,
) -> list[str]:
    """Return exactly ``height`` rows: query, entry list, status line."""
    if height <= 0:
        return []
    rows = [render_query_row(panel, theme, width)]
    list_rows = max(0, height - 2)
    panel.ensure_selection_visible(list_rows)
    window = panel.matches[panel.list_start : panel.list_start + list_rows]
    for offset, entry in enumerate(window):
        rows.append(render_entry_row(entry, panel.list_start + offset == panel.selected, theme, width))
    while len(rows) < height - 1:
        rows.append("")
    if height > 1:
        rows.append(render_status_row(status, theme, width))
    return rows[:height]


def compose_screen(rows: list[str]) -> str:
    """Join rows into one full-screen repaint payload."""
    out = ["\x1b[H"]
    for idx, row in enumerate(rows):
        out.append(f"\x1b[{idx + 1};1H\x1b[2K{row}")
    return "".join(out)


__all__ = [
    "entry_text",
    "render_query_row",
    "render_entry_row",
    "render_status_row",
    "render_picker_rows",
    "compose_screen",
]
